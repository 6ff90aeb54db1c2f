"""
Minimal template.

Thin-weight Helvetica, hairline section rules, en-dash bullets and en-dash date
ranges. Certifications are listed without links.
"""

from vitae.contexts.templating.document_tree import Entry
from vitae.contexts.templating.resume_data_structure import CertificationEntry, EducationEntry
from vitae.contexts.templating.variants.base import TemplateVariant, format_date_range
from vitae.utils.text_processing import join_present


class MinimalTemplate(TemplateVariant):
    name = "minimal"
    display_name = "Minimal"
    date_separator = " – "
    contact_separator = "  ·  "
    header_link_fields = ("linkedin", "github", "website")
    certificate_link_label = None

    def education_entry(self, education: EducationEntry) -> Entry:
        gpa = f"GPA: {education.gpa}" if education.gpa else ""
        return Entry(
            title=education.degree_title,
            subtitle=join_present([education.institution, gpa], " · "),
            date=format_date_range(education.start_date, education.end_date, "–"),
        )

    def certification_entry(self, certification: CertificationEntry) -> Entry:
        return Entry(
            title=certification.name,
            subtitle=join_present([certification.issuer, certification.date], " · ") or None,
        )
