"""
Classic (ATS-friendly) template.

Single left-aligned column with plain section rules and no icons, tags or
graphics, so applicant tracking systems can read it back reliably. The default
template, and the fallback for unknown or missing template names.
"""

from vitae.contexts.templating.document_tree import Detail, Entry
from vitae.contexts.templating.resume_data_structure import EducationEntry
from vitae.contexts.templating.variants.base import TemplateVariant, format_date_range


class ClassicTemplate(TemplateVariant):
    name = "classic"
    display_name = "ATS-Friendly"
    uppercase_name = True
    section_titles = {
        "summary": "Professional Summary",
        "experience": "Work Experience",
    }
    contact_separator = " | "
    header_link_fields = ("linkedin", "github", "website")
    link_separator = " | "
    technologies_label = "Technologies"
    certificate_link_label = "View Certificate →"

    def education_entry(self, education: EducationEntry) -> Entry:
        details = [Detail(text=education.gpa, label="GPA")] if education.gpa else []
        return Entry(
            title=education.degree_title,
            subtitle=education.institution,
            date=format_date_range(education.start_date, education.end_date, " - "),
            details=details,
        )
