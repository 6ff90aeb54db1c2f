"""
Professional template.

Single column with a centered, upper-cased header, contact details joined by
pipes and black-on-white Calibri typography. Project descriptions render as a
bullet.
"""

from vitae.contexts.templating.document_tree import Detail, Entry, Link
from vitae.contexts.templating.resume_data_structure import (
    CertificationEntry,
    EducationEntry,
    ProjectEntry,
)
from vitae.contexts.templating.variants.base import TemplateVariant


class ProfessionalTemplate(TemplateVariant):
    name = "professional"
    display_name = "Professional"
    uppercase_name = True
    section_titles = {
        "summary": "Professional Summary",
        "experience": "Work Experience",
    }
    contact_separator = " | "
    header_link_fields = ("linkedin", "github", "website")

    def project_entry(self, project: ProjectEntry) -> Entry:
        entry = super().project_entry(project)
        entry.bullets = [entry.description] if entry.description else []
        entry.description = None
        return entry

    def education_entry(self, education: EducationEntry) -> Entry:
        subtitle = education.institution
        if education.start_date or education.end_date:
            subtitle += f", {education.start_date}-{education.end_date}"
        details = [Detail(text=education.gpa, label="GPA")] if education.gpa else []
        return Entry(title=education.degree_title, subtitle=subtitle, details=details)

    def certification_entry(self, certification: CertificationEntry) -> Entry:
        links = []
        if certification.link:
            links.append(Link(label=self.certificate_link_label, href=certification.link))
        return Entry(
            title=f"{certification.name} - {certification.issuer}",
            date=certification.date or None,
            links=links,
        )
