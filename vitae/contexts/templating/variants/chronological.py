"""
Chronological template.

Centered Times header above a two-column body. The sidebar carries contact
details, skills, education, certifications, languages, interests and volunteer
work; the main column carries the summary, experience and projects.
"""

from vitae.contexts.templating.document_tree import Detail, Entry
from vitae.contexts.templating.resume_data_structure import EducationEntry
from vitae.contexts.templating.variants.base import TemplateVariant, format_date_range


class ChronologicalTemplate(TemplateVariant):
    name = "chronological"
    display_name = "Chronological"
    layout = "sidebar"
    sidebar_order = (
        "contact",
        "skills",
        "education",
        "certifications",
        "languages",
        "interests",
        "volunteer",
    )
    section_order = ("summary", "experience", "projects")
    section_titles = {
        "summary": "About",
        "experience": "Professional Experience",
    }
    contact_separator = " | "
    header_link_fields = ("linkedin", "github", "website")
    link_separator = " | "
    certificate_link_label = "View"

    def education_entry(self, education: EducationEntry) -> Entry:
        details = [Detail(text=education.gpa, label="GPA")] if education.gpa else []
        return Entry(
            title=education.degree_title,
            subtitle=education.institution,
            date=format_date_range(education.start_date, education.end_date, "-"),
            details=details,
        )
