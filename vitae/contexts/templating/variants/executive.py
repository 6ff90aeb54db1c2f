"""
Executive template.

Serif typography under a double-ruled, centered header. Core competencies and
education sit side by side in a two-column grid; certifications are one line each.
"""

from vitae.contexts.templating.document_tree import Entry
from vitae.contexts.templating.resume_data_structure import CertificationEntry, EducationEntry
from vitae.contexts.templating.variants.base import TemplateVariant, format_date_range

GRID = "grid"


class ExecutiveTemplate(TemplateVariant):
    name = "executive"
    display_name = "Executive"
    section_titles = {
        "summary": "Executive Summary",
        "experience": "Professional Experience",
        "projects": "Key Projects",
        "skills": "Core Competencies",
        "certifications": "Professional Certifications",
    }
    section_groups = {"skills": GRID, "education": GRID}
    date_separator = " – "
    header_link_fields = ("linkedin", "github", "website")
    stacked_skills = True

    def education_entry(self, education: EducationEntry) -> Entry:
        date = format_date_range(education.start_date, education.end_date, "–")
        if education.gpa:
            date += f" • GPA: {education.gpa}"
        return Entry(title=education.degree_title, subtitle=education.institution, date=date)

    def certification_entry(self, certification: CertificationEntry) -> Entry:
        return Entry(
            title=certification.name,
            subtitle=certification.issuer or None,
            date=certification.date or None,
            inline=True,
        )
