"""
Technical template.

Dark "terminal" theme in monospace. Section titles read like shell commands behind
a `$` prompt, bullets are `>` and skill categories are written as `# Label:`
comments. Skills come right after the summary.
"""

from typing import List

from vitae.contexts.templating.document_tree import ContactItem, Entry, Header, Link
from vitae.contexts.templating.resume_data_structure import (
    CertificationEntry,
    EducationEntry,
    PersonalInfo,
    ProjectEntry,
)
from vitae.contexts.templating.variants.base import TemplateVariant, format_date_range

PROMPT = "developer@resume:~$"


class TechnicalTemplate(TemplateVariant):
    name = "technical"
    display_name = "Technical"
    section_order = (
        "summary",
        "skills",
        "experience",
        "projects",
        "education",
        "certifications",
    )
    section_titles = {
        "summary": "cat about.txt",
        "skills": "ls skills/",
        "experience": "cat experience.log",
        "projects": "git log --projects",
        "education": "cat education.md",
        "certifications": "ls certifications/",
    }
    section_prompt = "$"
    uppercase_titles = False
    technologies_label = "// Tech Stack"
    certificate_link_label = "View Certificate →"
    skill_marker = "#"
    footer = "// End of resume"

    def build_header(self, personal_info: PersonalInfo) -> Header:
        header = super().build_header(personal_info)
        header.prompt = PROMPT
        header.stacked_contact = True
        # Links print their full URL after a "LinkedIn:" style prefix
        header.links = [
            Link(label=href, href=href, icon=icon, prefix=prefix)
            for icon, prefix, href in (
                ("🔗", "LinkedIn:", personal_info.linkedin),
                ("💻", "GitHub:", personal_info.github),
            )
            if href
        ]
        return header

    def header_contact(self, personal_info: PersonalInfo) -> List[ContactItem]:
        icons_and_values = (
            ("📧", personal_info.email),
            ("📱", personal_info.phone),
            ("📍", personal_info.location),
        )
        return [ContactItem(value, icon=icon) for icon, value in icons_and_values if value]

    def project_entry(self, project: ProjectEntry) -> Entry:
        entry = super().project_entry(project)
        entry.title_icon = "📦"
        return entry

    def education_entry(self, education: EducationEntry) -> Entry:
        date = format_date_range(education.start_date, education.end_date, "–")
        if education.gpa:
            date += f" | GPA: {education.gpa}"
        return Entry(title=education.degree_title, subtitle=education.institution, date=date)

    def certification_entry(self, certification: CertificationEntry) -> Entry:
        entry = super().certification_entry(certification)
        entry.title_icon = "🏆"
        return entry
