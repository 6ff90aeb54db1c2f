"""
Creative template.

Colorful single column in purple with emoji section icons and contact icons.
Project technologies render as discrete tags; a comma-separated string is split
into one tag per technology.
"""

from typing import List

from vitae.contexts.templating.document_tree import ContactItem, Entry
from vitae.contexts.templating.resume_data_structure import PersonalInfo, ProjectEntry
from vitae.contexts.templating.variants.base import TemplateVariant


class CreativeTemplate(TemplateVariant):
    name = "creative"
    display_name = "Creative"
    section_titles = {"summary": "About Me"}
    section_icons = {
        "summary": "✨",
        "experience": "💼",
        "projects": "🚀",
        "skills": "⚡",
        "education": "🎓",
        "certifications": "🏆",
    }
    project_link_icons = ("🌐", "💻")
    certificate_link_label = "View Certificate →"

    def header_contact(self, personal_info: PersonalInfo) -> List[ContactItem]:
        icons_and_values = (
            ("✉", personal_info.email),
            ("📱", personal_info.phone),
            ("📍", personal_info.location),
        )
        return [ContactItem(value, icon=icon) for icon, value in icons_and_values if value]

    def project_entry(self, project: ProjectEntry) -> Entry:
        entry = super().project_entry(project)
        entry.details = []
        entry.tags = list(project.technologies.tags())
        return entry
