"""
Modern template.

Single column with an indigo accent and a circular avatar badge next to the name.
The badge shows the profile image when there is one; otherwise (and whenever the
image fails to load) it shows the first letter of the name.
"""

from vitae.contexts.templating.document_tree import Avatar, Header
from vitae.contexts.templating.resume_data_structure import PersonalInfo
from vitae.contexts.templating.variants.base import TemplateVariant

TAGLINE = "Professional"


class ModernTemplate(TemplateVariant):
    name = "modern"
    display_name = "Modern"
    section_titles = {"summary": "About"}
    contact_separator = " • "

    def build_header(self, personal_info: PersonalInfo) -> Header:
        header = super().build_header(personal_info)
        header.avatar = Avatar(
            initial=personal_info.full_name[0].upper(),
            image=personal_info.profile_image or None,
        )
        # Shown under the name only for records with an email address
        header.tagline = TAGLINE if personal_info.email else None
        return header
