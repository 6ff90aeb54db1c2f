"""
Section Visibility Rules

Decides, once per section and before any layout code runs, whether a section of a
resume renders. Every template variant uses these same rules.

List-valued sections are visible when the list is non-empty and its FIRST entry has
its presence field set. An incomplete first entry hides the whole section even when
later entries are complete; this matches the behavior of stored records and is kept
on purpose.
"""

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from vitae.contexts.templating.resume_data_structure import ResumeData
from vitae.utils.text_processing import is_blank

# Section name -> attribute that decides whether an entry is present
PRESENCE_FIELDS = {
    "skills": "items",
    "experience": "company",
    "projects": "name",
    "education": "institution",
    "certifications": "name",
    "volunteer": "organization",
}


def is_present(entry: Any, presence_field: str) -> bool:
    """True when the entry's presence field is non-empty."""
    value = getattr(entry, presence_field, None)
    if value is None:
        return False
    return len(value) > 0


def list_section_visible(entries: Sequence[Any], presence_field: str) -> bool:
    """Visible iff there is at least one entry and the first one is present."""
    return len(entries) >= 1 and is_present(entries[0], presence_field)


def present_entries(entries: Sequence[Any], presence_field: str) -> Tuple[Any, ...]:
    """
    Entries of a list section that actually render.

    Returns an empty tuple when the section is hidden; otherwise each entry is
    re-checked on its own presence field.
    """
    if not list_section_visible(entries, presence_field):
        return ()
    return tuple(entry for entry in entries if is_present(entry, presence_field))


def non_blank_strings(values: Sequence[str]) -> Tuple[str, ...]:
    """Filter a string-list section down to entries that are non-empty after trimming."""
    return tuple(value for value in values if not is_blank(value))


def header_visible(resume_data: ResumeData) -> bool:
    personal_info = resume_data.personal_info
    return personal_info is not None and bool(personal_info.full_name)


@dataclass(frozen=True)
class SectionVisibility:
    """
    Visibility of every section of one resume record.

    Attributes:
        header: Name/contact header
        contact: Standalone contact block (any personal info at all)
        summary: Free-text summary
        skills, experience, projects, education, certifications, volunteer: List sections
        languages, interests: String-list sections
    """

    header: bool = False
    contact: bool = False
    summary: bool = False
    skills: bool = False
    experience: bool = False
    projects: bool = False
    education: bool = False
    certifications: bool = False
    languages: bool = False
    interests: bool = False
    volunteer: bool = False

    @classmethod
    def evaluate(cls, resume_data: ResumeData) -> "SectionVisibility":
        """Evaluate every section predicate for a record."""
        list_sections = {
            name: list_section_visible(getattr(resume_data, name), presence_field)
            for name, presence_field in PRESENCE_FIELDS.items()
        }
        return cls(
            header=header_visible(resume_data),
            contact=resume_data.personal_info is not None,
            summary=bool(resume_data.summary),
            languages=len(non_blank_strings(resume_data.languages)) > 0,
            interests=len(non_blank_strings(resume_data.interests)) > 0,
            **list_sections,
        )
