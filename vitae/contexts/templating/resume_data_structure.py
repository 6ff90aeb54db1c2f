"""
Resume Data Structure

Defines the canonical, read-only representation of a resume record. Every template
variant reads from this structure; none of them may change it.

Records arrive from upstream as camelCase dictionaries (the stored-record format).
ResumeData.from_dict() accepts those as well as snake_case keys, tolerates missing
and null fields, and never raises for a mapping input. A missing field only ever
suppresses the section that would show it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.templating.exceptions import InvalidResumeStructureError

SkillItems = Union[str, Tuple[str, ...]]


def _get(data: Mapping[str, Any], *keys: str) -> Any:
    """Return the first non-None value among the given keys."""
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _text(data: Mapping[str, Any], *keys: str) -> str:
    value = _get(data, *keys)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _text_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple("" if item is None else str(item) for item in value)


def _flag(value: Any) -> bool:
    """Real booleans as-is; strings only when they read "true"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _mapping_tuple(value: Any) -> Tuple[Mapping[str, Any], ...]:
    if not value or isinstance(value, (str, bytes)):
        return ()
    return tuple(item if isinstance(item, Mapping) else {} for item in value)


@dataclass(frozen=True)
class Technologies:
    """
    Technologies used on a project.

    Stored records carry either a comma-separated string or a list of strings. The
    shape is recorded once here so templates never have to sniff the type.

    Attributes:
        value: Raw string, or tuple of strings
    """

    value: SkillItems = ""

    @classmethod
    def from_raw(cls, raw: Any) -> "Technologies":
        if raw is None:
            return cls("")
        if isinstance(raw, str):
            return cls(raw)
        return cls(_text_tuple(raw))

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, tuple)

    def joined(self) -> str:
        """Lists are joined with ", ", strings are returned as-is."""
        if self.is_list:
            return ", ".join(self.value)
        return self.value

    def tags(self) -> Tuple[str, ...]:
        """Discrete tags: list items as given, strings split on commas. Blank tags are dropped."""
        raw = self.value if self.is_list else self.value.split(",")
        return tuple(tag.strip() for tag in raw if tag.strip())

    def __bool__(self) -> bool:
        return len(self.value) > 0


@dataclass(frozen=True)
class PersonalInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    website: str = ""
    profile_image: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PersonalInfo":
        return cls(
            full_name=_text(data, "fullName", "full_name"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            location=_text(data, "location"),
            linkedin=_text(data, "linkedin"),
            github=_text(data, "github"),
            website=_text(data, "website"),
            profile_image=_text(data, "profileImage", "profile_image"),
        )


@dataclass(frozen=True)
class SkillGroup:
    """
    Group of skills.

    Attributes:
        items: Either a tuple of strings or one free-text string with newline-separated
               entries such as "Frontend: React, Vue"
        category: Legacy category label kept from stored records (not used for layout)
    """

    items: SkillItems = ()
    category: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillGroup":
        raw_items = data.get("items")
        if raw_items is None:
            items: SkillItems = ()
        elif isinstance(raw_items, str):
            items = raw_items
        else:
            items = _text_tuple(raw_items)
        return cls(items=items, category=_text(data, "category"))


@dataclass(frozen=True)
class ExperienceEntry:
    company: str = ""
    position: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            company=_text(data, "company"),
            position=_text(data, "position"),
            location=_text(data, "location"),
            start_date=_text(data, "startDate", "start_date"),
            end_date=_text(data, "endDate", "end_date"),
            current=_flag(data.get("current")),
            description=_text_tuple(data.get("description")),
        )


@dataclass(frozen=True)
class ProjectEntry:
    name: str = ""
    description: str = ""
    technologies: Technologies = field(default_factory=Technologies)
    link: str = ""
    github: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProjectEntry":
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            technologies=Technologies.from_raw(data.get("technologies")),
            link=_text(data, "link"),
            github=_text(data, "github"),
        )


@dataclass(frozen=True)
class EducationEntry:
    institution: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            institution=_text(data, "institution"),
            degree=_text(data, "degree"),
            field=_text(data, "field"),
            start_date=_text(data, "startDate", "start_date"),
            end_date=_text(data, "endDate", "end_date"),
            gpa=_text(data, "gpa"),
            description=_text(data, "description"),
        )

    @property
    def degree_title(self) -> str:
        """Degree with the field of study appended, e.g. "BSc in Physics"."""
        return f"{self.degree} in {self.field}" if self.field else self.degree


@dataclass(frozen=True)
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    date: str = ""
    link: str = ""
    image_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CertificationEntry":
        return cls(
            name=_text(data, "name"),
            issuer=_text(data, "issuer"),
            date=_text(data, "date"),
            link=_text(data, "link"),
            image_url=_text(data, "imageUrl", "image_url"),
        )


@dataclass(frozen=True)
class VolunteerEntry:
    organization: str = ""
    role: str = ""
    date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VolunteerEntry":
        return cls(
            organization=_text(data, "organization"),
            role=_text(data, "role"),
            date=_text(data, "date"),
        )


@dataclass(frozen=True)
class ResumeData:
    """
    Complete resume record as handed to the templating context.

    Every section is independently optional. The structure is frozen and its
    sequences are tuples, so a render can never alter the record it was given.

    Attributes:
        personal_info: Contact details; None when the record has none at all
        summary: Free-text professional summary
        skills: Skill groups in display order
        experience: Work history entries
        projects: Project entries
        education: Education entries
        certifications: Certification entries
        languages: Spoken languages (free text)
        interests: Personal interests (free text)
        volunteer: Volunteer work entries
        title: Record title from the upstream store
        template: Stored template preference (None for legacy records)
    """

    personal_info: Optional[PersonalInfo] = None
    summary: str = ""
    skills: Tuple[SkillGroup, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    certifications: Tuple[CertificationEntry, ...] = ()
    languages: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    volunteer: Tuple[VolunteerEntry, ...] = ()
    title: str = ""
    template: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeData":
        """
        Build a ResumeData from a stored-record dictionary.

        Args:
            data: Mapping with camelCase (stored) or snake_case keys

        Returns:
            ResumeData instance. Unknown keys are ignored, null values behave like
            missing ones.
        """
        personal = _get(data, "personalInfo", "personal_info")
        template = _get(data, "template")

        return cls(
            personal_info=PersonalInfo.from_dict(personal) if isinstance(personal, Mapping) else None,
            summary=_text(data, "summary"),
            skills=tuple(SkillGroup.from_dict(g) for g in _mapping_tuple(data.get("skills"))),
            experience=tuple(
                ExperienceEntry.from_dict(e) for e in _mapping_tuple(data.get("experience"))
            ),
            projects=tuple(ProjectEntry.from_dict(p) for p in _mapping_tuple(data.get("projects"))),
            education=tuple(
                EducationEntry.from_dict(e) for e in _mapping_tuple(data.get("education"))
            ),
            certifications=tuple(
                CertificationEntry.from_dict(c) for c in _mapping_tuple(data.get("certifications"))
            ),
            languages=_text_tuple(data.get("languages")),
            interests=_text_tuple(data.get("interests")),
            volunteer=tuple(
                VolunteerEntry.from_dict(v) for v in _mapping_tuple(data.get("volunteer"))
            ),
            title=_text(data, "title"),
            template=str(template) if template is not None else None,
        )


def load_resume_data(path: Union[str, Path]) -> ResumeData:
    """
    Load a resume record from a YAML or JSON file.

    Values are read literally: "${...}" in resume text is kept as written and never
    treated as an interpolation.

    Args:
        path: Path to the record file

    Returns:
        ResumeData instance

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidResumeStructureError: If the file cannot be parsed or its root is not a mapping
    """
    if type(path) is str:
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    try:
        loaded = OmegaConf.load(path)
        container: Dict[str, Any] = OmegaConf.to_container(loaded, resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        raise InvalidResumeStructureError(f"Could not parse resume file {path}: {e}") from e

    if not isinstance(container, dict):
        raise InvalidResumeStructureError(
            f"Invalid resume structure in {path}: expected a mapping at the root, "
            f"got {type(container).__name__}"
        )

    return ResumeData.from_dict(container)
