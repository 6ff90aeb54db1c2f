"""
Template Variant Base

Shared contract for every template variant: a pure function from ResumeData to a
Document. The base class owns data interpretation (visibility, per-entry presence,
skill classification, date ranges, link collection); subclasses only choose layout,
wording and typography by overriding class attributes and the entry hooks.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from vitae.contexts.templating.document_tree import (
    ContactItem,
    Detail,
    Document,
    Entry,
    Header,
    Link,
    Paragraph,
    Section,
    SectionItem,
    SkillRow,
    TextItem,
)
from vitae.contexts.templating.resume_data_structure import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ProjectEntry,
    ResumeData,
    VolunteerEntry,
)
from vitae.contexts.templating.skill_classifier import classify_skill_groups
from vitae.contexts.templating.themes import ThemeRegistry
from vitae.contexts.templating.visibility import (
    PRESENCE_FIELDS,
    SectionVisibility,
    non_blank_strings,
    present_entries,
)

PRESENT = "Present"

# Personal-info field -> link label
PROFILE_LINK_LABELS = {
    "linkedin": "LinkedIn",
    "github": "GitHub",
    "website": "Website",
}

DEFAULT_SECTION_TITLES = {
    "contact": "Contact",
    "summary": "Summary",
    "experience": "Experience",
    "projects": "Projects",
    "skills": "Skills",
    "education": "Education",
    "certifications": "Certifications",
    "languages": "Languages",
    "interests": "Interests",
    "volunteer": "Volunteer",
}


def format_date_range(start: str, end: str, separator: str) -> str:
    """Join start and end dates with the variant's separator, e.g. "2020 - 2023"."""
    return f"{start}{separator}{end}"


def experience_date_range(entry: ExperienceEntry, separator: str) -> str:
    """Date range of a job; a current job always ends in "Present", whatever end_date says."""
    end = PRESENT if entry.current else entry.end_date
    return format_date_range(entry.start_date, end, separator)


def profile_links(personal_info: PersonalInfo, fields: Sequence[str]) -> List[Link]:
    """Links for the given personal-info fields, skipping empty ones."""
    links = []
    for field_name in fields:
        href = getattr(personal_info, field_name)
        if href:
            links.append(Link(label=PROFILE_LINK_LABELS[field_name], href=href))
    return links


def _or_none(value: str) -> Optional[str]:
    return value if value else None


class TemplateVariant:
    """
    Base class for template variants.

    Class attributes describe the variant's identity:
        name: Template identifier
        display_name: Human-readable name
        layout: "single" or "sidebar"
        section_order: Main-column section kinds in display order
        sidebar_order: Sidebar section kinds in display order (sidebar layouts)
        section_titles: Per-kind titles, merged over DEFAULT_SECTION_TITLES
        section_icons: Per-kind icons shown before titles
        section_prompt: Prompt symbol shown before every title
        uppercase_name: Upper-case the full name in the header
        uppercase_titles: Upper-case section titles
        date_separator: Separator of experience date ranges
        contact_separator: Separator between contact items (None: separate items)
        header_link_fields: Personal-info links shown in the header, in order
        link_separator: Separator between consecutive header links
        technologies_label: Label of the project technologies line
        project_link_labels: Labels of the (link, github) project links
        certificate_link_label: Label of the certificate link (None: no link)
        skill_marker: Text placed before skill labels
        stacked_skills: Skill labels on their own line
        footer: Closing line
    """

    name: str = ""
    display_name: str = ""
    layout: str = "single"
    section_order: Tuple[str, ...] = (
        "summary",
        "experience",
        "projects",
        "skills",
        "education",
        "certifications",
    )
    sidebar_order: Tuple[str, ...] = ()
    section_titles: Dict[str, str] = {}
    section_icons: Dict[str, str] = {}
    section_prompt: Optional[str] = None
    section_groups: Dict[str, str] = {}
    uppercase_name: bool = False
    uppercase_titles: bool = True
    date_separator: str = " - "
    contact_separator: Optional[str] = None
    header_link_fields: Tuple[str, ...] = ("linkedin", "github")
    link_separator: Optional[str] = None
    technologies_label: str = "Tech Stack"
    project_link_labels: Tuple[str, str] = ("Live Demo", "GitHub")
    project_link_icons: Tuple[Optional[str], Optional[str]] = (None, None)
    certificate_link_label: Optional[str] = "View Certificate"
    skill_marker: Optional[str] = None
    stacked_skills: bool = False
    footer: Optional[str] = None

    def __init__(self, theme_registry: ThemeRegistry = None):
        self.theme_registry = theme_registry or ThemeRegistry()

    def render(self, resume_data: ResumeData) -> Document:
        """
        Lay out a resume record.

        Args:
            resume_data: Record to render (never modified)

        Returns:
            Document tree for this variant
        """
        visibility = SectionVisibility.evaluate(resume_data)

        document = Document(
            template=self.name,
            display_name=self.display_name,
            geometry=self.theme_registry.get_geometry(self.name),
            theme=self.theme_registry.get_theme(self.name),
            layout=self.layout,
            footer=self.footer,
        )

        if visibility.header:
            document.header = self.build_header(resume_data.personal_info)

        document.main = self.build_sections(self.section_order, resume_data, visibility)
        document.sidebar = self.build_sections(self.sidebar_order, resume_data, visibility)
        return document

    # Sections

    def build_sections(
        self, kinds: Sequence[str], resume_data: ResumeData, visibility: SectionVisibility
    ) -> List[Section]:
        sections = []
        for kind in kinds:
            if not getattr(visibility, kind):
                continue
            sections.append(
                Section(
                    kind=kind,
                    title=self.section_title(kind),
                    items=self.build_items(kind, resume_data),
                    icon=self.section_icons.get(kind),
                    prompt=self.section_prompt,
                    group=self.section_groups.get(kind),
                )
            )
        return sections

    def section_title(self, kind: str) -> str:
        title = {**DEFAULT_SECTION_TITLES, **self.section_titles}[kind]
        return title.upper() if self.uppercase_titles else title

    def build_items(self, kind: str, resume_data: ResumeData) -> List[SectionItem]:
        """Content of one visible section."""
        if kind == "summary":
            return [Paragraph(resume_data.summary)]
        if kind == "contact":
            return self.contact_items(resume_data.personal_info)
        if kind == "skills":
            return self.skill_rows(resume_data)
        if kind in ("languages", "interests"):
            return [TextItem(value) for value in non_blank_strings(getattr(resume_data, kind))]

        entry_builders = {
            "experience": self.experience_entry,
            "projects": self.project_entry,
            "education": self.education_entry,
            "certifications": self.certification_entry,
            "volunteer": self.volunteer_entry,
        }
        entries = present_entries(getattr(resume_data, kind), PRESENCE_FIELDS[kind])
        return [entry_builders[kind](entry) for entry in entries]

    def skill_rows(self, resume_data: ResumeData) -> List[SkillRow]:
        groups = present_entries(resume_data.skills, PRESENCE_FIELDS["skills"])
        return [
            SkillRow(line=line, marker=self.skill_marker, stacked=self.stacked_skills)
            for line in classify_skill_groups(groups)
        ]

    def contact_items(self, personal_info: PersonalInfo) -> List[TextItem]:
        values = (personal_info.email, personal_info.phone, personal_info.location)
        return [TextItem(value) for value in values if value]

    # Header

    def build_header(self, personal_info: PersonalInfo) -> Header:
        name = personal_info.full_name
        return Header(
            name=name.upper() if self.uppercase_name else name,
            contact=self.header_contact(personal_info),
            contact_separator=self.contact_separator,
            links=profile_links(personal_info, self.header_link_fields),
            link_separator=self.link_separator,
        )

    def header_contact(self, personal_info: PersonalInfo) -> List[ContactItem]:
        values = (personal_info.email, personal_info.phone, personal_info.location)
        return [ContactItem(value) for value in values if value]

    # Entries

    def experience_entry(self, entry: ExperienceEntry) -> Entry:
        return Entry(
            title=entry.position,
            subtitle=entry.company,
            date=experience_date_range(entry, self.date_separator),
            bullets=[line for line in entry.description if line],
        )

    def project_entry(self, project: ProjectEntry) -> Entry:
        details = []
        if project.technologies:
            details.append(Detail(text=project.technologies.joined(), label=self.technologies_label))
        return Entry(
            title=project.name,
            description=_or_none(project.description),
            details=details,
            links=self.project_links(project),
        )

    def project_links(self, project: ProjectEntry) -> List[Link]:
        links = []
        for href, label, icon in zip(
            (project.link, project.github), self.project_link_labels, self.project_link_icons
        ):
            if href:
                links.append(Link(label=label, href=href, icon=icon))
        return links

    def education_entry(self, education: EducationEntry) -> Entry:
        date = format_date_range(education.start_date, education.end_date, "-")
        if education.gpa:
            date += f" • GPA: {education.gpa}"
        return Entry(
            title=education.degree_title,
            subtitle=_or_none(education.institution),
            date=date,
        )

    def certification_entry(self, certification: CertificationEntry) -> Entry:
        links = []
        if certification.link and self.certificate_link_label:
            links.append(Link(label=self.certificate_link_label, href=certification.link))
        return Entry(
            title=certification.name,
            subtitle=_or_none(certification.issuer),
            date=_or_none(certification.date),
            links=links,
        )

    def volunteer_entry(self, volunteer: VolunteerEntry) -> Entry:
        return Entry(
            title=volunteer.role,
            subtitle=_or_none(volunteer.organization),
            date=_or_none(volunteer.date),
        )
