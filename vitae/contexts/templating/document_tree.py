"""
Document Tree Data Structures

Defines the renderer-agnostic output of a template variant: a page, its header,
its regions and sections, down to individual entries and lines. Serializers in the
rendering context consume these structures; nothing here knows about HTML or text.

All nodes are plain dataclasses, so two renders of the same record compare equal
with ==.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from vitae.contexts.templating.skill_classifier import SkillLine


@dataclass
class PageGeometry:
    """
    Fixed page geometry (A4 by default).

    Attributes:
        width_mm: Page width
        min_height_mm: Minimum page height (content may flow onto further pages)
        padding_mm: Page margin on every side
    """

    width_mm: float = 210.0
    min_height_mm: float = 297.0
    padding_mm: float = 20.0


@dataclass
class Theme:
    """
    Typography and color tokens of a template variant.

    Purely presentational; nothing in the templating context branches on these.
    """

    font_family: str
    base_font_pt: float
    name_font_pt: float
    section_title_pt: float
    text_color: str
    accent_color: str
    background: str
    muted_color: str
    bullet_marker: str
    header_align: str = "left"
    header_rule: str = "none"
    font_weight: int = 400
    tokens: Dict[str, str] = field(default_factory=dict)


@dataclass
class Link:
    """Hyperlink; only ever created for a non-empty href."""

    label: str
    href: str
    icon: Optional[str] = None
    prefix: Optional[str] = None


@dataclass
class ContactItem:
    """Single contact detail (email, phone, location) with an optional icon."""

    text: str
    icon: Optional[str] = None


@dataclass
class Avatar:
    """
    Profile picture badge.

    Attributes:
        initial: First character of the full name, upper-cased; shown when there is
                 no image or the image cannot be loaded
        image: Profile image source (URL, data URI or file path), None if absent
    """

    initial: str
    image: Optional[str] = None


@dataclass
class Header:
    """
    Document header with name and contact details.

    Attributes:
        name: Full name, already transformed per variant (e.g. upper-cased)
        contact: Contact items in display order
        contact_separator: Text placed between contact items (None: laid out as separate items)
        links: Profile links in display order
        link_separator: Text placed between consecutive links (None: spacing only)
        avatar: Optional avatar badge
        tagline: Optional line under the name
        prompt: Optional line above the name (terminal-style variants)
        stacked_contact: Contact items on separate lines
    """

    name: str
    contact: List[ContactItem] = field(default_factory=list)
    contact_separator: Optional[str] = None
    links: List[Link] = field(default_factory=list)
    link_separator: Optional[str] = None
    avatar: Optional[Avatar] = None
    tagline: Optional[str] = None
    prompt: Optional[str] = None
    stacked_contact: bool = False


@dataclass
class Paragraph:
    text: str


@dataclass
class Detail:
    """Labeled detail line inside an entry, e.g. "Tech Stack: Python, Go"."""

    text: str
    label: Optional[str] = None


@dataclass
class Entry:
    """
    One item of a list section (a job, project, degree, certificate, ...).

    Attributes:
        title: Main line (position, project name, degree, ...)
        subtitle: Secondary line (company, institution, issuer, ...)
        date: Date or date-range text
        description: Free-text paragraph
        bullets: Bullet points
        details: Labeled detail lines
        tags: Discrete tags (e.g. technologies as badges)
        links: Links belonging to the entry
        link_separator: Text placed between consecutive links
        title_icon: Optional icon shown before the title
        inline: Title, subtitle and date share one line
    """

    title: str
    subtitle: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    bullets: List[str] = field(default_factory=list)
    details: List[Detail] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    links: List[Link] = field(default_factory=list)
    link_separator: Optional[str] = None
    title_icon: Optional[str] = None
    inline: bool = False


@dataclass
class SkillRow:
    """
    Display form of a classified skill line.

    Attributes:
        line: Classified line
        marker: Text placed before the label (e.g. "#")
        stacked: Label on its own line above the text
    """

    line: SkillLine
    marker: Optional[str] = None
    stacked: bool = False


@dataclass
class TextItem:
    """Plain list item (language, interest, contact line)."""

    text: str


SectionItem = Union[Paragraph, Entry, SkillRow, TextItem]


@dataclass
class Section:
    """
    Titled block of the document.

    Attributes:
        kind: Section identifier (summary, experience, projects, skills, education,
              certifications, contact, languages, interests, volunteer)
        title: Display title, already transformed per variant
        items: Section content in display order
        icon: Optional icon before the title
        prompt: Optional prompt symbol before the title (terminal-style variants)
        group: Consecutive sections sharing a group are laid out side by side
    """

    kind: str
    title: str
    items: List[SectionItem] = field(default_factory=list)
    icon: Optional[str] = None
    prompt: Optional[str] = None
    group: Optional[str] = None


@dataclass
class Document:
    """
    Complete rendered resume.

    Attributes:
        template: Identifier of the variant that produced the document
        display_name: Human-readable variant name
        geometry: Page geometry
        theme: Typography/color tokens
        header: Header, None when the record has no full name
        main: Sections of the main column, in display order
        sidebar: Sections of the sidebar column (two-column variants only)
        footer: Optional closing line
        layout: "single" or "sidebar"
    """

    template: str
    display_name: str
    geometry: PageGeometry
    theme: Theme
    header: Optional[Header] = None
    main: List[Section] = field(default_factory=list)
    sidebar: List[Section] = field(default_factory=list)
    footer: Optional[str] = None
    layout: str = "single"

    @property
    def sections(self) -> List[Section]:
        """All sections, sidebar first."""
        return self.sidebar + self.main

    def get_section(self, kind: str) -> Optional[Section]:
        """Find a section by kind, None if the variant did not render it."""
        for section in self.sections:
            if section.kind == kind:
                return section
        return None

    @property
    def section_kinds(self) -> List[str]:
        return [section.kind for section in self.sections]
