"""
Text Document Renderers

Serializes a Document to Markdown or plain text for ATS uploads and export
collaborators. Two-column documents are linearized: main column first, then the
sidebar.
"""

import time
from typing import List, Optional

from vitae.contexts.rendering.logger import log_serialization_result
from vitae.contexts.templating.document_tree import (
    Document,
    Entry,
    Header,
    Link,
    Paragraph,
    Section,
    SkillRow,
    TextItem,
)
from vitae.utils.text_processing import join_present, set_max_consecutive_blank_lines

DEFAULT_SEPARATOR = " | "


def _link_text(link: Link, markdown: bool) -> str:
    target = f"[{link.label}]({link.href})" if markdown else f"{link.label}: {link.href}"
    if link.prefix and link.label == link.href:
        # Label already is the URL, e.g. "LinkedIn: https://..."
        target = f"[{link.href}]({link.href})" if markdown else link.href
    return join_present([link.icon, link.prefix, target], " ")


def _links_line(links: List[Link], separator: Optional[str], markdown: bool) -> str:
    return (separator or DEFAULT_SEPARATOR).join(_link_text(link, markdown) for link in links)


def _skill_text(row: SkillRow, markdown: bool) -> str:
    line = row.line
    if not line.is_labeled:
        return line.text
    label = f"**{line.label}:**" if markdown else f"{line.label}:"
    return join_present([row.marker, label, line.text], " ")


def _header_lines(header: Header, markdown: bool) -> List[str]:
    lines = []
    if header.prompt:
        lines.append(header.prompt)
    lines.append(f"# {header.name}" if markdown else header.name)
    if header.tagline:
        lines.append(header.tagline)

    contact = [join_present([item.icon, item.text], " ") for item in header.contact]
    if header.stacked_contact:
        lines.extend(contact)
    elif contact:
        lines.append((header.contact_separator or DEFAULT_SEPARATOR).join(contact))

    if header.links:
        lines.append(_links_line(header.links, header.link_separator, markdown))
    return lines


def _entry_lines(entry: Entry, bullet: str, markdown: bool) -> List[str]:
    title = join_present([entry.title_icon, entry.title], " ")
    if markdown:
        heading = f"### {join_present([title, entry.subtitle], ' — ')}"
    else:
        heading = join_present([title, entry.subtitle], " — ")

    lines = [heading]
    if entry.date:
        lines.append(f"_{entry.date}_" if markdown else entry.date)
    if entry.description:
        lines.append(entry.description)
    lines.extend(f"{bullet} {text}" for text in entry.bullets)
    for detail in entry.details:
        if detail.label:
            label = f"**{detail.label}:**" if markdown else f"{detail.label}:"
            lines.append(f"{label} {detail.text}")
        else:
            lines.append(detail.text)
    if entry.tags:
        tags = [f"`{tag}`" for tag in entry.tags] if markdown else entry.tags
        lines.append((" " if markdown else ", ").join(tags))
    if entry.links:
        lines.append(_links_line(entry.links, entry.link_separator, markdown))
    return lines


def _section_lines(section: Section, bullet: str, markdown: bool) -> List[str]:
    title = join_present([section.prompt, section.icon, section.title], " ")
    lines = [f"## {title}" if markdown else f"{title}\n{'=' * len(title)}", ""]

    for item in section.items:
        if isinstance(item, Paragraph):
            lines.extend([item.text, ""])
        elif isinstance(item, SkillRow):
            lines.append(f"{bullet} {_skill_text(item, markdown)}")
        elif isinstance(item, TextItem):
            lines.append(f"{bullet} {item.text}")
        elif isinstance(item, Entry):
            lines.extend(_entry_lines(item, bullet, markdown))
            lines.append("")
    return lines


def _serialize(document: Document, markdown: bool) -> str:
    # Markdown lists always use "-"; plain text keeps the variant's marker
    bullet = "-" if markdown else document.theme.bullet_marker

    lines: List[str] = []
    if document.header:
        lines.extend(_header_lines(document.header, markdown))
        lines.append("")

    for section in document.main + document.sidebar:
        lines.extend(_section_lines(section, bullet, markdown))
        lines.append("")

    if document.footer:
        lines.append(document.footer)

    text = "\n".join(line.rstrip() for line in lines)
    return set_max_consecutive_blank_lines(text, max_consecutive=1).strip() + "\n"


def render_markdown(document: Document) -> str:
    """
    Serialize a document to Markdown.

    Args:
        document: Document produced by a template variant

    Returns:
        Markdown text ending in a newline
    """
    start = time.perf_counter()
    output = _serialize(document, markdown=True)
    log_serialization_result(document, "markdown", output, time.perf_counter() - start)
    return output


def render_plaintext(document: Document) -> str:
    """
    Serialize a document to plain text (section titles underlined with "=").

    Args:
        document: Document produced by a template variant

    Returns:
        Plain text ending in a newline
    """
    start = time.perf_counter()
    output = _serialize(document, markdown=False)
    log_serialization_result(document, "text", output, time.perf_counter() - start)
    return output
