"""
Templating Context

Responsibilities:
- Represents resume records (read-only structured data model)
- Decides which sections of a record render (shared visibility rules)
- Classifies free-text skill lines into labeled and plain lines
- Lays out a record under one of eight named template variants
- Selects the variant for a template name, falling back to classic

Owns: Resume data model, visibility rules, template variants, document tree
Never: Serializes documents to HTML or text, modifies resume records
"""

from vitae.contexts.templating.document_tree import Document
from vitae.contexts.templating.registries import TemplateRegistry, select
from vitae.contexts.templating.resume_data_structure import ResumeData, load_resume_data
from vitae.contexts.templating.skill_classifier import (
    SkillLine,
    classify_skill_groups,
    classify_skill_items,
)
from vitae.contexts.templating.visibility import SectionVisibility

__all__ = [
    # Template selection
    "select",
    "TemplateRegistry",
    # Data structure classes
    "ResumeData",
    "load_resume_data",
    "Document",
    # Shared rules
    "SectionVisibility",
    "SkillLine",
    "classify_skill_items",
    "classify_skill_groups",
]
