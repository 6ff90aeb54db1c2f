"""
Template Variants

One module per named visual style. Every variant subclasses TemplateVariant and
maps ResumeData to a Document.
"""

from vitae.contexts.templating.variants.base import TemplateVariant
from vitae.contexts.templating.variants.chronological import ChronologicalTemplate
from vitae.contexts.templating.variants.classic import ClassicTemplate
from vitae.contexts.templating.variants.creative import CreativeTemplate
from vitae.contexts.templating.variants.executive import ExecutiveTemplate
from vitae.contexts.templating.variants.minimal import MinimalTemplate
from vitae.contexts.templating.variants.modern import ModernTemplate
from vitae.contexts.templating.variants.professional import ProfessionalTemplate
from vitae.contexts.templating.variants.technical import TechnicalTemplate

# Identifier -> variant class, in the order templates are offered to users
VARIANTS = {
    variant.name: variant
    for variant in (
        ClassicTemplate,
        ProfessionalTemplate,
        ModernTemplate,
        CreativeTemplate,
        MinimalTemplate,
        ExecutiveTemplate,
        TechnicalTemplate,
        ChronologicalTemplate,
    )
}

__all__ = [
    "TemplateVariant",
    "ClassicTemplate",
    "ProfessionalTemplate",
    "ModernTemplate",
    "CreativeTemplate",
    "MinimalTemplate",
    "ExecutiveTemplate",
    "TechnicalTemplate",
    "ChronologicalTemplate",
    "VARIANTS",
]
