"""
VITAE - Visual Templates for Academic and Employment records

A template rendering engine that turns one structured resume record into one of
several fully laid-out visual documents.

Architecture:
- Templating Context: Resume data model, section visibility, skill-line classification,
  template variants and template selection
- Rendering Context: Serialization of document trees to HTML, Markdown and plain text
"""

__version__ = "0.1.0"
