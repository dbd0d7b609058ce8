"""Docsmith data models.

This module exports the core entities used throughout the application:
- Template: Named, ordered list of sections
- Section and its variants: One typed block within a template
- RenderOptions: Word-count constraints for placeholder paragraphs
- DocumentMetadata / DocumentStats: Enhanced-mode annotations
- GeneratedDocument: Composed Markdown output
"""

from docsmith.models.document import (
    DocumentMetadata,
    DocumentStats,
    GeneratedDocument,
    RenderOptions,
    count_words,
)
from docsmith.models.template import (
    CodeSection,
    HeadingSection,
    ImageSection,
    ListSection,
    ParagraphSection,
    QuoteSection,
    Section,
    TableSection,
    Template,
    UnknownSection,
    parse_section,
)

__all__ = [
    "Template",
    "Section",
    "HeadingSection",
    "ParagraphSection",
    "QuoteSection",
    "ListSection",
    "CodeSection",
    "ImageSection",
    "TableSection",
    "UnknownSection",
    "parse_section",
    "RenderOptions",
    "DocumentMetadata",
    "DocumentStats",
    "GeneratedDocument",
    "count_words",
]
