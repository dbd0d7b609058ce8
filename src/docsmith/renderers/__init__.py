"""Docsmith rendering.

- sections: One section to one Markdown fragment
- composer: Template to full document, metadata and statistics
- converters: Markdown to HTML/JSON and saving to disk
"""

from docsmith.renderers.composer import DocumentComposer
from docsmith.renderers.converters import (
    OutputFormat,
    convert,
    save_document,
    to_html,
    to_json,
    write_document,
)
from docsmith.renderers.sections import render_section

__all__ = [
    "DocumentComposer",
    "render_section",
    "OutputFormat",
    "convert",
    "to_html",
    "to_json",
    "save_document",
    "write_document",
]
