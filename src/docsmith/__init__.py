"""Docsmith - Template-driven Markdown document generator.

Docsmith renders structured JSON templates (ordered lists of typed sections)
into Markdown documents, optionally annotated with generation metadata and
converted to HTML or a JSON envelope.

Core principles:
- Deterministic output: same template and options produce the same body
- Permissive templates: unknown section kinds are skipped, never rejected
- Explicit state: the template index is an object you construct and pass around
"""

__version__ = "0.1.0"
__author__ = "Docsmith Contributors"
