"""Output format conversion and document saving.

``to_html`` is a heuristic, lossy converter for the Markdown that Docsmith
itself produces. It is NOT a general Markdown parser and does not round-trip.
What it understands:

- ``#``, ``##``, ``###`` headings (deeper headings stay paragraph text)
- fenced code blocks (content is HTML-escaped)
- runs of ``- item`` lines as one ``<ul>``
- runs of ``> text`` lines as one ``<blockquote>``
- ``---`` horizontal rules
- everything else: paragraphs split on blank lines
- inline: code spans (`` `x` `` or ``` ``x`y`` ```), ``**bold**``, ``*italic*``

Text outside code is emitted verbatim, without HTML escaping.
"""

import html
import json
import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any

from docsmith.errors import StorageError
from docsmith.models.document import DocumentMetadata
from docsmith.renderers.environment import get_environment

logger = logging.getLogger(__name__)

HTML_TEMPLATE = "document.html.j2"
DEFAULT_HTML_TITLE = "Generated Content"


class OutputFormat(Enum):
    """Supported output formats."""

    MARKDOWN = "markdown"
    HTML = "html"
    JSON = "json"

    @classmethod
    def parse(cls, value: "str | OutputFormat") -> "OutputFormat":
        """Parse a format name.

        Raises:
            ValueError: If the format is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = [f.value for f in cls]
            raise ValueError(f"Invalid output format: {value}. Valid: {valid}") from None


# =============================================================================
# Markdown -> HTML
# =============================================================================

_FENCE_RE = re.compile(r"^```\s*([\w+-]*)\s*$")
_FENCE_CLOSE_RE = re.compile(r"^```\s*$")
_HEADING_RE = re.compile(r"^(#{1,3}) (.*)$")
_RULE_RE = re.compile(r"^-{3,}\s*$")
_LIST_ITEM_RE = re.compile(r"^- (.*)$")
_QUOTE_RE = re.compile(r"^> ?(.*)$")

_CODE_SPAN_RE = re.compile(r"``(.+?)``|`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")


def _emphasis(text: str) -> str:
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def render_inline(text: str) -> str:
    """Convert inline Markdown (code spans, bold, italic) to HTML.

    Emphasis is never applied inside code spans.
    """
    parts: list[str] = []
    pos = 0
    for match in _CODE_SPAN_RE.finditer(text):
        parts.append(_emphasis(text[pos : match.start()]))
        if match.group(1) is not None:
            code = match.group(1).strip()
        else:
            code = match.group(2)
        parts.append(f"<code>{html.escape(code, quote=False)}</code>")
        pos = match.end()
    parts.append(_emphasis(text[pos:]))
    return "".join(parts)


def _markdown_to_blocks(markdown: str) -> tuple[list[str], str | None]:
    """Scan Markdown line by line into HTML blocks.

    Returns:
        HTML blocks and the text of the first level-1 heading (if any)
    """
    lines = markdown.split("\n")
    blocks: list[str] = []
    paragraph: list[str] = []
    first_h1: str | None = None

    def flush_paragraph() -> None:
        if paragraph:
            text = render_inline("\n".join(paragraph))
            blocks.append(f"<p>{text}</p>")
            paragraph.clear()

    i = 0
    while i < len(lines):
        line = lines[i]

        fence = _FENCE_RE.match(line)
        if fence:
            flush_paragraph()
            language = fence.group(1)
            code_lines: list[str] = []
            i += 1
            # An unterminated fence runs to the end of the document
            while i < len(lines) and not _FENCE_CLOSE_RE.match(lines[i]):
                code_lines.append(lines[i])
                i += 1
            i += 1
            css = f' class="language-{language}"' if language else ""
            code = html.escape("\n".join(code_lines), quote=False)
            blocks.append(f"<pre><code{css}>{code}</code></pre>")
            continue

        if not line.strip():
            flush_paragraph()
            i += 1
            continue

        if _RULE_RE.match(line):
            flush_paragraph()
            blocks.append("<hr>")
            i += 1
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            flush_paragraph()
            level = len(heading.group(1))
            text = heading.group(2).strip()
            if level == 1 and first_h1 is None:
                first_h1 = text
            blocks.append(f"<h{level}>{render_inline(text)}</h{level}>")
            i += 1
            continue

        if _LIST_ITEM_RE.match(line):
            flush_paragraph()
            items: list[str] = []
            while i < len(lines) and (item := _LIST_ITEM_RE.match(lines[i])):
                items.append(f"<li>{render_inline(item.group(1))}</li>")
                i += 1
            blocks.append("<ul>\n" + "\n".join(items) + "\n</ul>")
            continue

        if _QUOTE_RE.match(line):
            flush_paragraph()
            quoted: list[str] = []
            while i < len(lines) and (quote := _QUOTE_RE.match(lines[i])):
                quoted.append(render_inline(quote.group(1)))
                i += 1
            blocks.append("<blockquote>" + "\n".join(quoted) + "</blockquote>")
            continue

        paragraph.append(line)
        i += 1

    flush_paragraph()
    return blocks, first_h1


def to_html(markdown: str, title: str | None = None) -> str:
    """Convert Docsmith Markdown to a standalone HTML page.

    Args:
        markdown: Markdown text
        title: Page title; defaults to the first level-1 heading

    Returns:
        HTML document
    """
    blocks, first_h1 = _markdown_to_blocks(markdown)
    template = get_environment().get_template(HTML_TEMPLATE)
    return template.render(
        title=title or first_h1 or DEFAULT_HTML_TITLE,
        body="\n".join(blocks),
    )


# =============================================================================
# JSON envelope
# =============================================================================


def to_json(metadata: DocumentMetadata | dict[str, Any] | None, content: str) -> str:
    """Serialize ``{"metadata": ..., "content": ...}`` as pretty-printed JSON."""
    if isinstance(metadata, DocumentMetadata):
        metadata = metadata.to_dict()
    return json.dumps({"metadata": metadata, "content": content}, indent=2, ensure_ascii=False)


def convert(
    content: str,
    fmt: str | OutputFormat = OutputFormat.MARKDOWN,
    metadata: DocumentMetadata | None = None,
    title: str | None = None,
) -> str:
    """Convert Markdown content to the requested format."""
    output_format = OutputFormat.parse(fmt)
    if output_format is OutputFormat.HTML:
        return to_html(content, title=title)
    if output_format is OutputFormat.JSON:
        return to_json(metadata, content)
    return content


# =============================================================================
# Saving
# =============================================================================


def write_document(
    path: Path,
    content: str,
    fmt: str | OutputFormat = OutputFormat.MARKDOWN,
    metadata: DocumentMetadata | None = None,
) -> Path:
    """Convert and write a document, creating parent directories.

    Markdown content is written unchanged.

    Raises:
        StorageError: If the file cannot be written
    """
    output = convert(content, fmt, metadata)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8", newline="")
    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e}") from e

    logger.info("Wrote document to %s", path)
    return path


def save_document(
    content: str,
    filename: str,
    output_dir: Path,
    fmt: str | OutputFormat = OutputFormat.MARKDOWN,
    metadata: DocumentMetadata | None = None,
) -> Path:
    """Save a document under ``output_dir``.

    Args:
        content: Markdown content
        filename: File name, relative to ``output_dir``
        output_dir: Designated output directory
        fmt: Output format
        metadata: Metadata for the JSON envelope

    Returns:
        Resolved path of the written file

    Raises:
        ValueError: If ``filename`` resolves outside ``output_dir``
        StorageError: If the file cannot be written
    """
    root = Path(output_dir).resolve()
    target = (root / filename).resolve()
    if not target.is_relative_to(root) or target == root:
        raise ValueError(f"Invalid filename: {filename}")

    return write_document(target, content, fmt, metadata)
