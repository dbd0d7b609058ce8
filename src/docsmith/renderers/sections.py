"""Section renderer: one typed section to one Markdown fragment.

Every fragment ends with a blank line so fragments can be concatenated.
User text is emitted verbatim; Markdown special characters are not escaped.

Dispatch is on the section class. The default arm returns an empty string,
which is how UnknownSection (and any unregistered kind) is skipped.
"""

from functools import singledispatch

from docsmith.models.document import RenderOptions
from docsmith.models.template import (
    CodeSection,
    HeadingSection,
    ImageSection,
    ListSection,
    ParagraphSection,
    QuoteSection,
    Section,
    TableSection,
)
from docsmith.renderers.locale import EN, Locale
from docsmith.renderers.words import limit_words


@singledispatch
def render_section(
    section: Section,
    options: RenderOptions | None = None,
    locale: Locale = EN,
    number_ordered: bool = False,
) -> str:
    """Render a section to Markdown.

    Args:
        section: Section to render
        options: Word-count options for placeholder paragraphs
        locale: Default texts for missing fields
        number_ordered: Emit ``1.``-style prefixes for ordered lists

    Returns:
        Markdown fragment, or "" for kinds that are not rendered
    """
    return ""


@render_section.register
def _(section: HeadingSection, options=None, locale=EN, number_ordered=False) -> str:
    text = section.text or locale.heading_text
    return f"{'#' * section.level} {text}\n\n"


@render_section.register
def _(section: ParagraphSection, options=None, locale=EN, number_ordered=False) -> str:
    if section.uses_placeholder:
        text = limit_words(section.placeholder or "", options, locale)
    else:
        text = section.text or ""
    return f"{text}\n\n"


@render_section.register
def _(section: ListSection, options=None, locale=EN, number_ordered=False) -> str:
    if not section.items:
        return ""

    lines: list[str] = []
    for index, item in enumerate(section.items, start=1):
        if not section.ordered:
            lines.append(f"- {item}\n")
        elif number_ordered:
            lines.append(f"{index}. {item}\n")
        else:
            # Ordered lists keep the legacy unnumbered output unless opted in
            lines.append(f"{item}\n")
    return "".join(lines) + "\n"


@render_section.register
def _(section: CodeSection, options=None, locale=EN, number_ordered=False) -> str:
    return f"```{section.language or ''}\n{section.code or ''}\n```\n\n"


@render_section.register
def _(section: QuoteSection, options=None, locale=EN, number_ordered=False) -> str:
    author = f"\n— {section.author}" if section.author else ""
    return f"> {section.text or ''}{author}\n\n"


@render_section.register
def _(section: ImageSection, options=None, locale=EN, number_ordered=False) -> str:
    alt = section.alt or locale.image_alt
    caption = f"\n{section.caption}\n" if section.caption else ""
    return f"![{alt}]({section.url or '#'})\n{caption}\n"


def _table_row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"


@render_section.register
def _(section: TableSection, options=None, locale=EN, number_ordered=False) -> str:
    if not section.headers or section.rows is None:
        return ""

    lines = [
        _table_row(section.headers),
        _table_row(["---"] * len(section.headers)),
    ]
    lines.extend(_table_row(row) for row in section.rows)
    return "".join(lines) + "\n"
