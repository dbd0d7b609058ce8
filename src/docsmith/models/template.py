"""Template entities.

A Template is a named, ordered list of typed sections. Each section kind is
its own dataclass; kinds Docsmith does not know are kept as UnknownSection so
that templates written for newer versions still load and render.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Section:
    """Base class for all template sections."""

    type: str = field(default="", init=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, omitting unset fields."""
        data: dict[str, Any] = {"type": self.type}
        for key, value in self.__dict__.items():
            if key == "type" or value is None:
                continue
            data[key] = value
        return data


@dataclass
class HeadingSection(Section):
    """Heading line.

    Attributes:
        level: Heading depth, 1-6
        text: Heading text (locale default when missing)
    """

    level: int = 1
    text: str | None = None

    def __post_init__(self) -> None:
        self.type = "heading"


@dataclass
class ParagraphSection(Section):
    """Block of prose.

    Attributes:
        text: Literal paragraph text
        placeholder: Fallback text used when ``text`` is empty; only this text
            is subject to word-count trimming and padding
    """

    text: str | None = None
    placeholder: str | None = None

    def __post_init__(self) -> None:
        self.type = "paragraph"

    @property
    def uses_placeholder(self) -> bool:
        """Return True if the rendered text comes from the placeholder."""
        return not self.text and bool(self.placeholder)


@dataclass
class QuoteSection(Section):
    """Block quote with optional attribution."""

    text: str | None = None
    author: str | None = None

    def __post_init__(self) -> None:
        self.type = "quote"


@dataclass
class ListSection(Section):
    """Bulleted list.

    Attributes:
        items: List entries in order
        ordered: Marks the list as ordered (see renderers.sections for output)
    """

    items: list[str] | None = None
    ordered: bool = False

    def __post_init__(self) -> None:
        self.type = "list"


@dataclass
class CodeSection(Section):
    """Fenced code block."""

    code: str | None = None
    language: str | None = None

    def __post_init__(self) -> None:
        self.type = "code"


@dataclass
class ImageSection(Section):
    """Image reference with optional caption."""

    url: str | None = None
    alt: str | None = None
    caption: str | None = None

    def __post_init__(self) -> None:
        self.type = "image"


@dataclass
class TableSection(Section):
    """Pipe table.

    Row lengths are not checked against the number of headers.
    """

    headers: list[str] | None = None
    rows: list[list[str]] | None = None

    def __post_init__(self) -> None:
        self.type = "table"


@dataclass
class UnknownSection(Section):
    """Section of a kind this version does not render.

    Attributes:
        raw: The original mapping, kept so the template can be saved unchanged
    """

    raw: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.type = str(self.raw.get("type", ""))

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _strings(values: Any) -> list[str] | None:
    if values is None:
        return None
    return [str(v) for v in values]


def parse_section(data: dict[str, Any]) -> Section:
    """Build the section variant matching ``data["type"]``.

    Args:
        data: Raw section mapping (already validated)

    Returns:
        Typed section; UnknownSection for unrecognized kinds
    """
    kind = data.get("type")

    if kind == "heading":
        return HeadingSection(level=data.get("level") or 1, text=_text(data.get("text")))
    if kind == "paragraph":
        return ParagraphSection(
            text=_text(data.get("text")),
            placeholder=_text(data.get("placeholder")),
        )
    if kind == "quote":
        return QuoteSection(text=_text(data.get("text")), author=_text(data.get("author")))
    if kind == "list":
        return ListSection(
            items=_strings(data.get("items")),
            ordered=data.get("ordered") is True,
        )
    if kind == "code":
        return CodeSection(code=_text(data.get("code")), language=_text(data.get("language")))
    if kind == "image":
        return ImageSection(
            url=_text(data.get("url")),
            alt=_text(data.get("alt")),
            caption=_text(data.get("caption")),
        )
    if kind == "table":
        rows = data.get("rows")
        return TableSection(
            headers=_strings(data.get("headers")),
            rows=[[str(cell) for cell in row] for row in rows] if rows is not None else None,
        )

    return UnknownSection(raw=dict(data))


@dataclass
class Template:
    """Named document template.

    Attributes:
        name: Unique template name (store key)
        sections: Ordered sections
        title: Default document title
    """

    name: str
    sections: list[Section] = field(default_factory=list)
    title: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Template":
        """Create a template from its JSON mapping."""
        return cls(
            name=data["name"],
            title=data.get("title"),
            sections=[parse_section(s) for s in data.get("sections", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data: dict[str, Any] = {"name": self.name}
        if self.title is not None:
            data["title"] = self.title
        data["sections"] = [section.to_dict() for section in self.sections]
        return data
