"""Generated document entities.

- RenderOptions: word-count constraints for placeholder paragraphs
- DocumentMetadata: trailing metadata block written in enhanced mode
- DocumentStats: derived statistics (never cached)
- GeneratedDocument: composed Markdown plus optional metadata
"""

import math
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

DEFAULT_WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    """Count whitespace-delimited words."""
    return len(text.split())


@dataclass
class RenderOptions:
    """Options applied to paragraphs whose text comes from a placeholder.

    Attributes:
        max_words: Truncate placeholder text beyond this many words
        expand: Pad shorter placeholder text with filler words up to max_words
    """

    max_words: int | None = None
    expand: bool = False

    def __post_init__(self) -> None:
        if self.max_words is not None and self.max_words < 0:
            raise ValueError(f"max_words must not be negative (got {self.max_words})")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "RenderOptions":
        """Create options from a render request mapping.

        ``wordCount`` is accepted as an alias of ``maxWords``.
        """
        if not data:
            return cls()
        max_words = data.get("maxWords", data.get("max_words"))
        if data.get("wordCount") is not None:
            max_words = data["wordCount"]
        return cls(
            max_words=int(max_words) if max_words is not None else None,
            expand=bool(data.get("expand", False)),
        )


@dataclass
class DocumentMetadata:
    """Metadata appended to a document in enhanced mode.

    Attributes:
        template: Name of the template used
        title: Resolved document title
        word_count: Whitespace-delimited word count of the body
        created_at: Generation timestamp in UTC
    """

    template: str
    title: str
    word_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Ensure timestamp is timezone-aware UTC."""
        if self.created_at.tzinfo is None:
            self.created_at = self.created_at.replace(tzinfo=UTC)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "createdAt": self.created_at.isoformat(),
            "template": self.template,
            "title": self.title,
            "wordCount": self.word_count,
        }


@dataclass
class DocumentStats:
    """Statistics derived from a generated document."""

    word_count: int
    line_count: int
    character_count: int
    reading_time: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "wordCount": self.word_count,
            "lineCount": self.line_count,
            "characterCount": self.character_count,
            "readingTime": self.reading_time,
        }


@dataclass
class GeneratedDocument:
    """Composed Markdown document.

    Attributes:
        content: Full Markdown text, including the metadata block if any
        metadata: Metadata of an enhanced render
    """

    content: str
    metadata: DocumentMetadata | None = None

    def stats(self, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> DocumentStats:
        """Compute statistics for the current content.

        The word count is the body count recorded in the metadata, so the
        metadata block itself is not counted.
        """
        if self.metadata is not None:
            word_count = self.metadata.word_count
        else:
            word_count = count_words(self.content)

        return DocumentStats(
            word_count=word_count,
            line_count=self.content.count("\n") + 1,
            character_count=len(self.content),
            reading_time=math.ceil(word_count / words_per_minute),
        )

    def to_dict(
        self,
        enhanced: bool = False,
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> dict[str, Any]:
        """Build the render response envelope."""
        return {
            "content": self.content,
            "stats": self.stats(words_per_minute).to_dict() if enhanced else None,
        }
