"""Unit tests for core models."""

from datetime import UTC, datetime

import pytest

from docsmith.models import (
    CodeSection,
    DocumentMetadata,
    GeneratedDocument,
    HeadingSection,
    ImageSection,
    ListSection,
    ParagraphSection,
    QuoteSection,
    RenderOptions,
    TableSection,
    Template,
    UnknownSection,
    count_words,
    parse_section,
)


class TestParseSection:
    """Tests for parse_section."""

    def test_heading(self) -> None:
        """Test parsing a heading with defaults."""
        section = parse_section({"type": "heading"})

        assert isinstance(section, HeadingSection)
        assert section.level == 1
        assert section.text is None

    def test_paragraph_placeholder(self) -> None:
        """Test that a paragraph without text uses its placeholder."""
        section = parse_section({"type": "paragraph", "placeholder": "fill me"})

        assert isinstance(section, ParagraphSection)
        assert section.uses_placeholder is True

    def test_paragraph_text_wins_over_placeholder(self) -> None:
        """Test that explicit text disables the placeholder."""
        section = parse_section({"type": "paragraph", "text": "x", "placeholder": "y"})

        assert section.uses_placeholder is False

    def test_list_items_are_strings(self) -> None:
        """Test that list items are converted to strings."""
        section = parse_section({"type": "list", "items": [1, "two"], "ordered": True})

        assert isinstance(section, ListSection)
        assert section.items == ["1", "two"]
        assert section.ordered is True

    def test_list_ordered_requires_true(self) -> None:
        """Test that only a JSON true marks a list as ordered."""
        section = parse_section({"type": "list", "items": ["a"], "ordered": "false"})

        assert section.ordered is False

    def test_table_cells_are_strings(self) -> None:
        """Test that table cells are converted to strings."""
        section = parse_section({"type": "table", "headers": ["n"], "rows": [[1], [2]]})

        assert isinstance(section, TableSection)
        assert section.rows == [["1"], ["2"]]

    @pytest.mark.parametrize(
        ("data", "cls"),
        [
            ({"type": "quote", "text": "q"}, QuoteSection),
            ({"type": "code", "code": "x"}, CodeSection),
            ({"type": "image", "url": "a.png"}, ImageSection),
        ],
    )
    def test_other_kinds(self, data: dict, cls: type) -> None:
        """Test that each known kind maps to its dataclass."""
        assert isinstance(parse_section(data), cls)

    def test_unknown_kind_keeps_raw_mapping(self) -> None:
        """Test that unknown kinds are preserved as-is."""
        data = {"type": "callout", "text": "hi", "tone": "warn"}
        section = parse_section(data)

        assert isinstance(section, UnknownSection)
        assert section.type == "callout"
        assert section.to_dict() == data


class TestTemplate:
    """Tests for Template."""

    def test_from_dict(self, article_template: dict) -> None:
        """Test building a template from a mapping."""
        template = Template.from_dict(article_template)

        assert template.name == "article"
        assert template.title == "Template Title"
        assert len(template.sections) == 9
        assert isinstance(template.sections[-1], UnknownSection)

    def test_to_dict_omits_unset_fields(self) -> None:
        """Test that serialization leaves out None fields."""
        template = Template.from_dict(
            {"name": "t", "sections": [{"type": "heading", "text": "Hi"}]}
        )

        assert template.to_dict() == {
            "name": "t",
            "sections": [{"type": "heading", "level": 1, "text": "Hi"}],
        }


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_defaults(self) -> None:
        """Test empty options."""
        options = RenderOptions.from_dict(None)

        assert options.max_words is None
        assert options.expand is False

    def test_word_count_alias(self) -> None:
        """Test that wordCount maps to max_words."""
        options = RenderOptions.from_dict({"wordCount": 50, "expand": True})

        assert options.max_words == 50
        assert options.expand is True

    def test_max_words_key(self) -> None:
        """Test the maxWords key."""
        assert RenderOptions.from_dict({"maxWords": 7}).max_words == 7

    def test_negative_max_words_rejected(self) -> None:
        """Test that negative limits are rejected."""
        with pytest.raises(ValueError, match="must not be negative"):
            RenderOptions(max_words=-1)


class TestGeneratedDocument:
    """Tests for GeneratedDocument statistics."""

    def test_stats_without_metadata(self) -> None:
        """Test statistics computed from the content."""
        stats = GeneratedDocument(content="a b\nc").stats()

        assert stats.word_count == 3
        assert stats.line_count == 2
        assert stats.character_count == 5
        assert stats.reading_time == 1

    def test_stats_use_metadata_word_count(self) -> None:
        """Test that the body word count from metadata is reported."""
        metadata = DocumentMetadata(template="t", title="T", word_count=401)
        stats = GeneratedDocument(content="x\n", metadata=metadata).stats()

        assert stats.word_count == 401
        assert stats.reading_time == 3

    def test_stats_empty_document(self) -> None:
        """Test statistics of an empty document."""
        stats = GeneratedDocument(content="").stats()

        assert stats.word_count == 0
        assert stats.line_count == 1
        assert stats.reading_time == 0

    def test_to_dict_plain(self) -> None:
        """Test that plain renders carry no stats."""
        assert GeneratedDocument(content="# T\n\n").to_dict() == {
            "content": "# T\n\n",
            "stats": None,
        }

    def test_to_dict_enhanced(self) -> None:
        """Test the enhanced response envelope."""
        result = GeneratedDocument(content="one two").to_dict(enhanced=True)

        assert result["stats"] == {
            "wordCount": 2,
            "lineCount": 1,
            "characterCount": 7,
            "readingTime": 1,
        }


class TestDocumentMetadata:
    """Tests for DocumentMetadata."""

    def test_naive_timestamp_becomes_utc(self) -> None:
        """Test that naive timestamps are treated as UTC."""
        metadata = DocumentMetadata(
            template="t",
            title="T",
            created_at=datetime(2024, 1, 15, 12, 0, 0),
        )

        assert metadata.created_at.tzinfo == UTC
        assert metadata.to_dict()["createdAt"] == "2024-01-15T12:00:00+00:00"


def test_count_words_splits_on_whitespace_runs() -> None:
    """Test whitespace-delimited word counting."""
    assert count_words("  one\t two\n\nthree  ") == 3
    assert count_words("") == 0
