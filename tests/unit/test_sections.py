"""Unit tests for the section renderer and word limiting."""

import pytest

from docsmith.models import (
    CodeSection,
    HeadingSection,
    ImageSection,
    ListSection,
    ParagraphSection,
    QuoteSection,
    RenderOptions,
    Section,
    TableSection,
    UnknownSection,
    parse_section,
)
from docsmith.renderers.locale import EN, ZH, get_locale
from docsmith.renderers.sections import render_section
from docsmith.renderers.words import limit_words, pad_words


class TestHeading:
    """Tests for heading rendering."""

    def test_level_and_text(self) -> None:
        """Test a level-3 heading."""
        assert render_section(HeadingSection(level=3, text="X")) == "### X\n\n"

    def test_defaults(self) -> None:
        """Test the default level and text."""
        assert render_section(HeadingSection()) == "# Heading\n\n"

    def test_locale_default_text(self) -> None:
        """Test the Chinese default heading text."""
        assert render_section(HeadingSection(level=2), locale=ZH) == "## 标题\n\n"


class TestParagraph:
    """Tests for paragraph rendering."""

    def test_text(self) -> None:
        """Test a literal paragraph."""
        assert render_section(ParagraphSection(text="Hello *there*")) == "Hello *there*\n\n"

    def test_placeholder_fallback(self) -> None:
        """Test that the placeholder is used when text is empty."""
        section = ParagraphSection(text="", placeholder="Fill in")

        assert render_section(section) == "Fill in\n\n"

    def test_empty(self) -> None:
        """Test a paragraph with neither text nor placeholder."""
        assert render_section(ParagraphSection()) == "\n\n"

    def test_word_limit_applies_to_placeholder(self, twenty_words: str) -> None:
        """Test that placeholder text is truncated to max_words."""
        section = ParagraphSection(placeholder=twenty_words)

        rendered = render_section(section, options=RenderOptions(max_words=5))

        assert rendered == "word1 word2 word3 word4 word5...\n\n"

    def test_word_limit_ignores_literal_text(self, twenty_words: str) -> None:
        """Test that explicit text is never trimmed."""
        section = ParagraphSection(text=twenty_words)

        rendered = render_section(section, options=RenderOptions(max_words=5))

        assert rendered == f"{twenty_words}\n\n"


class TestList:
    """Tests for list rendering."""

    def test_unordered(self) -> None:
        """Test bullet items."""
        assert render_section(ListSection(items=["a", "b"])) == "- a\n- b\n\n"

    def test_ordered_legacy_output(self) -> None:
        """Test that ordered lists emit bare items by default."""
        section = ListSection(items=["a", "b"], ordered=True)

        assert render_section(section) == "a\nb\n\n"

    def test_ordered_numbering_opt_in(self) -> None:
        """Test numbered output when enabled."""
        section = ListSection(items=["a", "b"], ordered=True)

        assert render_section(section, number_ordered=True) == "1. a\n2. b\n\n"

    def test_numbering_does_not_affect_unordered(self) -> None:
        """Test that unordered lists keep bullets when numbering is enabled."""
        assert render_section(ListSection(items=["a"]), number_ordered=True) == "- a\n\n"

    @pytest.mark.parametrize("items", [None, []])
    def test_no_items(self, items: list | None) -> None:
        """Test that a list without items renders nothing."""
        assert render_section(ListSection(items=items)) == ""


class TestCode:
    """Tests for code rendering."""

    def test_with_language(self) -> None:
        """Test a fenced block with a language tag."""
        section = CodeSection(language="python", code="print(1)")

        assert render_section(section) == "```python\nprint(1)\n```\n\n"

    def test_without_language(self) -> None:
        """Test a fenced block without a language tag."""
        assert render_section(CodeSection(code="x")) == "```\nx\n```\n\n"


class TestQuote:
    """Tests for quote rendering."""

    def test_with_author(self) -> None:
        """Test a quote with attribution."""
        section = QuoteSection(text="Q", author="A")

        assert render_section(section) == "> Q\n— A\n\n"

    def test_without_author(self) -> None:
        """Test a quote without attribution."""
        assert render_section(QuoteSection(text="Q")) == "> Q\n\n"


class TestImage:
    """Tests for image rendering."""

    def test_with_caption(self) -> None:
        """Test an image with alt text and caption."""
        section = ImageSection(url="img.png", alt="Alt", caption="Caption")

        assert render_section(section) == "![Alt](img.png)\n\nCaption\n\n"

    def test_defaults(self) -> None:
        """Test default alt text and URL."""
        assert render_section(ImageSection()) == "![Image description](#)\n\n"

    def test_locale_alt(self) -> None:
        """Test the Chinese default alt text."""
        assert render_section(ImageSection(url="a.png"), locale=ZH) == "![图片描述](a.png)\n\n"


class TestTable:
    """Tests for table rendering."""

    def test_table(self) -> None:
        """Test header, separator and data rows."""
        section = TableSection(headers=["A", "B"], rows=[["1", "2"]])

        rendered = render_section(section)

        assert rendered == "| A | B |\n| --- | --- |\n| 1 | 2 |\n\n"
        assert rendered.split("\n")[:3] == ["| A | B |", "| --- | --- |", "| 1 | 2 |"]

    def test_row_length_not_enforced(self) -> None:
        """Test that short rows are emitted as given."""
        section = TableSection(headers=["A", "B"], rows=[["only"]])

        assert render_section(section).endswith("| only |\n\n")

    def test_empty_rows(self) -> None:
        """Test a table with headers and no rows."""
        section = TableSection(headers=["A"], rows=[])

        assert render_section(section) == "| A |\n| --- |\n\n"

    @pytest.mark.parametrize(
        "section",
        [TableSection(rows=[["1"]]), TableSection(headers=["A"]), TableSection(headers=[])],
    )
    def test_incomplete_table(self, section: TableSection) -> None:
        """Test that tables without headers or rows render nothing."""
        assert render_section(section) == ""


class TestUnknown:
    """Tests for the default dispatch arm."""

    def test_unknown_section(self) -> None:
        """Test that unknown kinds render nothing."""
        assert render_section(UnknownSection(raw={"type": "timeline"})) == ""

    def test_parsed_unknown_section(self) -> None:
        """Test unknown kinds coming from template JSON."""
        assert render_section(parse_section({"type": "callout", "text": "x"})) == ""

    def test_base_section(self) -> None:
        """Test that the base class has no output."""
        assert render_section(Section()) == ""


class TestWordLimit:
    """Tests for limit_words and pad_words."""

    def test_truncate(self, twenty_words: str) -> None:
        """Test truncation to exactly max_words words plus an ellipsis."""
        result = limit_words(twenty_words, RenderOptions(max_words=5))

        assert result.endswith("...")
        assert len(result.removesuffix("...").split()) == 5

    def test_no_options(self, twenty_words: str) -> None:
        """Test that text is unchanged without a limit."""
        assert limit_words(twenty_words, None) == twenty_words
        assert limit_words(twenty_words, RenderOptions()) == twenty_words

    def test_short_text_without_expand(self) -> None:
        """Test that short text is not padded unless expand is set."""
        assert limit_words("one two", RenderOptions(max_words=5)) == "one two"

    def test_exact_length(self) -> None:
        """Test text that already has max_words words."""
        options = RenderOptions(max_words=2, expand=True)

        assert limit_words("one two", options) == "one two"

    def test_expand(self) -> None:
        """Test padding with filler words."""
        options = RenderOptions(max_words=5, expand=True)

        assert limit_words("one two", options) == "one two This additional context"

    def test_pad_words_commas(self) -> None:
        """Test that every fifth filler word is preceded by a comma."""
        assert pad_words(7) == "This additional context helps readers, better understand"

    def test_pad_words_chinese(self) -> None:
        """Test Chinese filler words joined without spaces."""
        assert pad_words(6, ZH) == "这是一个很好的补充说明可以帮助, 读者"

    def test_pad_words_stops_when_vocabulary_runs_out(self) -> None:
        """Test that padding ends early instead of wrapping around."""
        assert pad_words(1000) == pad_words(len(EN.filler_words))

    def test_pad_words_zero(self) -> None:
        """Test that no padding is produced for zero words."""
        assert pad_words(0) == ""


def test_get_locale_unknown() -> None:
    """Test that unknown locale codes are rejected."""
    with pytest.raises(ValueError, match="Unknown locale"):
        get_locale("fr")
