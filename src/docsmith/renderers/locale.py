"""Language tables for default texts, metadata labels and filler words."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Locale:
    """Texts used when a template leaves something unspecified.

    Attributes:
        code: Locale identifier
        document_title: Title used when neither caller nor template gives one
        heading_text: Text of a heading section without ``text``
        image_alt: Alt text of an image section without ``alt``
        metadata_labels: Labels of the enhanced-mode metadata block
        filler_words: Vocabulary for padding short placeholder paragraphs
        word_separator: Joins consecutive filler words
    """

    code: str
    document_title: str
    heading_text: str
    image_alt: str
    metadata_labels: dict[str, str]
    filler_words: tuple[str, ...]
    word_separator: str = " "


EN = Locale(
    code="en",
    document_title="New Article",
    heading_text="Heading",
    image_alt="Image description",
    metadata_labels={
        "created_at": "Created",
        "template": "Template",
        "title": "Title",
        "word_count": "Words",
    },
    filler_words=(
        "This", "additional", "context", "helps", "readers",
        "better", "understand", "the", "topic", "and",
        "makes", "the", "article", "more", "complete",
        "while", "also", "offering", "more", "useful",
        "information", "for", "a", "better", "reading", "experience",
    ),
)

ZH = Locale(
    code="zh",
    document_title="新文章",
    heading_text="标题",
    image_alt="图片描述",
    metadata_labels={
        "created_at": "生成时间",
        "template": "模板",
        "title": "标题",
        "word_count": "字数",
    },
    filler_words=(
        "这是一个", "很好的", "补充说明", "可以", "帮助",
        "读者", "更好地", "理解", "相关内容", "通过",
        "这种方式", "可以", "使", "文章", "更加",
        "完整", "同时", "也能够", "提供", "更多",
        "有用", "信息", "让", "读者", "获得", "更好的", "阅读体验",
    ),
    word_separator="",
)

LOCALES: dict[str, Locale] = {EN.code: EN, ZH.code: ZH}
DEFAULT_LOCALE = EN.code


def get_locale(code: str | Locale = DEFAULT_LOCALE) -> Locale:
    """Look up a locale by code.

    Raises:
        ValueError: If the code is unknown
    """
    if isinstance(code, Locale):
        return code
    try:
        return LOCALES[code]
    except KeyError:
        raise ValueError(f"Unknown locale: {code}. Valid: {sorted(LOCALES)}") from None
