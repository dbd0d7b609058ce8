"""Word-count limiting for placeholder paragraphs."""

from docsmith.models.document import RenderOptions
from docsmith.renderers.locale import EN, Locale

ELLIPSIS = "..."


def pad_words(count: int, locale: Locale = EN) -> str:
    """Build up to ``count`` deterministic filler words.

    Words are taken in order from the locale vocabulary; every fifth word is
    preceded by a comma. Padding stops early once the vocabulary runs out.
    """
    parts: list[str] = []
    for i, word in enumerate(locale.filler_words[: max(count, 0)]):
        if i > 0:
            parts.append(", " if i % 5 == 0 else locale.word_separator)
        parts.append(word)
    return "".join(parts)


def limit_words(text: str, options: RenderOptions | None, locale: Locale = EN) -> str:
    """Apply ``options.max_words`` to placeholder text.

    Longer text is cut to the first ``max_words`` words followed by an
    ellipsis. Shorter text is padded with filler words when ``options.expand``
    is set.
    """
    if options is None or not options.max_words:
        return text

    words = text.split()
    if len(words) > options.max_words:
        return " ".join(words[: options.max_words]) + ELLIPSIS

    if options.expand and len(words) < options.max_words:
        padding = pad_words(options.max_words - len(words), locale)
        if padding:
            return f"{text} {padding}"

    return text
