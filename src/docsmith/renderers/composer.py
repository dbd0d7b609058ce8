"""Document composer (title + sections + optional metadata).

Composes a template into a Markdown document:

1. Title line from the caller, the template, or the locale default
2. Every section through the section renderer, in order
3. In enhanced mode, a trailing metadata block rendered from
   ``metadata.md.j2``

The composer never mutates the template it renders.
"""

import logging

from docsmith.errors import TemplateNotFoundError
from docsmith.models.document import (
    DocumentMetadata,
    GeneratedDocument,
    RenderOptions,
    count_words,
)
from docsmith.models.template import Template
from docsmith.renderers.environment import get_environment
from docsmith.renderers.locale import DEFAULT_LOCALE, Locale, get_locale
from docsmith.renderers.sections import render_section
from docsmith.store.store import TemplateStore

logger = logging.getLogger(__name__)

METADATA_TEMPLATE = "metadata.md.j2"


class DocumentComposer:
    """Renders stored templates to Markdown.

    Usage:
        composer = DocumentComposer(store)
        document = composer.generate("blog-post", title="Hello", enhanced=True)
        print(document.content, document.stats())
    """

    def __init__(
        self,
        store: TemplateStore | None = None,
        locale: str | Locale = DEFAULT_LOCALE,
        number_ordered_lists: bool = False,
    ) -> None:
        """Initialize the composer.

        Args:
            store: Template store used by ``generate``
            locale: Locale code or Locale for default texts
            number_ordered_lists: Number the items of ordered lists
        """
        self.store = store
        self.locale = get_locale(locale)
        self.number_ordered_lists = number_ordered_lists

    def resolve_title(self, template: Template, title: str | None = None) -> str:
        """Pick the caller's title, the template's title, or the default."""
        return title or template.title or self.locale.document_title

    def compose(
        self,
        template: Template,
        title: str | None = None,
        options: RenderOptions | None = None,
    ) -> str:
        """Compose the Markdown body of a template.

        Args:
            template: Template to render
            title: Explicit title; empty falls back to the template title
            options: Word-count options for placeholder paragraphs

        Returns:
            Markdown document without metadata
        """
        parts = [f"# {self.resolve_title(template, title)}\n\n"]
        for section in template.sections:
            parts.append(
                render_section(
                    section,
                    options=options,
                    locale=self.locale,
                    number_ordered=self.number_ordered_lists,
                )
            )
        return "".join(parts)

    def build_metadata(self, template: Template, title: str, body: str) -> DocumentMetadata:
        """Create metadata for a composed body."""
        return DocumentMetadata(
            template=template.name,
            title=title,
            word_count=count_words(body),
        )

    def render_metadata(self, metadata: DocumentMetadata) -> str:
        """Render the trailing metadata block."""
        template = get_environment().get_template(METADATA_TEMPLATE)
        return template.render(metadata=metadata, labels=self.locale.metadata_labels)

    def render(
        self,
        template: Template,
        title: str | None = None,
        options: RenderOptions | None = None,
        enhanced: bool = False,
    ) -> GeneratedDocument:
        """Compose a template, appending metadata in enhanced mode."""
        body = self.compose(template, title, options)
        if not enhanced:
            return GeneratedDocument(content=body)

        metadata = self.build_metadata(template, self.resolve_title(template, title), body)
        return GeneratedDocument(content=body + self.render_metadata(metadata), metadata=metadata)

    def generate(
        self,
        template_name: str,
        title: str | None = None,
        options: RenderOptions | None = None,
        enhanced: bool = False,
    ) -> GeneratedDocument:
        """Render a template from the store by name.

        Raises:
            TemplateNotFoundError: If the store has no such template
        """
        template = self.store.get(template_name) if self.store is not None else None
        if template is None:
            raise TemplateNotFoundError(template_name)

        document = self.render(template, title, options, enhanced)
        logger.info(
            "Generated document from %s (%d characters)",
            template_name,
            len(document.content),
        )
        return document
