"""Jinja2 environment for the document shells bundled with Docsmith.

Templates live in ``docsmith/renderers/templates``. HTML templates are
autoescaped; Markdown templates are not.
"""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared Jinja2 environment."""
    return Environment(
        loader=PackageLoader("docsmith.renderers", "templates"),
        autoescape=select_autoescape(enabled_extensions=("html.j2",), default=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
