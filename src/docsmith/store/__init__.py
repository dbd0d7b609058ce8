"""Docsmith template storage.

- store: Directory-backed name-to-template index
- validator: Structural checks gating templates into the store
"""

from docsmith.store.store import LoadError, TemplateStore, default_template
from docsmith.store.validator import is_valid_template, validate_template

__all__ = [
    "TemplateStore",
    "LoadError",
    "default_template",
    "validate_template",
    "is_valid_template",
]
