"""Docsmith error hierarchy.

- TemplateValidationError: template fails structural checks
- TemplateNotFoundError: unknown template name requested for render/removal
- StorageError: filesystem read/write failure
- TemplateParseError: malformed JSON in a template file
"""

from pathlib import Path


class DocsmithError(Exception):
    """Base class for all Docsmith errors."""


class TemplateValidationError(DocsmithError):
    """Template failed validation.

    Attributes:
        violations: Path-prefixed descriptions of every failed rule
    """

    def __init__(self, violations: list[str], name: str | None = None) -> None:
        self.violations = list(violations)
        self.name = name
        label = f"Invalid template {name!r}" if name else "Invalid template"
        super().__init__(f"{label}: {'; '.join(self.violations)}")


class TemplateNotFoundError(DocsmithError):
    """Requested template is not in the store."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template not found: {name}")


class StorageError(DocsmithError):
    """Reading or writing a file failed."""


class TemplateParseError(DocsmithError):
    """Template file does not contain valid JSON."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse template file {path}: {reason}")
