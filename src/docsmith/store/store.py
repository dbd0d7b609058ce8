"""Template store backed by a directory of JSON files.

One file per template, named ``<name>.json``. The store is an explicit object:
construct it once with a directory and pass it to whoever needs templates.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from docsmith.errors import (
    StorageError,
    TemplateNotFoundError,
    TemplateParseError,
    TemplateValidationError,
)
from docsmith.models.template import Template
from docsmith.store.validator import validate_template

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".json"


@dataclass
class LoadError:
    """Template file skipped during load.

    Attributes:
        file_path: File that could not be loaded
        message: Why it was skipped
    """

    file_path: Path
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"file_path": str(self.file_path), "message": self.message}


def default_template() -> dict[str, Any]:
    """Return the starter template written by ``docsmith init``."""
    return {
        "name": "default-article",
        "title": "Article Title",
        "sections": [
            {"type": "paragraph", "placeholder": "This is the introduction..."},
            {"type": "heading", "level": 2, "text": "Main Points"},
            {"type": "paragraph", "placeholder": "Describe your main points here..."},
        ],
    }


def read_template_file(path: Path) -> Any:
    """Read and parse one template file.

    Raises:
        StorageError: If the file cannot be read
        TemplateParseError: If the file is not valid JSON
    """
    try:
        data = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Failed to read {path}: {e}") from e

    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        raise TemplateParseError(path, str(e)) from e


def template_filename(name: str) -> str:
    """Derive the backing filename for a template name."""
    return f"{name}{TEMPLATE_SUFFIX}"


class TemplateStore:
    """Name-to-template index persisted as JSON files.

    Usage:
        store = TemplateStore(Path("templates"))
        store.load()
        template = store.get("blog-post")
    """

    def __init__(self, directory: Path) -> None:
        """Initialize an empty store.

        Args:
            directory: Directory holding one JSON file per template
        """
        self.directory = Path(directory)
        self.load_errors: list[LoadError] = []
        self._templates: dict[str, Template] = {}
        self._paths: dict[str, Path] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def load(self) -> int:
        """Load every template file in the directory.

        Files that fail to parse or validate are logged, recorded in
        ``load_errors`` and skipped.

        Returns:
            Number of templates loaded
        """
        self._templates.clear()
        self._paths.clear()
        self.load_errors = []

        if not self.directory.is_dir():
            logger.debug("Template directory not found: %s", self.directory)
            return 0

        for path in sorted(self.directory.glob(f"*{TEMPLATE_SUFFIX}")):
            try:
                data = read_template_file(path)
            except (TemplateParseError, StorageError) as e:
                self._skip(path, str(e))
                continue

            violations = validate_template(data)
            if violations:
                self._skip(path, "; ".join(violations))
                continue

            try:
                template = Template.from_dict(data)
            except (TypeError, ValueError) as e:
                self._skip(path, f"malformed section: {e}")
                continue

            if template.name in self._templates:
                logger.warning(
                    "Template %s in %s overrides %s",
                    template.name,
                    path.name,
                    self._paths[template.name].name,
                )
            self._templates[template.name] = template
            self._paths[template.name] = path

        logger.debug("Loaded %d template(s) from %s", len(self._templates), self.directory)
        return len(self._templates)

    def _skip(self, path: Path, message: str) -> None:
        logger.warning(
            "Skipping template file %s: %s",
            path.name,
            message,
            extra={"extra_data": {"file": str(path)}},
        )
        self.load_errors.append(LoadError(file_path=path, message=message))

    def list(self) -> list[str]:
        """Return known template names."""
        return sorted(self._templates)

    def get(self, name: str) -> Template | None:
        """Return the named template, or None if it is not in the store."""
        return self._templates.get(name)

    def add(self, candidate: dict[str, Any] | Template) -> Template:
        """Validate, persist and index a template.

        Args:
            candidate: Template mapping or Template instance

        Returns:
            The stored Template

        Raises:
            TemplateValidationError: If the template is invalid
            StorageError: If the file cannot be written
        """
        data = candidate.to_dict() if isinstance(candidate, Template) else candidate

        violations = validate_template(data)
        name = data.get("name") if isinstance(data, dict) else None
        if not violations and (name in {".", ".."} or "/" in name or "\\" in name):
            violations.append("name must not contain path separators")
        if violations:
            raise TemplateValidationError(violations, name=name if isinstance(name, str) else None)

        try:
            template = Template.from_dict(data)
        except (TypeError, ValueError) as e:
            raise TemplateValidationError([f"malformed section: {e}"], name=name) from e

        # Replacing a template rewrites the file it was loaded from
        path = self._paths.get(name) or self.directory / template_filename(name)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to save template {name}: {e}") from e

        self._templates[name] = template
        self._paths[name] = path
        logger.info("Added template: %s", name)
        return template

    def add_from_file(self, path: Path) -> Template:
        """Read a template JSON file and add it to the store.

        Raises:
            TemplateParseError: If the file is not valid JSON
            TemplateValidationError: If the template is invalid
            StorageError: If reading or writing fails
        """
        return self.add(read_template_file(Path(path)))

    def remove(self, name: str) -> None:
        """Delete a template and its backing file.

        Raises:
            TemplateNotFoundError: If the template is not in the store
            StorageError: If the file cannot be deleted
        """
        if name not in self._templates:
            raise TemplateNotFoundError(name)

        path = self._paths[name]
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove template {name}: {e}") from e

        del self._templates[name]
        del self._paths[name]
        logger.info("Removed template: %s", name)
