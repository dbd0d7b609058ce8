"""Shared pytest fixtures for Docsmith tests.

Fixtures are organized by category:
- Path fixtures: Bundled template files
- Store fixtures: Template stores over temporary directories
- Template fixtures: Template mappings for renderer tests
"""

import logging
import shutil
from pathlib import Path
from typing import Any

import pytest

from docsmith.store import TemplateStore

VALID_TEMPLATES = ("blog-post", "tutorial")

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def fixture_templates_dir(fixtures_dir: Path) -> Path:
    """Return the directory of bundled template files (read-only)."""
    return fixtures_dir / "templates"


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def templates_dir(tmp_path: Path, fixture_templates_dir: Path) -> Path:
    """Copy the valid fixture templates into a temporary directory."""
    directory = tmp_path / "templates"
    directory.mkdir()
    for name in VALID_TEMPLATES:
        shutil.copy(fixture_templates_dir / f"{name}.json", directory)
    return directory


@pytest.fixture
def store(templates_dir: Path) -> TemplateStore:
    """Return a loaded store over a temporary copy of the fixtures."""
    template_store = TemplateStore(templates_dir)
    template_store.load()
    return template_store


@pytest.fixture
def empty_store(tmp_path: Path) -> TemplateStore:
    """Return a store over a directory that does not exist yet."""
    return TemplateStore(tmp_path / "empty")


# =============================================================================
# Template Fixtures
# =============================================================================


@pytest.fixture
def minimal_template() -> dict[str, Any]:
    """Return the smallest valid template."""
    return {"name": "minimal", "sections": []}


@pytest.fixture
def article_template() -> dict[str, Any]:
    """Return a template using every section kind."""
    return {
        "name": "article",
        "title": "Template Title",
        "sections": [
            {"type": "heading", "level": 2, "text": "Introduction"},
            {"type": "paragraph", "text": "Plain paragraph."},
            {"type": "paragraph", "placeholder": "one two three four five six seven"},
            {"type": "list", "items": ["a", "b"]},
            {"type": "code", "language": "python", "code": "print('hi')"},
            {"type": "quote", "text": "Quoted", "author": "Someone"},
            {"type": "image", "url": "img.png", "alt": "Alt", "caption": "Caption"},
            {"type": "table", "headers": ["A", "B"], "rows": [["1", "2"]]},
            {"type": "mystery", "payload": 42},
        ],
    }


@pytest.fixture
def twenty_words() -> str:
    """Return a placeholder sentence of exactly twenty words."""
    return " ".join(f"word{i}" for i in range(1, 21))


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_docsmith_logger():
    """Drop handlers installed by CLI invocations between tests."""
    yield
    logger = logging.getLogger("docsmith")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
