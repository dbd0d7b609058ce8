"""Docsmith configuration system.

Configuration is YAML-based with per-run CLI overrides (--templates-dir,
--format, --word-count, ...). Supports environment variable substitution
(${VAR}) in config files.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.docsmith/config.yaml
3. ./docsmith.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from docsmith.models.document import DEFAULT_WORDS_PER_MINUTE, RenderOptions
from docsmith.renderers.converters import OutputFormat
from docsmith.renderers.locale import DEFAULT_LOCALE, LOCALES

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class TemplatesConfig:
    """Template store configuration.

    Attributes:
        directory: Directory holding one JSON file per template
    """

    directory: str = "templates"


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        directory: Directory for saved documents
        format: Default output format (markdown, html, json)
    """

    directory: str = "output"
    format: str = "markdown"

    def __post_init__(self) -> None:
        """Validate output format."""
        OutputFormat.parse(self.format)


@dataclass
class RenderConfig:
    """Rendering defaults.

    Attributes:
        locale: Language for default texts and metadata labels (en, zh)
        enhanced: Append metadata and report statistics by default
        max_words: Word limit for placeholder paragraphs
        expand: Pad short placeholder paragraphs up to max_words
        number_ordered_lists: Emit "1." prefixes for ordered lists
        words_per_minute: Reading speed used for reading-time estimates
    """

    locale: str = DEFAULT_LOCALE
    enhanced: bool = False
    max_words: int | None = None
    expand: bool = False
    number_ordered_lists: bool = False
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if self.locale not in LOCALES:
            raise ValueError(f"Invalid locale: {self.locale}. Valid: {sorted(LOCALES)}")

        if self.max_words is not None and self.max_words <= 0:
            raise ValueError(f"max_words must be positive (got {self.max_words})")

        if self.words_per_minute <= 0:
            raise ValueError(f"words_per_minute must be positive (got {self.words_per_minute})")

    def options(self, max_words: int | None = None, expand: bool | None = None) -> RenderOptions:
        """Build render options, letting per-run values override config."""
        return RenderOptions(
            max_words=max_words if max_words is not None else self.max_words,
            expand=expand if expand is not None else self.expand,
        )


@dataclass
class DocsmithConfig:
    """Top-level Docsmith configuration.

    Attributes:
        templates: Template store settings
        output: Output directory and format
        render: Rendering defaults
    """

    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path

    @property
    def base_dir(self) -> Path:
        """Directory relative paths in the config resolve against."""
        return self._config_path.parent if self._config_path else Path.cwd()

    def templates_dir(self) -> Path:
        """Resolve the template directory."""
        return self.base_dir / self.templates.directory

    def output_dir(self) -> Path:
        """Resolve the output directory."""
        return self.base_dir / self.output.directory


# =============================================================================
# Environment Variable Substitution
# =============================================================================

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(value: Any) -> Any:
    """Substitute ${VAR} references in config values.

    Args:
        value: Config value (string, dict, list, or other)

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If a referenced variable is not set
    """
    if isinstance(value, str):

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = os.environ.get(var_name)
            if env_value is None:
                raise ValueError(f"Environment variable not set: {var_name}")
            return env_value

        return _ENV_VAR_RE.sub(replace_var, value)

    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}

    elif isinstance(value, list):
        return [substitute_env_vars(v) for v in value]

    return value


# =============================================================================
# Config File Discovery
# =============================================================================


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find configuration file in standard locations.

    Search order:
    1. ./.docsmith/config.yaml
    2. ./docsmith.yaml

    Args:
        start_path: Starting directory for search (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    start_path = (start_path or Path.cwd()).resolve()

    for candidate in (
        start_path / ".docsmith" / "config.yaml",
        start_path / "docsmith.yaml",
    ):
        if candidate.exists():
            return candidate

    return None


# =============================================================================
# Config Loading
# =============================================================================


def load_config_from_dict(data: dict[str, Any]) -> DocsmithConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        DocsmithConfig instance

    Raises:
        ValueError: If a value is invalid
    """
    data = substitute_env_vars(data)
    config = DocsmithConfig()

    if "templates" in data:
        templates_data = data["templates"] or {}
        config.templates = TemplatesConfig(
            directory=str(templates_data.get("directory", config.templates.directory)),
        )

    if "output" in data:
        output_data = data["output"] or {}
        config.output = OutputConfig(
            directory=str(output_data.get("directory", config.output.directory)),
            format=output_data.get("format", config.output.format),
        )

    if "render" in data:
        render_data = data["render"] or {}
        config.render = RenderConfig(
            locale=render_data.get("locale", DEFAULT_LOCALE),
            enhanced=bool(render_data.get("enhanced", False)),
            max_words=render_data.get("max_words"),
            expand=bool(render_data.get("expand", False)),
            number_ordered_lists=bool(render_data.get("number_ordered_lists", False)),
            words_per_minute=render_data.get("words_per_minute", DEFAULT_WORDS_PER_MINUTE),
        )

    return config


def load_config(
    config_path: Path | None = None,
    auto_discover: bool = True,
) -> DocsmithConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file
        auto_discover: Whether to search for config file if not specified

    Returns:
        DocsmithConfig instance

    Raises:
        FileNotFoundError: If config_path specified but doesn't exist
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        found_path: Path | None = config_path
    elif auto_discover:
        found_path = find_config_file()
    else:
        found_path = None

    if found_path is None:
        return DocsmithConfig()

    with open(found_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    config = load_config_from_dict(data)
    config._config_path = found_path.resolve()
    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return f'''# Docsmith Configuration

# Template store
templates:
  directory: "templates"

# Saved documents
output:
  directory: "output"
  format: "markdown"  # markdown, html, json

# Rendering defaults
render:
  locale: "{DEFAULT_LOCALE}"            # en, zh
  enhanced: false         # append metadata block and report statistics
  # max_words: 120        # word limit for placeholder paragraphs
  expand: false           # pad short placeholder paragraphs up to max_words
  number_ordered_lists: false
  words_per_minute: {DEFAULT_WORDS_PER_MINUTE}
'''
