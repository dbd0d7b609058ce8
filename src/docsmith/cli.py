"""Docsmith CLI interface.

Commands:
- create: Generate a document from a template
- templates: List, add or remove templates
- init: Create a starter project (config, template and output directories)
- render: Render a JSON request and print the JSON response
- validate: Validate a template JSON file

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log lines
- --version: Show version and exit

Exit codes: 0 on success, 1 on any error.
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from docsmith import __version__
from docsmith.config import DocsmithConfig, create_default_config, load_config
from docsmith.errors import DocsmithError
from docsmith.utils.logging import configure_from_cli, get_logger

if TYPE_CHECKING:
    from docsmith.store import TemplateStore

# Create Typer app
app = typer.Typer(
    name="docsmith",
    help="Render structured JSON templates into Markdown, HTML and JSON documents",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: DocsmithConfig | None = None
_logger = get_logger()

PREVIEW_CHARS = 300


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"docsmith {__version__}")
        raise typer.Exit()


def _get_config() -> DocsmithConfig:
    return _config if _config is not None else DocsmithConfig()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Emit log messages as JSON lines",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Docsmith - template-driven document generator."""
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _open_store(templates_dir: Path | None) -> "TemplateStore":
    """Create and load the template store."""
    from docsmith.store import TemplateStore

    directory = templates_dir or _get_config().templates_dir()
    store = TemplateStore(directory)
    store.load()
    for load_error in store.load_errors:
        _logger.warning(f"Skipped {load_error.file_path.name}: {load_error.message}")
    return store


TemplatesDirOption = Annotated[
    Path | None,
    typer.Option(
        "--templates-dir",
        "-d",
        help="Template directory (overrides config)",
        file_okay=False,
    ),
]


# =============================================================================
# create command
# =============================================================================


@app.command()
def create(
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Template name",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file; relative paths go under output.directory (stdout when omitted)",
            dir_okay=False,
        ),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option(
            "--title",
            "-T",
            help="Document title (defaults to the template title)",
        ),
    ] = None,
    format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: markdown, html, json",
        ),
    ] = None,
    enhanced: Annotated[
        bool | None,
        typer.Option(
            "--enhanced/--plain",
            "-e/-p",
            help="Append a metadata block and report statistics",
            show_default=False,
        ),
    ] = None,
    word_count: Annotated[
        int | None,
        typer.Option(
            "--word-count",
            "-w",
            help="Word limit for placeholder paragraphs",
            min=1,
        ),
    ] = None,
    expand: Annotated[
        bool | None,
        typer.Option(
            "--expand/--no-expand",
            help="Pad short placeholder paragraphs up to the word limit",
            show_default=False,
        ),
    ] = None,
    templates_dir: TemplatesDirOption = None,
    non_interactive: Annotated[
        bool,
        typer.Option(
            "--non-interactive",
            "-y",
            help="Never prompt; fail when --template is missing",
        ),
    ] = False,
) -> None:
    """Generate a document from a template.

    Exit codes:
        0: Document generated
        1: Error during generation
    """
    from docsmith.renderers import (
        DocumentComposer,
        OutputFormat,
        convert,
        save_document,
        write_document,
    )

    config = _get_config()
    store = _open_store(templates_dir)

    try:
        output_format = OutputFormat.parse(format or config.output.format)
        options = config.render.options(max_words=word_count, expand=expand)
    except ValueError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    if template is None:
        names = store.list()
        if non_interactive or not names:
            _logger.error("No template given (use --template)")
            raise typer.Exit(1)
        typer.echo("Available templates:")
        for name in names:
            typer.echo(f"  - {name}")
        template = typer.prompt("Template", default=names[0])
        if title is None:
            title = typer.prompt("Title", default="", show_default=False) or None

    is_enhanced = config.render.enhanced if enhanced is None else enhanced
    composer = DocumentComposer(
        store,
        locale=config.render.locale,
        number_ordered_lists=config.render.number_ordered_lists,
    )

    written: Path | None = None
    try:
        document = composer.generate(template, title, options, enhanced=is_enhanced)
        if output is None:
            rendered = convert(document.content, output_format, document.metadata)
            typer.echo(rendered, nl=not rendered.endswith("\n"))
        elif output.is_absolute():
            written = write_document(output, document.content, output_format, document.metadata)
        else:
            written = save_document(
                document.content,
                str(output),
                config.output_dir(),
                output_format,
                document.metadata,
            )
    except (DocsmithError, ValueError) as e:
        _logger.error(f"Failed to generate content: {e}")
        raise typer.Exit(1)

    if written is not None:
        preview = document.content[:PREVIEW_CHARS]
        typer.echo("\n--- Preview ---\n")
        typer.echo(preview + ("..." if len(document.content) > PREVIEW_CHARS else ""))
        typer.echo(f"\n📄 Document written to: {written}")

    if is_enhanced:
        stats = document.stats(config.render.words_per_minute)
        typer.echo(
            f"Words: {stats.word_count} | Lines: {stats.line_count} | "
            f"Characters: {stats.character_count} | Reading time: {stats.reading_time} min",
            err=True,
        )


# =============================================================================
# templates command
# =============================================================================


@app.command()
def templates(
    list_: Annotated[
        bool,
        typer.Option(
            "--list",
            "-l",
            help="List available templates",
        ),
    ] = False,
    add: Annotated[
        Path | None,
        typer.Option(
            "--add",
            "-a",
            help="Add a template from a JSON file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    remove: Annotated[
        str | None,
        typer.Option(
            "--remove",
            "-r",
            help="Remove a template by name",
        ),
    ] = None,
    templates_dir: TemplatesDirOption = None,
) -> None:
    """Manage templates (lists them when no action is given)."""
    store = _open_store(templates_dir)

    if add is not None:
        try:
            added = store.add_from_file(add)
        except DocsmithError as e:
            _logger.error(f"Failed to add template: {e}")
            raise typer.Exit(1)
        typer.echo(f"✅ Template added: {added.name}")

    elif remove is not None:
        try:
            store.remove(remove)
        except DocsmithError as e:
            _logger.error(f"Failed to remove template: {e}")
            raise typer.Exit(1)
        typer.echo(f"✅ Template removed: {remove}")

    else:
        names = store.list()
        if not names:
            typer.echo(f"No templates in {store.directory}")
            return
        typer.echo("Available templates:")
        for name in names:
            typer.echo(f"  - {name}")


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize a Docsmith project in the current directory.

    Creates docsmith.yaml, the template directory with a default template,
    and the output directory.
    """
    from docsmith.store import TemplateStore, default_template

    config_file = Path("docsmith.yaml")
    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config = DocsmithConfig()
    templates_dir = Path(config.templates.directory)
    output_dir = Path(config.output.directory)

    try:
        config_file.write_text(create_default_config(), encoding="utf-8")
        output_dir.mkdir(parents=True, exist_ok=True)
        store = TemplateStore(templates_dir)
        store.load()
        starter = store.add(default_template())
    except (OSError, DocsmithError) as e:
        _logger.error(f"Initialization failed: {e}")
        raise typer.Exit(1)

    _logger.info(f"Created config: {config_file}")

    typer.echo("\n✅ Docsmith project initialized")
    typer.echo(f"   Config: {config_file}")
    typer.echo(f"   Templates: {templates_dir}/ ({starter.name})")
    typer.echo(f"   Output: {output_dir}/")


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    request: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON render request",
            exists=True,
            dir_okay=False,
        ),
    ],
    templates_dir: TemplatesDirOption = None,
) -> None:
    """Render a template from a JSON request and print the JSON response.

    Request: {"templateName", "title"?, "options"?: {"wordCount", "expand"}, "enhanced"?}
    Response: {"content", "stats"}, where stats is null unless enhanced.
    """
    from docsmith.models import RenderOptions
    from docsmith.renderers import DocumentComposer

    config = _get_config()

    try:
        payload = json.loads(request.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        _logger.error(f"Failed to read render request: {e}")
        raise typer.Exit(1)

    if not isinstance(payload, dict) or not isinstance(payload.get("templateName"), str):
        _logger.error("Render request must be an object with a string templateName")
        raise typer.Exit(1)

    title = payload.get("title")
    raw_options = payload.get("options")
    if title is not None and not isinstance(title, str):
        _logger.error("Render request title must be a string")
        raise typer.Exit(1)
    if raw_options is not None and not isinstance(raw_options, dict):
        _logger.error("Render request options must be an object")
        raise typer.Exit(1)

    try:
        options = RenderOptions.from_dict(raw_options)
    except (TypeError, ValueError) as e:
        _logger.error(f"Invalid render options: {e}")
        raise typer.Exit(1)

    enhanced = payload.get("enhanced") is True
    store = _open_store(templates_dir)
    composer = DocumentComposer(
        store,
        locale=config.render.locale,
        number_ordered_lists=config.render.number_ordered_lists,
    )

    try:
        document = composer.generate(payload["templateName"], title, options, enhanced=enhanced)
    except DocsmithError as e:
        _logger.error(f"Failed to generate content: {e}")
        raise typer.Exit(1)

    response = document.to_dict(enhanced, config.render.words_per_minute)
    typer.echo(json.dumps(response, indent=2, ensure_ascii=False))


# =============================================================================
# validate command
# =============================================================================


@app.command()
def validate(
    template: Annotated[
        Path,
        typer.Argument(
            help="Path to template JSON file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
) -> None:
    """Validate a template JSON file.

    Reports every structural violation and any section kinds that will be
    skipped when rendering.
    """
    from docsmith.models import Template, UnknownSection
    from docsmith.store.store import read_template_file
    from docsmith.store.validator import validate_template

    _logger.info(f"Validating template: {template}")

    try:
        data = read_template_file(template)
    except DocsmithError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    violations = validate_template(data)
    if violations:
        typer.echo(f"❌ Template is invalid: {template}")
        for violation in violations:
            typer.echo(f"   • {violation}")
        raise typer.Exit(1)

    for section in Template.from_dict(data).sections:
        if isinstance(section, UnknownSection):
            _logger.warning(f"Section type '{section.type}' is not rendered and will be skipped")

    typer.echo(f"✅ Template is valid: {template}")


if __name__ == "__main__":
    app()
