"""CLI command implementations"""

import logging

import typer

from gemtext2md.config import Settings, load_config
from gemtext2md.core.errors import ConversionError
from gemtext2md.core.pipeline import convert_lines, read_all_lines


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings() -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config()
    except ValueError as e:
        _fail("Invalid configuration", e)


def convert_cmd():
    """Read gemtext from stdin until EOF and write Markdown to stdout."""
    settings = _settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        lines = read_all_lines(typer.get_text_stream("stdin", encoding=settings.encoding))
    except UnicodeDecodeError as e:
        _fail(f"stdin is not valid {settings.encoding}", e)

    try:
        markdown = convert_lines(lines)
    except ConversionError as e:
        _fail(str(e))

    typer.echo(markdown, nl=False)
