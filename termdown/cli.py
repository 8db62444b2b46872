"""termdown CLI - render markdown files in the terminal."""

import logging
import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.text import Text

from . import __version__
from .config import ConfigManager
from .options import TABLE_MODES
from .ui.output import render_error, render_markdown
from .ui.theme import console

_log = logging.getLogger(__name__)


def read_document(path: str) -> str:
    """Read a UTF-8 markdown document; ``-`` reads stdin."""
    try:
        with click.open_file(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not read file: {path}: {e}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _make_console(color: Optional[bool]) -> Console:
    if color is False:
        return Console(color_system=None, highlight=False, soft_wrap=True)
    if color is True:
        return Console(force_terminal=True, highlight=False, soft_wrap=True)
    return console


def _detach_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        _log.debug("stdout has no file descriptor to redirect")


# CLI Commands
@click.group()
@click.version_option(__version__, prog_name="termdown")
def cli():
    """TERMDOWN - colorized markdown for the terminal.

    Render a markdown file with styled headings, lists, quotes, code and tables.
    """
    pass


@cli.command()
@click.argument("file", required=False)
@click.option("--file", "-f", "file_option", help="Path to the markdown file (- for stdin)")
@click.option("--symbols/--no-symbols", default=None, help="Echo markdown delimiters next to color")
@click.option("--center-offset", "-c", type=click.IntRange(min=0), default=None,
              help="Extra indentation levels added to every heading")
@click.option("--indent-width", type=click.IntRange(min=0), default=None,
              help="Spaces per indentation level")
@click.option("--table-mode", type=click.Choice(TABLE_MODES), default=None,
              help="Print tables once complete (buffered) or row by row (streaming)")
@click.option("--urls/--no-urls", default=None, help="Show link and image destinations")
@click.option("--highlight/--no-highlight", default=None, help="Syntax highlight fenced code")
@click.option("--color/--no-color", default=None, help="Force or disable terminal styling")
@click.option("--config", "config_path", default=None, help="Path to a config file")
@click.option("--verbose", "-v", is_flag=True, help="Log ignored events and config problems")
def render(file, file_option, symbols, center_offset, indent_width, table_mode,
           urls, highlight, color, config_path, verbose):
    """Render a markdown file."""
    _configure_logging(verbose)
    path = file_option or file
    if not path:
        raise click.UsageError("No markdown file given (pass FILE or --file)")

    config = ConfigManager(config_path)
    try:
        options = config.get_render_options(
            symbol_echo=symbols,
            center_offset=center_offset,
            indent_width=indent_width,
            table_mode=table_mode,
            show_urls=urls,
            highlight_code=highlight,
        )
        theme = config.get_theme()
    except ValueError as e:
        raise click.UsageError(f"Invalid configuration: {e}")

    source = read_document(path)
    try:
        render_markdown(source, console=_make_console(color), options=options, theme=theme)
    except BrokenPipeError:
        _detach_stdout()
        render_error("output closed before rendering finished")
        sys.exit(1)
    except OSError as e:
        render_error(f"Could not write output: {e}")
        sys.exit(1)


@cli.command()
@click.option("--config", "config_path", default=None, help="Path to a config file")
@click.option("--init", is_flag=True, help="Write a default config file")
def config(config_path, init):
    """Show configuration."""
    manager = ConfigManager(config_path)
    path = manager.config_path

    if init:
        if path.exists():
            raise click.ClickException(f"Config file already exists: {path}")
        manager.write_default()
        console.print(Text(f"Wrote default config to {path}"))
        return

    console.print(Text(f"Config file: {path}" + ("" if path.exists() else " (not found, using defaults)")))
    for key, value in manager.get_render_config().items():
        console.print(Text(f"  {key}: {value}"))


if __name__ == "__main__":
    cli()
