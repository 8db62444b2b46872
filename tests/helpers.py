"""Shared capture helpers for renderer tests."""

import re
from io import StringIO

from rich.console import Console

from termdown.options import RenderOptions
from termdown.ui.output import render_markdown
from termdown.ui.renderer import MarkdownRenderer
from termdown.ui.sink import TerminalSink


def strip_ansi(text: str) -> str:
    return re.sub(r"\x1b\[[0-9;]*m", "", text)


def plain_console() -> Console:
    return Console(file=StringIO(), width=80, color_system=None)


def color_console() -> Console:
    return Console(file=StringIO(), width=80, force_terminal=True, color_system="standard")


def render_events(events, **options) -> str:
    """Feed *events* through a fresh renderer and return the plain output."""
    con = plain_console()
    renderer = MarkdownRenderer(TerminalSink(con), RenderOptions(**options))
    renderer.render(events)
    return con.file.getvalue()


def render_source(source: str, **options) -> str:
    """Tokenize and render *source*, returning the plain output."""
    con = plain_console()
    render_markdown(source, console=con, options=RenderOptions(**options))
    return con.file.getvalue()
