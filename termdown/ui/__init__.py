"""Terminal rendering components."""

from .theme import DEFAULT_THEME, MarkdownPalette, MarkdownTheme, console
from .sink import TerminalSink
from .state import BlockContext, RenderState, TableContext
from .renderer import MarkdownRenderer
from .output import render_markdown, render_error

__all__ = [
    "DEFAULT_THEME",
    "MarkdownPalette",
    "MarkdownTheme",
    "console",
    "TerminalSink",
    "BlockContext",
    "RenderState",
    "TableContext",
    "MarkdownRenderer",
    "render_markdown",
    "render_error",
]
