"""Output rendering -- thin facade over the tokenizer and renderer."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from ..options import RenderOptions
from ..tokenizer import tokenize
from .renderer import MarkdownRenderer
from .sink import TerminalSink
from .theme import DEFAULT_THEME, MarkdownTheme, err_console


def render_markdown(
    source: str,
    console: Optional[Console] = None,
    options: Optional[RenderOptions] = None,
    theme: MarkdownTheme = DEFAULT_THEME,
) -> None:
    """Render a markdown document to *console* (stdout by default)."""
    from .theme import console as default_console

    con = console or default_console
    renderer = MarkdownRenderer(TerminalSink(con), options, theme)
    renderer.render(tokenize(source))


def render_error(text: str, console: Optional[Console] = None) -> None:
    """Render an error message on stderr."""
    con = console or err_console
    err = Text()
    err.append("err ", style="bold red")
    err.append("| ", style="dim grey35")
    err.append(text, style="red")
    con.print(err)
