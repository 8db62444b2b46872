"""termdown - Colorized, indentation-aware markdown for the terminal."""

__version__ = "0.1.0"

from .events import Alignment, Construct, ConstructKind
from .options import RenderOptions
from .tokenizer import tokenize
from .ui import MarkdownRenderer, TerminalSink, render_markdown
from .config import ConfigManager
from .cli import cli

__all__ = [
    "Alignment",
    "Construct",
    "ConstructKind",
    "RenderOptions",
    "tokenize",
    "MarkdownRenderer",
    "TerminalSink",
    "render_markdown",
    "ConfigManager",
    "cli",
]
