"""Inline formatting: emphasis styles, inline code, links, breaks.

Every write carries the combination of all open styles, so closing an
inner style (emphasis inside strong) falls back to the outer one instead
of resetting the terminal to no style.
"""

import logging
from typing import Optional

from rich.style import Style

from ..events import Construct, ConstructKind
from ..options import RenderOptions
from .blocks import BlockLayout
from .sink import TerminalSink
from .state import RenderState
from .table import TableCompositor
from .theme import MarkdownTheme

_log = logging.getLogger(__name__)

DELIMITERS = {
    ConstructKind.STRONG: "**",
    ConstructKind.EMPHASIS: "*",
    ConstructKind.STRIKETHROUGH: "~~",
}

_PALETTE_ENTRIES = {
    ConstructKind.STRONG: "strong",
    ConstructKind.EMPHASIS: "emphasis",
    ConstructKind.STRIKETHROUGH: "strikethrough",
}


class InlineFormatter:
    """Writes inline content to the sink, a table cell or a code buffer."""

    def __init__(
        self,
        state: RenderState,
        sink: TerminalSink,
        theme: MarkdownTheme,
        options: RenderOptions,
        layout: BlockLayout,
        table: TableCompositor,
    ):
        self._state = state
        self._sink = sink
        self._theme = theme
        self._options = options
        self._layout = layout
        self._table = table
        self._destinations: list[str] = []

    def emit(self, text: str, style: Optional[Style] = None) -> None:
        """Write inline text in *style* (default: the combined open styles)."""
        if not text:
            return
        if style is None:
            style = self._state.current_style()
        if self._state.in_table:
            self._table.append(text, style)
            return
        self._layout.begin_inline()
        self._sink.write(text, style)

    # -- leaves -------------------------------------------------------------

    def text(self, text: str) -> None:
        if self._state.in_code_block:
            self._layout.code_text(text)
            return
        self.emit(text)

    def inline_code(self, code: str) -> None:
        if self._state.in_code_block:
            self._layout.code_text(code)
            return
        if self._options.symbol_echo:
            code = f"`{code}`"
        self.emit(code, self._state.current_style() + self._theme.style("code"))

    def line_break(self) -> None:
        """Soft and hard breaks: one newline, or a space inside a table cell."""
        if self._state.in_table:
            self._table.append(" ", None)
            return
        if self._state.in_code_block:
            self._layout.code_text("\n")
            return
        self._state.after_marker = False
        self._sink.newline()

    def footnote_ref(self, label: str) -> None:
        self.emit(f"[^{label}]")

    # -- emphasis styles ----------------------------------------------------

    def style_start(self, kind: ConstructKind) -> None:
        self._state.push_style(kind, self._theme.style(_PALETTE_ENTRIES[kind]))
        if self._options.symbol_echo:
            self.emit(DELIMITERS[kind])

    def style_end(self, kind: ConstructKind) -> None:
        styles = self._state.styles
        if not styles or styles[-1].kind is not kind:
            _log.debug("%s end without matching start", kind.name)
            return
        if self._options.symbol_echo:
            self.emit(DELIMITERS[kind])
        self._state.pop_style(kind)

    # -- links and images ---------------------------------------------------

    def link_start(self, construct: Construct) -> None:
        self.emit("![" if construct.kind is ConstructKind.IMAGE else "[")
        self._state.push_style(construct.kind, self._theme.style("link"))
        self._destinations.append(construct.destination)

    def link_end(self, kind: ConstructKind) -> None:
        if not self._state.pop_style(kind):
            _log.debug("%s end without matching start", kind.name)
            return
        destination = self._destinations.pop() if self._destinations else ""
        self.emit("]")
        if self._options.show_urls and destination:
            self.emit(f"({destination})", self._state.current_style() + self._theme.style("url"))
