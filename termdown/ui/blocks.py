"""Block layout: headings, paragraphs, quotes, code blocks, lists, rules.

Decides where newlines, blank lines and indentation go. Every output
line starts with the same continuation prefix: the heading-derived
indentation followed by the width of each open block marker (``> ``,
``- ``, ``12. ``), so wrapped content lines up under its marker.
"""

import logging

from rich.syntax import Syntax
from rich.text import Text

from ..events import Construct, ConstructKind
from ..options import RenderOptions
from .sink import TerminalSink
from .state import BlockContext, ListFrame, RenderState
from .theme import MarkdownTheme

_log = logging.getLogger(__name__)

_FENCE = "```"
_RULE_ECHO = "---"
_RULE_GLYPH = "─" * 3


class BlockLayout:
    """Block-level construct handling over a shared RenderState."""

    def __init__(
        self,
        state: RenderState,
        sink: TerminalSink,
        theme: MarkdownTheme,
        options: RenderOptions,
    ):
        self._state = state
        self._sink = sink
        self._theme = theme
        self._options = options

    # -- line management ----------------------------------------------------

    def line_prefix(self) -> str:
        state = self._state
        return self._options.indent * state.indent_level + " " * state.continuation_width()

    def separate(self) -> None:
        """Leave a blank line before a new block, unless it follows a marker."""
        if not self._state.after_marker:
            self._sink.ensure_blank_line()

    def open_line(self) -> None:
        """Position output at the start of a prefixed line.

        Directly after a marker the current line is reused.
        """
        if self._state.after_marker:
            self._state.after_marker = False
            return
        self._sink.end_line()
        self._sink.write(self.line_prefix())

    def begin_inline(self) -> None:
        """Called before every inline write outside tables and code."""
        if self._state.after_marker:
            self._state.after_marker = False
            return
        if self._sink.at_line_start:
            self._sink.write(self.line_prefix())

    # -- headings -----------------------------------------------------------

    def heading_start(self, construct: Construct) -> None:
        level = construct.level or 1
        self.separate()
        self._state.indent_level = level - 1 + self._options.center_offset
        self.open_line()
        style = self._theme.style("heading")
        self._state.push_style(ConstructKind.HEADING, style)
        if self._options.symbol_echo:
            self._sink.write("#" * level + " ", style)

    def heading_end(self) -> None:
        if not self._state.pop_style(ConstructKind.HEADING):
            _log.debug("heading end without open heading")
            return
        self._sink.end_line()

    # -- paragraphs ---------------------------------------------------------

    def paragraph_start(self) -> None:
        self.separate()

    def paragraph_end(self) -> None:
        self._sink.end_line()

    # -- block quotes -------------------------------------------------------

    def block_quote_start(self) -> None:
        self.separate()
        self.open_line()
        style = self._theme.style("block_quote")
        self._sink.write("> ", style)
        self._state.push_block(BlockContext.BLOCK_QUOTE, 2)
        self._state.push_style(ConstructKind.BLOCK_QUOTE, style)
        self._state.after_marker = True

    def block_quote_end(self) -> None:
        if not self._state.pop_block(BlockContext.BLOCK_QUOTE):
            _log.debug("block quote end without open block quote")
            return
        self._state.pop_style(ConstructKind.BLOCK_QUOTE)
        self._state.after_marker = False
        self._sink.end_line()
        self._sink.ensure_blank_line()

    # -- code blocks --------------------------------------------------------

    def code_block_start(self, construct: Construct) -> None:
        self.separate()
        state = self._state
        state.code_language = construct.language
        state.code_buffer = []

        label = construct.language
        if self._options.symbol_echo:
            label = _FENCE + label
        if label:
            self.open_line()
            self._sink.write(label, self._theme.style("fence"))
            self._sink.newline()
        state.push_block(BlockContext.CODE_BLOCK)

    def code_text(self, text: str) -> None:
        self._state.code_buffer.append(text)

    def code_block_end(self) -> None:
        state = self._state
        if not state.pop_block(BlockContext.CODE_BLOCK):
            _log.debug("code block end without open code block")
            return

        code = "".join(state.code_buffer)
        if code.endswith("\n"):
            code = code[:-1]
        for line in self._code_lines(code, state.code_language):
            if line.plain:
                self.open_line()
                self._sink.write_text(line)
            self._sink.newline()

        if self._options.symbol_echo:
            self.open_line()
            self._sink.write(_FENCE, self._theme.style("fence"))
            self._sink.newline()

        state.code_buffer = []
        state.code_language = ""
        state.after_marker = False

    def _code_lines(self, code: str, language: str) -> list[Text]:
        if not code:
            return []
        if self._options.highlight_code and language:
            syntax = Syntax(
                code,
                language,
                theme=self._theme.code_theme,
                background_color="default",
            )
            if syntax.lexer is not None:
                highlighted = syntax.highlight(code)
                highlighted.remove_suffix("\n")
                return list(highlighted.split("\n", allow_blank=True))
            _log.debug("no lexer for %r, using plain code color", language)
        style = self._theme.style("code")
        return [Text(line, style=style) for line in code.split("\n")]

    # -- lists --------------------------------------------------------------

    def list_start(self, construct: Construct) -> None:
        if not self._state.in_list_item:
            self.separate()
        self._state.lists.append(ListFrame(construct.ordered, construct.start))

    def list_end(self) -> None:
        if not self._state.lists:
            _log.debug("list end without open list")
            return
        self._state.lists.pop()

    def list_item_start(self) -> None:
        state = self._state
        frame = state.lists[-1] if state.lists else ListFrame(ordered=False)
        if frame.ordered:
            marker = f"{frame.next_number}. "
            frame.next_number += 1
        else:
            marker = "- "
        self.open_line()
        self._sink.write(marker, self._theme.style("list_marker"))
        state.push_block(BlockContext.LIST_ITEM, len(marker))
        state.after_marker = True

    def list_item_end(self) -> None:
        if not self._state.pop_block(BlockContext.LIST_ITEM):
            _log.debug("list item end without open list item")
            return
        self._state.after_marker = False
        self._sink.end_line()

    # -- rules and footnotes ------------------------------------------------

    def rule(self) -> None:
        self.separate()
        self.open_line()
        glyph = _RULE_ECHO if self._options.symbol_echo else _RULE_GLYPH
        self._sink.write(glyph * (self._state.indent_level + 1), self._theme.style("rule"))
        self._sink.newline()
        self._sink.ensure_blank_line()

    def footnote_start(self, construct: Construct) -> None:
        self.separate()
        self.open_line()
        marker = f"[^{construct.label}]: "
        self._sink.write(marker, self._theme.style("footnote"))
        self._state.push_block(BlockContext.FOOTNOTE, len(marker))
        self._state.after_marker = True

    def footnote_end(self) -> None:
        if not self._state.pop_block(BlockContext.FOOTNOTE):
            _log.debug("footnote end without open footnote")
            return
        self._state.after_marker = False
        self._sink.end_line()
