"""Table compositor: buffers cells, measures columns, prints bordered rows.

Column widths are display cell widths and only ever grow. With the
buffered policy nothing is printed until the table closes, so every row
is justified to the final widths; with the streaming policy each row is
printed as soon as it closes, using the widths known at that moment.

    |Name| Age|
    |:---|---:|
    |Ann |  30|
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from rich.style import Style
from rich.text import Text

from ..events import Alignment
from ..options import RenderOptions
from .blocks import BlockLayout
from .sink import TerminalSink
from .state import RenderState, TableContext
from .theme import MarkdownTheme

_log = logging.getLogger(__name__)

_BORDER = "|"


@dataclass
class TableBuffer:
    """Cell text and column measurements for the table being read."""

    alignments: list[Alignment]
    column_widths: list[int] = field(default_factory=list)
    current_row: list[Text] = field(default_factory=list)
    rows: list[tuple[list[Text], bool]] = field(default_factory=list)
    is_header_row: bool = False

    def alignment(self, index: int) -> Alignment:
        if index < len(self.alignments):
            return self.alignments[index]
        return Alignment.NONE

    def measure(self, row: Sequence[Text]) -> None:
        """Widen columns to cover *row*; widths never shrink."""
        while len(self.column_widths) < len(row):
            self.column_widths.append(0)
        for i, cell in enumerate(row):
            if cell.cell_len > self.column_widths[i]:
                self.column_widths[i] = cell.cell_len


def justify_cell(cell: Text, width: int, alignment: Alignment) -> Text:
    """Pad a copy of *cell* to *width* cells; never truncates."""
    cell = cell.copy()
    excess = width - cell.cell_len
    if excess <= 0:
        return cell
    if alignment is Alignment.RIGHT:
        cell.pad_left(excess)
    elif alignment is Alignment.CENTER:
        left = excess // 2
        cell.pad_left(left)
        cell.pad_right(excess - left)
    else:
        cell.pad_right(excess)
    return cell


def separator_cell(width: int, alignment: Alignment) -> str:
    """Dash run for the header separator, colon-marked by alignment."""
    chars = ["-"] * width
    if width and alignment in (Alignment.LEFT, Alignment.CENTER):
        chars[0] = ":"
    if width and alignment in (Alignment.RIGHT, Alignment.CENTER):
        chars[-1] = ":"
    return "".join(chars)


class TableCompositor:
    """Consumes table events and prints the justified table."""

    def __init__(
        self,
        state: RenderState,
        sink: TerminalSink,
        theme: MarkdownTheme,
        options: RenderOptions,
        layout: BlockLayout,
    ):
        self._state = state
        self._sink = sink
        self._theme = theme
        self._options = options
        self._layout = layout
        self.buffer: Optional[TableBuffer] = None

    def start(self, alignments: Sequence[Alignment]) -> None:
        self._layout.separate()
        self._state.after_marker = False
        self.buffer = TableBuffer(list(alignments))
        self._state.table_context = TableContext.BODY

    def head_start(self) -> None:
        if self._missing("table head"):
            return
        self.buffer.is_header_row = True
        self._state.table_context = TableContext.HEADER

    def head_end(self) -> None:
        if self._missing("table head end"):
            return
        # Header cells may arrive without a row wrapper
        if self.buffer.current_row:
            self._finish_row()
        self.buffer.is_header_row = False
        self._state.table_context = TableContext.BODY

    def row_start(self) -> None:
        if self._missing("table row"):
            return
        self.buffer.current_row = []

    def cell_start(self) -> None:
        if self._missing("table cell"):
            return
        self.buffer.current_row.append(self._new_cell())

    def append(self, text: str, style: Optional[Style]) -> None:
        """Add inline text to the open cell, opening one if needed."""
        if self._missing("cell text"):
            return
        if not self.buffer.current_row:
            self.buffer.current_row.append(self._new_cell())
        self.buffer.current_row[-1].append(text, style=style)

    def row_end(self) -> None:
        if self._missing("table row end"):
            return
        self._finish_row()

    def end(self) -> None:
        if self._missing("table end"):
            return
        buffer = self.buffer
        if buffer.current_row:
            self._finish_row()
        if self._options.buffered_tables:
            for row, header in buffer.rows:
                self._print_row(row, header)
        self.buffer = None
        self._state.table_context = TableContext.IDLE
        self._sink.end_line()
        self._sink.ensure_blank_line()

    # -- internals ----------------------------------------------------------

    def _missing(self, what: str) -> bool:
        if self.buffer is None:
            _log.debug("%s outside of a table", what)
            return True
        return False

    def _new_cell(self) -> Text:
        if self.buffer.is_header_row:
            return Text(style=self._theme.style("table_header"))
        return Text()

    def _finish_row(self) -> None:
        buffer = self.buffer
        row = buffer.current_row
        header = buffer.is_header_row
        buffer.current_row = []
        buffer.measure(row)
        if self._options.buffered_tables:
            buffer.rows.append((row, header))
        else:
            self._print_row(row, header)
        if header:
            buffer.is_header_row = False

    def _print_row(self, row: list[Text], header: bool) -> None:
        buffer = self.buffer
        border = self._theme.style("table_border")
        line = Text()
        line.append(_BORDER, style=border)
        for i, width in enumerate(buffer.column_widths):
            cell = row[i] if i < len(row) else self._blank_cell(header)
            line.append_text(justify_cell(cell, width, buffer.alignment(i)))
            line.append(_BORDER, style=border)
        self._layout.open_line()
        self._sink.write_text(line)
        self._sink.newline()
        if header:
            self._print_separator()

    def _print_separator(self) -> None:
        buffer = self.buffer
        border = self._theme.style("table_border")
        line = Text()
        line.append(_BORDER, style=border)
        for i, width in enumerate(buffer.column_widths):
            line.append(separator_cell(width, buffer.alignment(i)), style=border)
            line.append(_BORDER, style=border)
        self._layout.open_line()
        self._sink.write_text(line)
        self._sink.newline()

    def _blank_cell(self, header: bool) -> Text:
        if header:
            return Text(style=self._theme.style("table_header"))
        return Text()
