"""Event-driven markdown renderer.

Consumes the tokenizer's event stream one event at a time and writes
styled output incrementally, flushing after every event so output stays
visible if the process is interrupted.
"""

import logging
from typing import Callable, Iterable, Optional

from .. import events as ev
from ..events import Construct, ConstructKind
from ..options import RenderOptions
from .blocks import BlockLayout
from .inline import InlineFormatter
from .sink import TerminalSink
from .state import RenderState
from .table import TableCompositor
from .theme import DEFAULT_THEME, MarkdownTheme

_log = logging.getLogger(__name__)

_EMPHASIS_KINDS = (ConstructKind.STRONG, ConstructKind.EMPHASIS, ConstructKind.STRIKETHROUGH)
_LINK_KINDS = (ConstructKind.LINK, ConstructKind.IMAGE)


class MarkdownRenderer:
    """Stateful renderer over a single document's event stream.

    Usage:
        renderer = MarkdownRenderer(TerminalSink(console), options)
        for event in tokenize(source):
            renderer.feed(event)
        renderer.finish()
    """

    def __init__(
        self,
        sink: TerminalSink,
        options: Optional[RenderOptions] = None,
        theme: MarkdownTheme = DEFAULT_THEME,
    ):
        self._options = options or RenderOptions()
        self._sink = sink
        self.state = RenderState(indent_level=self._options.center_offset)
        self.layout = BlockLayout(self.state, sink, theme, self._options)
        self.table = TableCompositor(self.state, sink, theme, self._options, self.layout)
        self.inline = InlineFormatter(
            self.state, sink, theme, self._options, self.layout, self.table,
        )

        layout, table, inline = self.layout, self.table, self.inline
        self._start_handlers: dict[ConstructKind, Callable[[Construct], None]] = {
            ConstructKind.PARAGRAPH: lambda c: layout.paragraph_start(),
            ConstructKind.HEADING: layout.heading_start,
            ConstructKind.BLOCK_QUOTE: lambda c: layout.block_quote_start(),
            ConstructKind.CODE_BLOCK: layout.code_block_start,
            ConstructKind.LIST: layout.list_start,
            ConstructKind.LIST_ITEM: lambda c: layout.list_item_start(),
            ConstructKind.FOOTNOTE_DEFINITION: layout.footnote_start,
            ConstructKind.TABLE: lambda c: table.start(c.alignments),
            ConstructKind.TABLE_HEAD: lambda c: table.head_start(),
            ConstructKind.TABLE_ROW: lambda c: table.row_start(),
            ConstructKind.TABLE_CELL: lambda c: table.cell_start(),
        }
        self._end_handlers: dict[ConstructKind, Callable[[], None]] = {
            ConstructKind.PARAGRAPH: layout.paragraph_end,
            ConstructKind.HEADING: layout.heading_end,
            ConstructKind.BLOCK_QUOTE: layout.block_quote_end,
            ConstructKind.CODE_BLOCK: layout.code_block_end,
            ConstructKind.LIST: layout.list_end,
            ConstructKind.LIST_ITEM: layout.list_item_end,
            ConstructKind.FOOTNOTE_DEFINITION: layout.footnote_end,
            ConstructKind.TABLE: table.end,
            ConstructKind.TABLE_HEAD: table.head_end,
            ConstructKind.TABLE_ROW: table.row_end,
            ConstructKind.TABLE_CELL: lambda: None,
        }
        for kind in _EMPHASIS_KINDS:
            self._start_handlers[kind] = lambda c: inline.style_start(c.kind)
            self._end_handlers[kind] = lambda k=kind: inline.style_end(k)
        for kind in _LINK_KINDS:
            self._start_handlers[kind] = inline.link_start
            self._end_handlers[kind] = lambda k=kind: inline.link_end(k)

    def render(self, events: Iterable[ev.Event]) -> None:
        """Consume a whole event stream."""
        for event in events:
            self.feed(event)
        self.finish()

    def feed(self, event: ev.Event) -> None:
        """Consume a single event."""
        if isinstance(event, ev.Start):
            handler = self._start_handlers.get(event.construct.kind)
            if handler is None:
                _log.debug("ignoring start of %s", event.construct.kind)
            else:
                handler(event.construct)
        elif isinstance(event, ev.End):
            end_handler = self._end_handlers.get(event.construct.kind)
            if end_handler is None:
                _log.debug("ignoring end of %s", event.construct.kind)
            else:
                end_handler()
        elif isinstance(event, ev.Text):
            self.inline.text(event.text)
        elif isinstance(event, ev.InlineCode):
            self.inline.inline_code(event.code)
        elif isinstance(event, (ev.SoftBreak, ev.HardBreak)):
            self.inline.line_break()
        elif isinstance(event, ev.Rule):
            self.layout.rule()
        elif isinstance(event, ev.FootnoteRef):
            self.inline.footnote_ref(event.label)
        else:
            _log.debug("ignoring unrecognized event %r", event)
        self._sink.flush()

    def finish(self) -> None:
        """Flush constructs left open by a truncated stream."""
        if self.state.in_code_block:
            self.layout.code_block_end()
        if self.table.buffer is not None:
            self.table.end()
        self._sink.end_line()
        self._sink.flush()
