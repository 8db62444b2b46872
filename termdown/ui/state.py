"""Render state shared by the inline, block and table components.

Block and table contexts are enums held on stacks rather than loose
booleans, so combinations such as "in a code block and in a table"
cannot be represented.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from rich.style import Style

from ..events import ConstructKind


class BlockContext(Enum):
    NONE = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    LIST_ITEM = auto()
    FOOTNOTE = auto()


class TableContext(Enum):
    IDLE = auto()
    HEADER = auto()
    BODY = auto()


@dataclass
class BlockFrame:
    """An open block container.

    ``width`` is the number of columns its continuation lines are
    shifted by (two for ``> ``, the marker width for a list item).
    """

    context: BlockContext
    width: int = 0


@dataclass
class ListFrame:
    ordered: bool
    next_number: int = 1


@dataclass
class StyleFrame:
    kind: Optional[ConstructKind]
    style: Style


@dataclass
class RenderState:
    """Mutable state for one document render."""

    indent_level: int = 0
    styles: list[StyleFrame] = field(default_factory=list)
    blocks: list[BlockFrame] = field(default_factory=list)
    lists: list[ListFrame] = field(default_factory=list)
    table_context: TableContext = TableContext.IDLE
    after_marker: bool = False
    code_language: str = ""
    code_buffer: list[str] = field(default_factory=list)

    @property
    def block_context(self) -> BlockContext:
        if not self.blocks:
            return BlockContext.NONE
        return self.blocks[-1].context

    @property
    def in_code_block(self) -> bool:
        return self.block_context is BlockContext.CODE_BLOCK

    @property
    def in_block_quote(self) -> bool:
        return any(b.context is BlockContext.BLOCK_QUOTE for b in self.blocks)

    @property
    def in_list_item(self) -> bool:
        return any(b.context is BlockContext.LIST_ITEM for b in self.blocks)

    @property
    def in_table(self) -> bool:
        return self.table_context is not TableContext.IDLE

    # -- style stack --------------------------------------------------------

    def push_style(self, kind: Optional[ConstructKind], style: Style) -> None:
        self.styles.append(StyleFrame(kind, style))

    def pop_style(self, kind: ConstructKind) -> bool:
        """Pop the innermost frame opened by *kind*; False if none is open."""
        if self.styles and self.styles[-1].kind is kind:
            self.styles.pop()
            return True
        return False

    def current_style(self) -> Style:
        """Combined style of every open frame, innermost winning."""
        if not self.styles:
            return Style.null()
        return Style.combine(frame.style for frame in self.styles)

    # -- block stack --------------------------------------------------------

    def push_block(self, context: BlockContext, width: int = 0) -> None:
        self.blocks.append(BlockFrame(context, width))

    def pop_block(self, context: BlockContext) -> bool:
        if self.blocks and self.blocks[-1].context is context:
            self.blocks.pop()
            return True
        return False

    def continuation_width(self) -> int:
        """Columns occupied by open block markers on continuation lines."""
        return sum(b.width for b in self.blocks)
