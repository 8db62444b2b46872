"""Markup events consumed by the renderer.

The tokenizer flattens a markdown document into a linear stream of
``Start``/``End`` pairs around constructs and leaf events for text.
Payload (heading level, table alignments, link destination, ...) rides
on ``Start`` only; ``End`` carries the bare construct kind.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class ConstructKind(Enum):
    PARAGRAPH = auto()
    HEADING = auto()
    STRONG = auto()
    EMPHASIS = auto()
    STRIKETHROUGH = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    LIST = auto()
    LIST_ITEM = auto()
    LINK = auto()
    IMAGE = auto()
    TABLE = auto()
    TABLE_HEAD = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()
    FOOTNOTE_DEFINITION = auto()


class Alignment(Enum):
    NONE = auto()
    LEFT = auto()
    CENTER = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class Construct:
    """A structural or inline markup element."""

    kind: ConstructKind
    level: int = 0
    language: str = ""
    ordered: bool = False
    start: int = 1
    destination: str = ""
    alignments: tuple[Alignment, ...] = ()
    label: str = ""


@dataclass(frozen=True)
class Start:
    construct: Construct


@dataclass(frozen=True)
class End:
    construct: Construct


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class InlineCode:
    code: str


@dataclass(frozen=True)
class SoftBreak:
    pass


@dataclass(frozen=True)
class HardBreak:
    pass


@dataclass(frozen=True)
class Rule:
    pass


@dataclass(frozen=True)
class FootnoteRef:
    label: str


Event = Union[Start, End, Text, InlineCode, SoftBreak, HardBreak, Rule, FootnoteRef]


# ---------------------------------------------------------------------------
# Construct helpers
# ---------------------------------------------------------------------------

def bare(kind: ConstructKind) -> Construct:
    """A construct with no payload, as carried by ``End`` events."""
    return Construct(kind)


def heading(level: int) -> Construct:
    if not 1 <= level <= 6:
        raise ValueError(f"heading level must be 1-6, got {level}")
    return Construct(ConstructKind.HEADING, level=level)


def code_block(language: str = "") -> Construct:
    return Construct(ConstructKind.CODE_BLOCK, language=language)


def list_(ordered: bool = False, start: int = 1) -> Construct:
    return Construct(ConstructKind.LIST, ordered=ordered, start=start)


def link(destination: str) -> Construct:
    return Construct(ConstructKind.LINK, destination=destination)


def image(destination: str) -> Construct:
    return Construct(ConstructKind.IMAGE, destination=destination)


def table(alignments) -> Construct:
    return Construct(ConstructKind.TABLE, alignments=tuple(alignments))


def footnote_definition(label: str) -> Construct:
    return Construct(ConstructKind.FOOTNOTE_DEFINITION, label=label)


def start(kind: ConstructKind) -> Start:
    """Shorthand for a payload-free ``Start`` event."""
    return Start(Construct(kind))


def end(kind: ConstructKind) -> End:
    return End(Construct(kind))
