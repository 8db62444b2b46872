"""Markdown tokenizer: markdown-it-py tokens flattened into render events.

markdown-it-py uses an open/close tag model (``heading_open`` /
``heading_close``) with inline content nested in ``token.children`` of
``inline`` tokens. This module walks both levels and yields the flat
Start/End/leaf event stream the renderer consumes.
"""

import logging
from typing import Iterator, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin

from . import events as ev
from .events import Alignment, ConstructKind

_log = logging.getLogger(__name__)

# CommonMark plus GFM tables, strikethrough and footnotes.
_md_parser = (
    MarkdownIt("commonmark")
    .enable("table")
    .enable("strikethrough")
    .use(footnote_plugin)
)

_PAIRED_BLOCKS = {
    "blockquote": ConstructKind.BLOCK_QUOTE,
    "list_item": ConstructKind.LIST_ITEM,
    "thead": ConstructKind.TABLE_HEAD,
    "tr": ConstructKind.TABLE_ROW,
    "th": ConstructKind.TABLE_CELL,
    "td": ConstructKind.TABLE_CELL,
}

_PAIRED_INLINE = {
    "strong": ConstructKind.STRONG,
    "em": ConstructKind.EMPHASIS,
    "s": ConstructKind.STRIKETHROUGH,
}

# Tokens that carry no content for a terminal.
_SILENT = {"tbody_open", "tbody_close", "footnote_block_open", "footnote_block_close", "footnote_anchor"}

_ALIGNMENTS = {
    "left": Alignment.LEFT,
    "center": Alignment.CENTER,
    "right": Alignment.RIGHT,
}


def tokenize(source: str) -> Iterator[ev.Event]:
    """Parse *source* and lazily yield render events in document order."""
    tokens = _md_parser.parse(source)
    yield from _walk_blocks(tokens)


def _walk_blocks(tokens: Sequence[Token]) -> Iterator[ev.Event]:
    for i, tok in enumerate(tokens):
        t = tok.type

        if t == "inline":
            yield from _walk_inline(tok.children or [])
            continue

        # Tight list items wrap their text in hidden paragraphs
        if t in ("paragraph_open", "paragraph_close"):
            if not tok.hidden:
                yield _boundary(tok, ev.bare(ConstructKind.PARAGRAPH))
            continue

        if t == "heading_open":
            yield ev.Start(ev.heading(_heading_level(tok)))
            continue
        if t == "heading_close":
            yield ev.end(ConstructKind.HEADING)
            continue

        if t in ("fence", "code_block"):
            language = tok.info.split()[0] if t == "fence" and tok.info.strip() else ""
            yield ev.Start(ev.code_block(language))
            if tok.content:
                yield ev.Text(tok.content)
            yield ev.end(ConstructKind.CODE_BLOCK)
            continue

        if t == "bullet_list_open":
            yield ev.Start(ev.list_(ordered=False))
            continue
        if t == "ordered_list_open":
            yield ev.Start(ev.list_(ordered=True, start=_list_start(tok)))
            continue
        if t in ("bullet_list_close", "ordered_list_close"):
            yield ev.end(ConstructKind.LIST)
            continue

        if t == "hr":
            yield ev.Rule()
            continue

        if t == "table_open":
            yield ev.Start(ev.table(_scan_alignments(tokens, i)))
            continue
        if t == "table_close":
            yield ev.end(ConstructKind.TABLE)
            continue

        if t == "footnote_open":
            yield ev.Start(ev.footnote_definition(_footnote_label(tok)))
            continue
        if t == "footnote_close":
            yield ev.end(ConstructKind.FOOTNOTE_DEFINITION)
            continue

        name, _, suffix = t.rpartition("_")
        if name in _PAIRED_BLOCKS and suffix in ("open", "close"):
            yield _boundary(tok, ev.bare(_PAIRED_BLOCKS[name]))
            continue

        if t not in _SILENT:
            _log.debug("ignoring block token %s", t)


def _walk_inline(children: Sequence[Token]) -> Iterator[ev.Event]:
    for tok in children:
        t = tok.type

        if t == "text":
            if tok.content:
                yield ev.Text(tok.content)
        elif t == "softbreak":
            yield ev.SoftBreak()
        elif t == "hardbreak":
            yield ev.HardBreak()
        elif t == "code_inline":
            yield ev.InlineCode(tok.content)
        elif t == "link_open":
            yield ev.Start(ev.link(str(tok.attrGet("href") or "")))
        elif t == "link_close":
            yield ev.end(ConstructKind.LINK)
        elif t == "image":
            yield ev.Start(ev.image(str(tok.attrGet("src") or "")))
            yield from _walk_inline(tok.children or [])
            yield ev.end(ConstructKind.IMAGE)
        elif t == "footnote_ref":
            yield ev.FootnoteRef(_footnote_label(tok))
        else:
            name, _, suffix = t.rpartition("_")
            if name in _PAIRED_INLINE and suffix in ("open", "close"):
                yield _boundary(tok, ev.bare(_PAIRED_INLINE[name]))
            else:
                _log.debug("ignoring inline token %s", t)


def _boundary(tok: Token, construct: ev.Construct) -> ev.Event:
    if tok.nesting > 0:
        return ev.Start(construct)
    return ev.End(construct)


def _heading_level(tok: Token) -> int:
    if tok.tag and tok.tag[0] == "h" and tok.tag[1:].isdigit():
        return min(max(int(tok.tag[1:]), 1), 6)
    return 1


def _list_start(tok: Token) -> int:
    value = tok.attrGet("start")
    if value is None:
        return 1
    try:
        return int(value)
    except (TypeError, ValueError):
        return 1


def _cell_alignment(tok: Token) -> Alignment:
    style = str(tok.attrGet("style") or "")
    _, _, value = style.partition("text-align:")
    return _ALIGNMENTS.get(value.strip().rstrip(";"), Alignment.NONE)


def _scan_alignments(tokens: Sequence[Token], table_index: int) -> list[Alignment]:
    """Collect column alignments from the header row following ``table_open``."""
    alignments: list[Alignment] = []
    for tok in tokens[table_index + 1:]:
        if tok.type == "th_open":
            alignments.append(_cell_alignment(tok))
        elif tok.type in ("tr_close", "table_close"):
            break
    return alignments


def _footnote_label(tok: Token) -> str:
    meta: Optional[dict] = tok.meta
    if not meta:
        return ""
    label = meta.get("label")
    if label:
        return str(label)
    return str(meta.get("id", 0) + 1)
