"""Tests for termdown.tokenizer."""

from termdown import events as ev
from termdown.events import Alignment, ConstructKind
from termdown.tokenizer import tokenize


def _kinds(events):
    return [
        (type(e).__name__, e.construct.kind) if isinstance(e, (ev.Start, ev.End)) else type(e).__name__
        for e in events
    ]


def test_heading():
    events = list(tokenize("# Hi"))
    assert events == [
        ev.Start(ev.heading(1)),
        ev.Text("Hi"),
        ev.end(ConstructKind.HEADING),
    ]


def test_heading_level_six():
    events = list(tokenize("###### Deep"))
    assert events[0] == ev.Start(ev.heading(6))


def test_paragraph_with_strong():
    events = list(tokenize("a **b** c"))
    assert events == [
        ev.start(ConstructKind.PARAGRAPH),
        ev.Text("a "),
        ev.start(ConstructKind.STRONG),
        ev.Text("b"),
        ev.end(ConstructKind.STRONG),
        ev.Text(" c"),
        ev.end(ConstructKind.PARAGRAPH),
    ]


def test_emphasis_and_strikethrough():
    kinds = _kinds(tokenize("*i* ~~s~~"))
    assert ("Start", ConstructKind.EMPHASIS) in kinds
    assert ("End", ConstructKind.EMPHASIS) in kinds
    assert ("Start", ConstructKind.STRIKETHROUGH) in kinds
    assert ("End", ConstructKind.STRIKETHROUGH) in kinds


def test_soft_and_hard_breaks():
    events = list(tokenize("a\nb  \nc"))
    assert ev.SoftBreak() in events
    assert ev.HardBreak() in events


def test_inline_code():
    events = list(tokenize("use `x` now"))
    assert ev.InlineCode("x") in events


def test_fenced_code_language():
    events = list(tokenize("```python extra\nprint(1)\n```"))
    assert events == [
        ev.Start(ev.code_block("python")),
        ev.Text("print(1)\n"),
        ev.end(ConstructKind.CODE_BLOCK),
    ]


def test_indented_code_block_has_no_language():
    events = list(tokenize("    x = 1\n"))
    assert events[0] == ev.Start(ev.code_block(""))
    assert events[1] == ev.Text("x = 1\n")


def test_tight_list_has_no_paragraphs():
    kinds = _kinds(tokenize("- one\n- two"))
    assert ("Start", ConstructKind.PARAGRAPH) not in kinds
    assert kinds.count(("Start", ConstructKind.LIST_ITEM)) == 2
    assert kinds[0] == ("Start", ConstructKind.LIST)
    assert kinds[-1] == ("End", ConstructKind.LIST)


def test_ordered_list_start():
    events = list(tokenize("3. a\n4. b"))
    assert events[0] == ev.Start(ev.list_(ordered=True, start=3))


def test_bullet_list_unordered():
    events = list(tokenize("- a"))
    assert events[0] == ev.Start(ev.list_(ordered=False))


def test_block_quote():
    kinds = _kinds(tokenize("> quoted"))
    assert kinds[0] == ("Start", ConstructKind.BLOCK_QUOTE)
    assert kinds[-1] == ("End", ConstructKind.BLOCK_QUOTE)


def test_rule():
    assert ev.Rule() in list(tokenize("a\n\n---\n\nb"))


def test_link_destination():
    events = list(tokenize("[docs](https://example.com)"))
    assert ev.Start(ev.link("https://example.com")) in events
    assert ev.end(ConstructKind.LINK) in events


def test_image_alt_text():
    events = list(tokenize("![alt text](img.png)"))
    i = events.index(ev.Start(ev.image("img.png")))
    assert events[i + 1] == ev.Text("alt text")
    assert events[i + 2] == ev.end(ConstructKind.IMAGE)


def test_table_alignments():
    source = "| Name | Age | Note |\n|:-----|----:|:---:|\n| Ann | 30 | x |"
    events = list(tokenize(source))
    assert events[0] == ev.Start(ev.table([Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER]))
    assert events[-1] == ev.end(ConstructKind.TABLE)


def test_table_unaligned_columns():
    events = list(tokenize("| a | b |\n|---|---|\n| 1 | 2 |"))
    assert events[0].construct.alignments == (Alignment.NONE, Alignment.NONE)


def test_table_structure():
    kinds = _kinds(tokenize("| a |\n|---|\n| 1 |"))
    assert kinds.count(("Start", ConstructKind.TABLE_HEAD)) == 1
    assert kinds.count(("Start", ConstructKind.TABLE_ROW)) == 2
    assert kinds.count(("Start", ConstructKind.TABLE_CELL)) == 2


def test_footnote_reference_and_definition():
    events = list(tokenize("Text[^note].\n\n[^note]: The note."))
    assert ev.FootnoteRef("note") in events
    assert ev.Start(ev.footnote_definition("note")) in events
    assert ev.end(ConstructKind.FOOTNOTE_DEFINITION) in events


def test_html_is_ignored():
    events = list(tokenize("<div>hi</div>"))
    assert events == []


def test_tokenize_is_lazy():
    stream = tokenize("# a")
    assert next(stream) == ev.Start(ev.heading(1))
