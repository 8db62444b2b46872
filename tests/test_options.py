"""Tests for RenderOptions validation."""

import pytest

from termdown.options import RenderOptions


def test_defaults():
    options = RenderOptions()
    assert options.symbol_echo is True
    assert options.center_offset == 0
    assert options.indent == "  "
    assert options.buffered_tables


def test_streaming_mode():
    assert not RenderOptions(table_mode="streaming").buffered_tables


def test_indent_width():
    assert RenderOptions(indent_width=4).indent == "    "
    assert RenderOptions(indent_width=0).indent == ""


@pytest.mark.parametrize("field", ["center_offset", "indent_width"])
@pytest.mark.parametrize("value", [-1, "2", 1.5, True])
def test_invalid_integers(field, value):
    with pytest.raises(ValueError, match=field):
        RenderOptions(**{field: value})


def test_unknown_table_mode():
    with pytest.raises(ValueError, match="table_mode"):
        RenderOptions(table_mode="lazy")
