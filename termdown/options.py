"""Rendering options."""

from dataclasses import dataclass

TABLE_MODES = ("buffered", "streaming")


@dataclass(frozen=True)
class RenderOptions:
    """Knobs that change what the renderer writes.

    symbol_echo: write literal markdown delimiters (``**``, backticks,
        fences, ``#`` runs) next to the color styling.
    center_offset: added to every heading's indentation level.
    indent_width: spaces per indentation level.
    table_mode: ``buffered`` prints a table once every row is known;
        ``streaming`` prints each row as soon as it closes.
    show_urls: write ``(destination)`` after link and image text.
    highlight_code: syntax highlight fenced code with a language tag.
    """

    symbol_echo: bool = True
    center_offset: int = 0
    indent_width: int = 2
    table_mode: str = "buffered"
    show_urls: bool = True
    highlight_code: bool = False

    def __post_init__(self):
        for name in ("center_offset", "indent_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.table_mode not in TABLE_MODES:
            raise ValueError(
                f"table_mode must be one of {', '.join(TABLE_MODES)}, got {self.table_mode!r}"
            )

    @property
    def indent(self) -> str:
        """One indentation unit."""
        return " " * self.indent_width

    @property
    def buffered_tables(self) -> bool:
        return self.table_mode == "buffered"
