"""termdown theme system: markdown palette and the shared console."""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style


@dataclass(frozen=True)
class MarkdownPalette:
    """Rich style strings for every construct the renderer colors."""

    heading: str = "bold blue"
    strong: str = "bold yellow"
    emphasis: str = "italic green"
    strikethrough: str = "strike red"
    block_quote: str = "magenta"
    code: str = "cyan"

    # Gray tones
    fence: str = "grey50"
    rule: str = "grey50"
    table_border: str = "grey35"

    table_header: str = "bold blue"
    link: str = "underline blue"
    url: str = "dim"
    list_marker: str = "grey50"
    footnote: str = "grey50"


@dataclass(frozen=True)
class MarkdownTheme:
    """Palette plus the code highlighting theme."""

    palette: MarkdownPalette
    code_theme: str = "monokai"

    def style(self, name: str) -> Style:
        """Parse the palette entry *name* into a rich Style."""
        return Style.parse(getattr(self.palette, name))

    def with_overrides(self, overrides: Mapping[str, Any]) -> "MarkdownTheme":
        """Return a copy with palette entries replaced.

        Raises ValueError for unknown entries or unparsable styles.
        """
        known = {f.name for f in fields(MarkdownPalette)}
        changes = {}
        for key, value in overrides.items():
            if key not in known:
                raise ValueError(f"unknown palette entry '{key}'")
            try:
                Style.parse(str(value))
            except StyleSyntaxError as e:
                raise ValueError(f"invalid style for '{key}': {e}") from e
            changes[key] = str(value)
        return replace(self, palette=replace(self.palette, **changes))


DEFAULT_THEME = MarkdownTheme(palette=MarkdownPalette())

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False)
