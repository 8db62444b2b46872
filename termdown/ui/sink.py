"""Terminal sink: styled writes to a rich Console.

Rich decides whether styling reaches the stream (TTY detection,
``NO_COLOR``, ``TERM=dumb``); when it does not, only the plain text is
written. The sink also tracks how the output currently ends so the
layout code can ask for "a fresh line" or "a blank line" without
stacking newlines.
"""

from typing import Optional, Union

from rich.console import Console
from rich.style import Style
from rich.text import Text


class TerminalSink:
    """Incremental writer over a rich Console.

    Usage:
        sink = TerminalSink(console)
        sink.write("Title", style="bold blue")
        sink.end_line()
        sink.flush()
    """

    def __init__(self, console: Console):
        self._console = console
        self._written = False
        self._trailing_newlines = 0

    @property
    def console(self) -> Console:
        return self._console

    @property
    def at_line_start(self) -> bool:
        """True before any output and right after a newline."""
        return not self._written or self._trailing_newlines > 0

    def write(self, text: str, style: Optional[Union[str, Style]] = None) -> None:
        """Write *text* in *style*; newlines are written unstyled."""
        if not text:
            return
        if "\n" in text and style:
            for i, part in enumerate(text.split("\n")):
                if i:
                    self._emit(Text("\n"))
                if part:
                    self._emit(Text(part, style=style))
            return
        self._emit(Text(text, style=style or ""))

    def write_text(self, text: Text) -> None:
        """Write an already styled rich Text."""
        if text.plain:
            self._emit(text)

    def newline(self) -> None:
        self._emit(Text("\n"))

    def end_line(self) -> None:
        """Terminate the current line unless already at a line start."""
        if not self.at_line_start:
            self.newline()

    def ensure_blank_line(self) -> None:
        """Make the output end in an empty line; no-op before any output."""
        if not self._written:
            return
        while self._trailing_newlines < 2:
            self.newline()

    def flush(self) -> None:
        self._console.file.flush()

    def _emit(self, text: Text) -> None:
        self._console.print(text, end="", soft_wrap=True)
        plain = text.plain
        stripped = plain.rstrip("\n")
        trailing = len(plain) - len(stripped)
        if stripped:
            self._trailing_newlines = trailing
        else:
            self._trailing_newlines += trailing
        self._written = True
