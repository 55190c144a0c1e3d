"""StringIO-backed Rich consoles sharing the patternctl theme.

Rich drops colour codes by itself when the buffer is not a terminal,
so piped output and CliRunner captures are plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PATTERN_THEME = Theme(
    {
        "pat.ok": "bold green",
        "pat.error": "bold red",
        "pat.op": "bold cyan",
        "pat.key": "dim",
        "pat.id": "bold blue",
        "pat.strategy": "magenta",
    }
)


def create_console(*, width: int = 120) -> Console:
    return Console(file=StringIO(), theme=PATTERN_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
