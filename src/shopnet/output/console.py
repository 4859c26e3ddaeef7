"""Rich console used to render results to text."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SHOPNET_THEME = Theme(
    {
        "shop.ok": "bold green",
        "shop.error": "bold red",
        "shop.op": "bold cyan",
        "shop.key": "dim",
        "shop.id": "bold blue",
    }
)


def create_console() -> Console:
    """A 120-column console writing into a StringIO buffer."""
    return Console(file=StringIO(), theme=SHOPNET_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
