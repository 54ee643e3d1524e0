"""Rich Console factory and theme for nidctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

NID_THEME = Theme(
    {
        "nid.ok": "bold green",
        "nid.error": "bold red",
        "nid.op": "bold cyan",
        "nid.key": "dim",
        "nid.id": "bold blue",
        "nid.valid": "green",
        "nid.invalid": "red",
        "nid.category.individual": "green",
        "nid.category.company": "blue",
        "nid.category.unknown": "yellow",
    }
)

_CATEGORY_STYLES: dict[str, str] = {
    "individual": "nid.category.individual",
    "company": "nid.category.company",
    "unknown": "nid.category.unknown",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=NID_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_category(category: str) -> str:
    """Return the Rich style name for a NID category."""
    return _CATEGORY_STYLES.get(category, "")
