"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nidctl.output.console import create_console, get_output, style_for_category

if TYPE_CHECKING:
    from rich.console import Console

    from nidctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Single-value ops print just the value; ``validate`` prints the
    valid IDs, one per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "validate":
        items = result.data.get("items", [])
        return "\n".join(str(item["id"]) for item in items if item.get("valid"))

    key = _QUIET_KEYS.get(result.op)
    if key and result.data.get(key) is not None:
        return str(result.data[key])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


_QUIET_KEYS: dict[str, str] = {
    "normalize": "normalized",
    "format": "formatted",
    "age": "age",
    "birthday": "next_birthday",
}


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="nid.ok")
    op = Text(f"  {result.op}", style="nid.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="nid.key")
    if key in ("id", "normalized", "formatted"):
        v = Text(str(value), style="nid.id")
    elif key == "valid":
        v = Text(str(value), style="nid.valid" if value else "nid.invalid")
    elif key == "category":
        v = Text(str(value), style=style_for_category(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="nid.error")
    op = Text(f"  {result.op}", style="nid.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render batch validation as a table."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("NID", style="nid.id", no_wrap=True)
    if verbose:
        table.add_column("Normalized", style="dim", no_wrap=True)
    table.add_column("Valid")

    for item in items:
        valid = bool(item.get("valid"))
        row: list[Any] = [str(item.get("id", ""))]
        if verbose:
            row.append(str(item.get("normalized", "")))
        row.append(Text("yes" if valid else "no", style="nid.valid" if valid else "nid.invalid"))
        table.add_row(*row)

    console.print(table)
    console.print(
        f"\n{result.data.get('valid_count', 0)} of {result.data.get('count', len(items))} valid"
    )


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an inspection record as a panel."""
    d = result.data
    lines: list[str] = []
    for key in (
        "normalized",
        "formatted",
        "category",
        "valid",
        "check_digit",
        "expected_check_digit",
        "date_of_birth",
        "age",
        "next_birthday",
    ):
        val = d.get(key)
        if val is not None:
            lines.append(f"{key.replace('_', ' ')}: {val}")

    style = style_for_category(str(d.get("category", "")))
    console.print(
        Panel("\n".join(lines), title=str(d.get("id", "?")), border_style=style or "dim", expand=False)
    )
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "validate": _render_validate,
    "inspect": _render_inspect,
}
