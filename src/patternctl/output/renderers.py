"""Rich renderers for ServiceResult, dispatched on ``result.op``.

Every renderer draws on a StringIO-backed console from
:func:`~patternctl.output.console.create_console`; :func:`render_result`
returns the captured text.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from patternctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from patternctl.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as plain text, or styled text on a terminal."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS.get(result.op, _render_summary)(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose and result.meta and "timing" in result.meta:
        _render_timing(console, result.meta["timing"])
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line per listed id, or a bare status line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    items = result.data.get("items") or []
    ids = [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
    return "\n".join(ids) if ids else f"OK: {result.op}"


def _fields(pairs: dict[str, Any]) -> Padding:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="pat.key")
    grid.add_column()
    for key, value in pairs.items():
        shown = json.dumps(value) if isinstance(value, (dict, list)) else str(value)
        grid.add_row(f"{key}:", Text(shown))
    return Padding.indent(grid, 2)


def _render_summary(result: ServiceResult, console: Console) -> None:
    console.print(Text.assemble(("OK", "pat.ok"), "  ", (result.op, "pat.op")))
    summary = {k: v for k, v in result.data.items() if k != "lines"}
    if summary:
        console.print(_fields(summary))
    for line in result.lines:
        console.print(Text(f"    {line}"))


def _render_payment_methods(result: ServiceResult, console: Console) -> None:
    console.print(Text.assemble(("OK", "pat.ok"), "  ", (result.op, "pat.op")))
    table = Table(pad_edge=False)
    table.add_column("Method", style="pat.id", no_wrap=True)
    table.add_column("Strategy", style="pat.strategy")
    table.add_column("Sample")
    for item in result.data.get("items", []):
        table.add_row(str(item["id"]), str(item["strategy"]), Text(str(item["sample"])))
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "pat.error"),
            "  ",
            (result.op, "pat.op"),
            ": ",
            err.message if err else "Unknown error",
        )
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        console.print(Padding.indent(_fields(err.detail), 2))


def _render_timing(console: Console, timing: dict[str, Any]) -> None:
    call, ms = timing.get("call", "?"), timing.get("ms", 0.0)
    console.print(Text(f"  timing: {call} {ms:.2f}ms", style="dim"))
    for entry in timing.get("stages", []):
        line = Text(f"    {entry['ms']:>8.2f}ms  {entry['stage']}", style="dim")
        notes = entry.get("notes")
        if notes:
            line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
        console.print(line)


_OP_RENDERERS: dict[str, Renderer] = {
    "list_payment_methods": _render_payment_methods,
}
