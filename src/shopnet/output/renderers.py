"""Human-readable rendering of shopnet results, one renderer per command.

The reduce result and the connection dump are printed as plain text: the
integral output must stay a bare number on stdout even when Rich decides
the terminal supports color.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from shopnet.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from shopnet.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* with the renderer registered for its op."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "reduce":
        return str(result.data["result"])
    if result.op == "connections":
        return "\n".join(_connection_line(item) for item in result.data.get("items", []))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _connection_line(item: dict[str, Any]) -> str:
    return f"{item['id']} is connected with {item['neighbor']}"


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="shop.ok")
    op = Text(f"  {result.op}", style="shop.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="shop.key")
    if isinstance(value, (dict, list)):
        line.append(_json.dumps(value, separators=(",", ":")))
    else:
        line.append(str(value))
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="shop.error")
    op = Text(f"  {result.op}", style="shop.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_reduce(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """The result integer alone; verbose adds the intermediate values."""
    d = result.data
    console.out(str(d["result"]), highlight=False)
    if not verbose:
        return

    _field(console, "degree_threshold", d["degree_threshold"])
    _field(console, "core", d["core"])
    _field(console, "impact_threshold", d["impact_threshold"])
    _field(console, "winners", d["winners"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Shop", style="shop.id", justify="right")
    table.add_column("Impact", justify="right")
    table.add_column("Winner")
    winners = set(d["winners"])
    for entry in d["impacts"]:
        table.add_row(
            str(entry["id"]),
            str(entry["impact"]),
            "yes" if entry["id"] in winners else "",
        )
    console.print()
    console.print(table)
    _render_meta(console, result)


def _render_connections(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """One ``X is connected with Y`` line per directed link, then the size."""
    for item in result.data.get("items", []):
        console.print(Text(_connection_line(item)))
    console.print(Text(f"network size: {result.data['network_size']}"))
    if verbose:
        _render_meta(console, result)


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("nodes", "roads", "directed_links", "self_loops", "components", "max_degree"):
        if key in d:
            _field(console, key, d[key])

    histogram = d.get("degree_histogram") or []
    if histogram:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Degree", justify="right")
        table.add_column("Shops", justify="right")
        for degree, count in enumerate(histogram):
            if count:
                table.add_row(str(degree), str(count))
        console.print()
        console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "reduce": _render_reduce,
    "connections": _render_connections,
    "stats": _render_stats,
}
