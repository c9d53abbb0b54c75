"""Rich renderers for ServiceResult, one per operation.

Each renderer prints into a captured Console; :func:`render_result`
returns what was printed as text. Renderers are looked up by
``result.op`` and unknown ops fall back to a key-value listing.
"""

from __future__ import annotations

import json as _json
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from pipegraph.services.result import ServiceResult

THEME = Theme(
    {
        "pg.ok": "bold green",
        "pg.error": "bold red",
        "pg.warning": "bold yellow",
        "pg.op": "bold cyan",
        "pg.key": "dim",
        "pg.node": "bold blue",
        "pg.count": "magenta",
    }
)

# Timings above this many milliseconds are highlighted.
SLOW_MS = 100.0


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when stdout is not a terminal, which
    is the case inside Click's CliRunner and piped output.
    """
    console = Console(file=StringIO(), theme=THEME, highlight=False, width=120)
    with console.capture() as captured:
        if result.ok:
            renderer = _OP_RENDERERS.get(result.op, _render_generic)
            renderer(result, console, verbose=verbose, show_nodes=show_nodes)
        else:
            _render_error(result, console, verbose=verbose)
    return captured.get().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "content" in result.data:
        return str(result.data["content"]).rstrip("\n")
    if "count" in result.data:
        return str(result.data["count"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="pg.ok")
    op = Text(f"  {result.op}", style="pg.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pg.key")
    if key == "node":
        v = Text(str(value), style="pg.node")
    elif key == "count" or key.endswith("_count"):
        v = Text(str(value), style="pg.count")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _node_list(nodes: list[int]) -> str:
    return ", ".join(str(n) for n in nodes)


def _render_timing(console: Console, result: ServiceResult) -> None:
    """Print the ``-v`` timing line, if the result carries one."""
    timing = (result.meta or {}).get("timing")
    if not timing:
        return
    elapsed = timing.get("elapsed_ms", 0.0)
    style = "pg.warning" if elapsed > SLOW_MS else "dim"
    label = f" {timing.get('op', result.op)} over {timing.get('node_count', 0)} nodes"
    console.print()
    console.print(Text(f"  {elapsed:.2f}ms", style=style), Text(label, style="dim"), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pg.error")
    op = Text(f"  {result.op}", style="pg.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Graph renderers ───────────────────────────────────────────────────


def _render_reach(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> None:
    """Render a reachability result: start node, count, member list."""
    _status_line(console, result)
    d = result.data
    _field(console, "node", d.get("node"))
    _field(console, "count", d.get("count", 0))
    if show_nodes:
        _field(console, "nodes", _node_list(d.get("nodes", [])))
    if verbose:
        _render_timing(console, result)


def _render_groups(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> None:
    """Render connected components as a table, one row per group."""
    groups = result.data.get("groups", [])
    count = result.data.get("count", len(groups))
    node_count = result.data.get("node_count", 0)
    _status_line(console, result)
    console.print(f"  [bold]{count} groups[/bold] across {node_count} nodes")

    if groups:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Group", style="pg.node", justify="right", no_wrap=True)
        table.add_column("Size", style="pg.count", justify="right")
        if show_nodes:
            table.add_column("Nodes")
        for group in groups:
            row = [str(group.get("id", "")), str(group.get("size", 0))]
            if show_nodes:
                row.append(_node_list(group.get("nodes", [])))
            table.add_row(*row)
        console.print(table)

    if verbose:
        _render_timing(console, result)


def _render_check(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> None:
    """Render the consistency report; one-way links arrive as warnings."""
    d = result.data
    _status_line(console, result)
    for key in ("node_count", "edge_count"):
        _field(console, key, d.get(key, 0))
    for key in ("self_loops", "isolated"):
        values = d.get(key, [])
        _field(console, key, _node_list(values) if show_nodes else len(values))

    asymmetric = d.get("asymmetric", [])
    if asymmetric:
        console.print(f"\n[pg.warning]{len(asymmetric)} one-way links[/pg.warning]")
    else:
        console.print("\n[pg.ok]OK[/pg.ok]  All links are symmetric.")
    if verbose:
        _render_timing(console, result)


def _render_export(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> None:
    """Render export content verbatim so it can be piped to a file."""
    content = str(result.data.get("content", ""))
    console.print(content.rstrip("\n"), markup=False, soft_wrap=True)
    if verbose:
        _render_timing(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
    show_nodes: bool = True,
) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_timing(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "reach": _render_reach,
    "groups": _render_groups,
    "check": _render_check,
    "export": _render_export,
}
