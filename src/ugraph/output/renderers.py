"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ugraph.output.console import create_console, get_output, style_for_bool

if TYPE_CHECKING:
    from rich.console import Console

    from ugraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

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

    d = result.data
    if "items" in d:
        return "\n".join(str(item["id"]) for item in d["items"])
    if "adjacency" in d:
        return "\n".join(
            " ".join(str(n) for n in [row["id"], *(nb["id"] for nb in row["neighbors"])])
            for row in d["adjacency"]
        )
    for key in ("weight", "complete"):
        if key in d:
            return str(d[key]).lower() if isinstance(d[key], bool) else str(d[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ug.ok")
    op = Text(f"  {result.op}", style="ug.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ug.key")
    if isinstance(value, bool):
        v = Text(str(value).lower(), style=style_for_bool(value))
    elif key in ("src", "dest", "node", "id", "anchor"):
        v = Text(str(value), style="ug.node")
    elif key == "weight":
        v = Text(str(value), style="ug.weight")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _format_weight(weight: Any) -> str:
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return "-" if weight is None else str(weight)


def _adjacency_table(rows: list[dict[str, Any]], *, verbose: bool = False) -> Table:
    """Build a Rich Table listing each node and its neighbours."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Node", style="ug.node", justify="right", no_wrap=True)
    if verbose:
        table.add_column("Weight", style="ug.weight", justify="right")
        table.add_column("Degree", justify="right")
    table.add_column("Neighbors")

    for row in rows:
        neighbours = " -> ".join(f"{nb['id']} ({nb['weight']})" for nb in row["neighbors"])
        cells: list[str] = [str(row["id"])]
        if verbose:
            cells.append(_format_weight(row.get("weight")))
            cells.append("-" if row.get("degree") is None else str(row["degree"]))
        cells.append(f"head -> {neighbours}" if neighbours else "head")
        table.add_row(*cells)
    return table


def _neighbor_table(items: list[dict[str, Any]], *, header: str = "Neighbor") -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column(header, style="ug.node", justify="right")
    table.add_column("Weight", style="ug.weight", justify="right")
    for item in items:
        table.add_row(str(item["id"]), str(item["weight"]))
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ug.error")
    op = Text(f"  {result.op}", style="ug.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Graph renderers ───────────────────────────────────────────────────


def _render_graph(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render any result carrying a full adjacency listing."""
    _status_line(console, result)
    d = result.data
    for key in ("mode", "anchor", "src", "dest", "weight", "id", "removed"):
        if key in d:
            _field(console, key, d[key])
    _field(console, "order", d.get("order", 0))
    _field(console, "edges", d.get("edge_count", 0))
    rows = d.get("adjacency", [])
    if rows:
        console.print()
        console.print(_adjacency_table(rows, verbose=verbose))
    if verbose:
        _render_meta(console, result)


def _render_fields(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render flat scalar results (edge weight, stats)."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_neighborhood(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "node", d["node"])
    _field(console, "count", d["count"])
    items = d.get("items", [])
    if items:
        console.print()
        header = "Node" if result.op == "closed_neighborhood" else "Neighbor"
        console.print(_neighbor_table(items, header=header))
    if verbose:
        _render_meta(console, result)


def _render_completeness(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "complete", d["complete"])
    _field(console, "edges", f"{d['edge_count']} / {d['expected_edges']}")
    mismatches = d.get("degree_mismatches", [])
    _field(console, "degree_mismatches", len(mismatches))
    if verbose and mismatches:
        for m in mismatches:
            expected = d["expected_degree"]
            console.print(f"    node {m['id']}: degree {m['degree']} (expected {expected})")


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render each step of the demo sequence in turn."""
    _status_line(console, result)
    for step in result.data.get("steps", []):
        console.print()
        name = step["step"]
        if name == "show":
            console.print(Text("graph", style="ug.op"))
            console.print(_adjacency_table(step["adjacency"], verbose=verbose))
        elif name == "remove_edge":
            console.print(Text(f"removed edge {step['src']} - {step['dest']}", style="ug.op"))
        elif name == "edge_weight":
            console.print(
                Text.assemble(
                    Text(f"weight of edge {step['src']} - {step['dest']}: ", style="ug.op"),
                    Text(str(step["weight"]), style="ug.weight"),
                )
            )
        else:
            label = name.replace("_", " ")
            console.print(Text(f"{label} of node {step['node']}", style="ug.op"))
            header = "Node" if name == "closed_neighborhood" else "Neighbor"
            console.print(_neighbor_table(step["items"], header=header))


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Whole-graph listings
    "show": _render_graph,
    "add_edge": _render_graph,
    "remove_edge": _render_graph,
    "remove_node": _render_graph,
    "complement": _render_graph,
    "union": _render_graph,
    # Queries
    "edge_weight": _render_fields,
    "stats": _render_fields,
    "open_neighborhood": _render_neighborhood,
    "closed_neighborhood": _render_neighborhood,
    "is_complete": _render_completeness,
    # Walkthrough
    "demo": _render_demo,
}
