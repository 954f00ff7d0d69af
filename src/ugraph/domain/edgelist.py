"""Edge-list text format — pure parsing, no file I/O.

Format::

    # comment lines and blank lines are skipped
    4               <- order (first meaningful line)
    e 1 2 5         <- weighted edge
    e 2 3           <- unweighted edge (default weight)

Any other line after the order line is ignored. Node records for ids
``1..order`` are created up front, and an edge endpoint outside that
range is a read error.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ugraph.domain.errors import GraphError, GraphReadError
from ugraph.domain.graph import Graph

logger = logging.getLogger(__name__)

EDGE_PREFIX = "e"
_COMMENT_PREFIXES = ("#", "c ")


def _is_skippable(line: str) -> bool:
    return not line or line == "c" or line.startswith(_COMMENT_PREFIXES)


def _parse_int(token: str, what: str, source: Path, lineno: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphReadError(source, f"invalid {what} {token!r}", line=lineno) from None


def parse_edge_list(
    text: str,
    *,
    default_weight: int = 1,
    source: Path | None = None,
) -> Graph:
    """Build a :class:`Graph` from edge-list *text*.

    Args:
        text: File contents.
        default_weight: Weight for two-token ``e <src> <dest>`` lines.
        source: Path reported in errors.

    Raises:
        GraphReadError: malformed order or edge line, or an edge the
            graph rejects (bad weight, self-loop, node beyond the order).
    """
    origin = source or Path("<string>")
    graph: Graph | None = None

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if _is_skippable(line):
            continue
        parts = line.split()

        if graph is None:
            if parts[0] == EDGE_PREFIX:
                raise GraphReadError(origin, "edge line before order line", line=lineno)
            order = _parse_int(parts[0], "order", origin, lineno)
            if order < 0:
                raise GraphReadError(origin, f"order must be >= 0, got {order}", line=lineno)
            graph = Graph(order)
            for node_id in range(1, order + 1):
                graph.add_node(node_id)
            continue

        if parts[0] != EDGE_PREFIX:
            logger.debug("Ignoring line %d: %r", lineno, line)
            continue
        if len(parts) not in (3, 4):
            msg = f"expected 'e <src> <dest> [weight]', got {line!r}"
            raise GraphReadError(origin, msg, line=lineno)

        src = _parse_int(parts[1], "source node", origin, lineno)
        dest = _parse_int(parts[2], "destination node", origin, lineno)
        weight = default_weight
        if len(parts) == 4:
            weight = _parse_int(parts[3], "weight", origin, lineno)
        for node_id in (src, dest):
            if not 1 <= node_id <= graph.order:
                msg = f"node {node_id} outside 1..{graph.order}"
                raise GraphReadError(origin, msg, line=lineno)
        try:
            graph.add_edge(src, dest, weight)
        except (GraphError, ValueError) as exc:
            raise GraphReadError(origin, str(exc), line=lineno) from exc

    if graph is None:
        raise GraphReadError(origin, "missing order line")
    return graph
