"""Edge-list file reader.

Parsing lives in :mod:`ugraph.domain.edgelist`; this module handles the
actual file I/O and folds every failure into :class:`GraphReadError`.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ugraph.domain.edgelist import parse_edge_list
from ugraph.domain.errors import GraphReadError
from ugraph.domain.graph import Graph

logger = logging.getLogger(__name__)


def read_graph_from_file(path: str | Path, *, default_weight: int = 1) -> Graph:
    """Read and parse an edge-list file.

    Raises:
        GraphReadError: the file is missing, unreadable, not UTF-8, or
            malformed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GraphReadError(path, "file not found") from None
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphReadError(path, str(exc)) from exc

    graph = parse_edge_list(text, default_weight=default_weight, source=path)
    logger.debug(
        "Read %s: order %d, %d nodes, %d edges",
        path,
        graph.order,
        len(graph.nodes),
        graph.get_num_edges(),
    )
    return graph
