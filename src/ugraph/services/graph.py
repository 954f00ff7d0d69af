"""GraphService — graph operations for the CLI and any other front end.

Wraps a loaded :class:`~ugraph.domain.graph.Graph` and turns each
operation into a :class:`ServiceResult`. Domain errors are caught here
and reported with their error code; nothing below raises past this layer
except :meth:`GraphService.open`, whose caller has no graph yet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ugraph.config.models import GraphConfig
from ugraph.domain.errors import GraphError
from ugraph.domain.graph import Graph
from ugraph.domain.types import ComplementMode
from ugraph.infrastructure.reader import read_graph_from_file
from ugraph.services.result import ServiceResult

logger = logging.getLogger(__name__)


def graph_payload(graph: Graph, *, sort: bool = True) -> dict[str, Any]:
    """Serialise *graph* into a JSON-friendly dict."""
    adjacency: list[dict[str, Any]] = []
    for node_id, neighbours in graph.adjacency_view(sort=sort).items():
        record = graph.nodes.get(node_id)
        adjacency.append(
            {
                "id": node_id,
                "weight": record.weight if record else None,
                "degree": record.degree if record else None,
                "neighbors": [{"id": dest, "weight": w} for dest, w in neighbours],
            }
        )
    return {
        "order": graph.order,
        "node_count": len(graph.nodes),
        "edge_count": graph.get_num_edges(),
        "adjacency": adjacency,
    }


class GraphService:
    """Handles graph queries, mutations, and derived graphs."""

    def __init__(
        self,
        graph: Graph,
        *,
        config: GraphConfig | None = None,
        source: Path | None = None,
        sort: bool = True,
    ) -> None:
        self._graph = graph
        self._config = config or GraphConfig()
        self._source = source
        self._sort = sort

    @classmethod
    def open(
        cls,
        path: str | Path,
        *,
        config: GraphConfig | None = None,
        sort: bool = True,
    ) -> GraphService:
        """Load an edge-list file and wrap it in a service.

        Raises:
            GraphReadError: the file is missing or malformed.
        """
        config = config or GraphConfig()
        graph = read_graph_from_file(path, default_weight=config.default_weight)
        return cls(graph, config=config, source=Path(path), sort=sort)

    @property
    def graph(self) -> Graph:
        return self._graph

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _meta(self) -> dict[str, Any] | None:
        if self._source is None:
            return None
        return {"source": str(self._source)}

    def _ok(
        self, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [], meta=self._meta())

    def _fail(self, op: str, exc: GraphError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult.failure(op, exc)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def show(self) -> ServiceResult:
        """Return the adjacency listing of the whole graph."""
        return self._ok("show", graph_payload(self._graph, sort=self._sort))

    def stats(self) -> ServiceResult:
        """Summarise order, counts, completeness, and invariant health.

        Invariant violations are reported as warnings.
        """
        g = self._graph
        return self._ok(
            "stats",
            {
                "order": g.order,
                "node_count": len(g.nodes),
                "edge_count": g.get_num_edges(),
                "max_edges": g.order * (g.order - 1) // 2,
                "complete": g.is_complete(),
            },
            warnings=g.validate(),
        )

    def edge_weight(self, src: int, dest: int) -> ServiceResult:
        op = "edge_weight"
        try:
            weight = self._graph.get_edge_weight(src, dest)
        except GraphError as exc:
            return self._fail(op, exc)
        return self._ok(op, {"src": src, "dest": dest, "weight": weight})

    def neighborhood(self, node_id: int, *, closed: bool = False) -> ServiceResult:
        """Return the open neighbourhood of *node_id*, or the closed one.

        The closed neighbourhood covers *node_id* and everything its
        neighbours reach, so it includes *node_id* whenever it has an edge.
        """
        if closed:
            edges = self._graph.get_closed_neighborhood(node_id)
            op = "closed_neighborhood"
        else:
            edges = self._graph.get_open_neighborhood(node_id)
            op = "open_neighborhood"
        items = [{"id": edge.dest, "weight": edge.weight} for edge in sorted(edges)]
        return self._ok(op, {"node": node_id, "count": len(items), "items": items})

    def completeness(self) -> ServiceResult:
        """Report whether the graph is complete, with both cross-checks."""
        g = self._graph
        expected_degree = g.order - 1
        mismatched = [
            {"id": node.id, "degree": node.degree}
            for node in g.nodes.values()
            if node.degree != expected_degree
        ]
        return self._ok(
            "is_complete",
            {
                "complete": g.is_complete(),
                "order": g.order,
                "edge_count": g.get_num_edges(),
                "expected_edges": g.order * (g.order - 1) // 2,
                "expected_degree": expected_degree,
                "degree_mismatches": mismatched,
            },
        )

    # ------------------------------------------------------------------
    # Mutations (applied to the in-memory graph only)
    # ------------------------------------------------------------------

    def add_edge(self, src: int, dest: int, weight: int) -> ServiceResult:
        op = "add_edge"
        replaced = self._graph.has_edge(src, dest)
        try:
            self._graph.add_edge(src, dest, weight)
        except GraphError as exc:
            return self._fail(op, exc)
        warnings = [f"Edge {src} - {dest} already existed; weight replaced"] if replaced else []
        data: dict[str, Any] = {"src": src, "dest": dest, "weight": weight}
        data.update(graph_payload(self._graph, sort=self._sort))
        return self._ok(op, data, warnings)

    def remove_edge(self, src: int, dest: int) -> ServiceResult:
        op = "remove_edge"
        try:
            self._graph.remove_edge(src, dest)
        except GraphError as exc:
            return self._fail(op, exc)
        data: dict[str, Any] = {"src": src, "dest": dest}
        data.update(graph_payload(self._graph, sort=self._sort))
        return self._ok(op, data)

    def remove_node(self, node_id: int) -> ServiceResult:
        removed = self._graph.remove_node(node_id)
        warnings = [] if removed else [f"Node {node_id} was not in the graph"]
        data: dict[str, Any] = {"id": node_id, "removed": removed}
        data.update(graph_payload(self._graph, sort=self._sort))
        return self._ok("remove_node", data, warnings)

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def complement(self, mode: ComplementMode | str | None = None) -> ServiceResult:
        """Build the complement graph.

        *mode* defaults to the configured ``graph.complement_mode``.
        """
        op = "complement"
        mode = ComplementMode(mode or self._config.complement_mode)
        try:
            result = self._graph.get_complement(mode)
        except GraphError as exc:
            return self._fail(op, exc)
        data: dict[str, Any] = {"mode": str(mode)}
        if mode is ComplementMode.ANCHOR and self._graph.nodes:
            data["anchor"] = next(iter(self._graph.nodes))
        data.update(graph_payload(result, sort=self._sort))
        return self._ok(op, data)

    def union(self, other: Graph) -> ServiceResult:
        op = "union"
        try:
            result = self._graph.get_union(other)
        except GraphError as exc:
            return self._fail(op, exc)
        return self._ok(op, graph_payload(result, sort=self._sort))

    # ------------------------------------------------------------------
    # demo: fixed walkthrough over a loaded graph
    # ------------------------------------------------------------------

    def demo(self) -> ServiceResult:
        """Run the fixed demonstration sequence.

        Shows the graph, removes edge 1-2, shows it again, reads the
        weight of edge 1-3, then lists the closed and open neighbourhoods
        of node 1. Stops at the first failing step.
        """
        op = "demo"
        steps: list[dict[str, Any]] = [{"step": "show", **self._adjacency_only()}]
        try:
            self._graph.remove_edge(1, 2)
            steps.append({"step": "remove_edge", "src": 1, "dest": 2})
            steps.append({"step": "show", **self._adjacency_only()})
            weight = self._graph.get_edge_weight(1, 3)
            steps.append({"step": "edge_weight", "src": 1, "dest": 3, "weight": weight})
        except GraphError as exc:
            failed = self._fail(op, exc)
            return failed.model_copy(update={"data": {"steps": steps}})
        for closed in (True, False):
            result = self.neighborhood(1, closed=closed)
            steps.append({"step": result.op, "node": 1, "items": result.data["items"]})
        return self._ok(op, {"steps": steps})

    def _adjacency_only(self) -> dict[str, Any]:
        return {"adjacency": graph_payload(self._graph, sort=self._sort)["adjacency"]}
