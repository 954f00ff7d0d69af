"""Graph — undirected weighted graph with node records and adjacency sets.

The graph owns two maps:

- ``nodes``: node id -> :class:`Node` (capped at ``order`` records)
- ``adjacency``: node id -> ``{neighbour id: Edge}``

INVARIANT: adjacency is symmetric. ``b in adjacency[a]`` with weight *w*
iff ``a in adjacency[b]`` with weight *w*.
INVARIANT: a node's degree equals the size of its edge set. Degrees only
change inside :meth:`Graph._link` and :meth:`Graph._unlink`.

Node ids ``1..order`` are 1-based when the graph builds nodes itself
(union, complement).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ugraph.domain.edge import Edge
from ugraph.domain.errors import (
    EdgeNotFoundError,
    GraphCompleteError,
    InvalidWeightError,
    NodeNotFoundError,
    SelfLoopError,
)
from ugraph.domain.node import Node
from ugraph.domain.types import ComplementMode

logger = logging.getLogger(__name__)

COMPLEMENT_WEIGHT = 1


def check_weight(weight: object) -> int:
    """Return *weight* if it is a positive int, else raise InvalidWeightError."""
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 1:
        raise InvalidWeightError(weight)
    return weight


class Graph:
    """In-memory undirected weighted graph.

    Args:
        order: Declared node count. Caps how many node records
            :meth:`add_node` will create; it does not restrict which ids.
    """

    def __init__(self, order: int = 0) -> None:
        self.order = order
        self._nodes: dict[int, Node] = {}
        self._adjacency: dict[int, dict[int, Edge]] = {}

    def __repr__(self) -> str:
        return (
            f"Graph(order={self.order}, nodes={len(self._nodes)}, edges={self.get_num_edges()})"
        )

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> Mapping[int, Node]:
        """Node records keyed by id, in insertion order."""
        return MappingProxyType(self._nodes)

    def node(self, node_id: int) -> Node:
        """Return the node record for *node_id*."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def has_edge(self, src: int, dest: int) -> bool:
        """Whether *src* holds a descriptor for *dest*. Never materialises sets."""
        return dest in self._adjacency.get(src, {})

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield each undirected edge once as ``(low id, high id, weight)``."""
        for src, edge_set in self._adjacency.items():
            for dest, edge in edge_set.items():
                if src < dest:
                    yield src, dest, edge.weight

    # ------------------------------------------------------------------
    # Degree bookkeeping (single update path)
    # ------------------------------------------------------------------

    def _link(self, src: int, dest: int, weight: int) -> None:
        src_edges = self._adjacency.setdefault(src, {})
        dest_edges = self._adjacency.setdefault(dest, {})
        is_new = dest not in src_edges
        src_edges[dest] = Edge(dest, weight)
        dest_edges[src] = Edge(src, weight)
        if is_new:
            self._nodes[src].increment_degree()
            self._nodes[dest].increment_degree()

    def _unlink(self, src: int, dest: int) -> None:
        del self._adjacency[src][dest]
        del self._adjacency[dest][src]
        for node_id in (src, dest):
            record = self._nodes.get(node_id)
            if record is not None:
                record.decrement_degree()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        """Connect *src* and *dest* with *weight*.

        Re-adding an existing edge overwrites its weight on both sides
        and leaves degrees unchanged.

        Raises:
            InvalidWeightError: *weight* is not an int >= 1.
            SelfLoopError: *src* equals *dest*.
            NodeNotFoundError: an endpoint has no node record.
        """
        check_weight(weight)
        if src == dest:
            raise SelfLoopError(src)
        for node_id in (src, dest):
            if node_id not in self._nodes:
                raise NodeNotFoundError(node_id)
        self._link(src, dest, weight)
        logger.debug("Added edge %d - %d (weight %d)", src, dest, weight)

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove the edge between *src* and *dest*.

        Both descriptors are verified before either is removed, so a
        failed call leaves the graph untouched.

        Raises:
            EdgeNotFoundError: either side lacks the descriptor.
        """
        src_edges = self._adjacency.setdefault(src, {})
        dest_edges = self._adjacency.setdefault(dest, {})
        if dest not in src_edges or src not in dest_edges:
            raise EdgeNotFoundError(src, dest)
        self._unlink(src, dest)
        logger.debug("Removed edge %d - %d", src, dest)

    def add_node(self, node_id: int) -> bool:
        """Create a node record with a derived weight.

        No-op once ``order`` records exist, whatever *node_id* is, and
        for ids already present. Returns True if a record was created.
        """
        if len(self._nodes) >= self.order:
            logger.debug("Node %d ignored: graph already holds %d nodes", node_id, self.order)
            return False
        if node_id in self._nodes:
            return False
        self._nodes[node_id] = Node.create(node_id)
        return True

    def remove_node(self, node_id: int) -> bool:
        """Remove *node_id*, its edge set, and every descriptor pointing at it.

        Records that never had edges are removed too. Returns False if
        the id was unknown to both maps.
        """
        own_edges = self._adjacency.pop(node_id, None)
        for owner, edge_set in self._adjacency.items():
            if edge_set.pop(node_id, None) is not None and owner in self._nodes:
                self._nodes[owner].decrement_degree()
        record = self._nodes.pop(node_id, None)
        removed = own_edges is not None or record is not None
        if removed:
            logger.debug("Removed node %d", node_id)
        return removed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_edge_weight(self, src: int, dest: int) -> int:
        """Return the weight of the edge *src* - *dest*.

        Materialises an empty edge set for *src* if it had none.
        """
        edge = self._adjacency.setdefault(src, {}).get(dest)
        if edge is None:
            raise EdgeNotFoundError(src, dest)
        return edge.weight

    def get_num_edges(self) -> int:
        return sum(len(edge_set) for edge_set in self._adjacency.values()) // 2

    def is_complete(self) -> bool:
        """Whether the graph has every possible edge for its order.

        Checks the edge count against ``order * (order - 1) / 2`` and,
        independently, that every node record has degree ``order - 1``.
        """
        expected = self.order * (self.order - 1) // 2
        if self.get_num_edges() != expected:
            return False
        return all(node.degree == self.order - 1 for node in self._nodes.values())

    def get_open_neighborhood(self, node_id: int) -> set[Edge]:
        """Return the descriptors held by *node_id* (one per neighbour).

        Materialises an empty edge set if the node had none.
        """
        return set(self._adjacency.setdefault(node_id, {}).values())

    def get_closed_neighborhood(self, node_id: int) -> set[Edge]:
        """Return every descriptor held by the neighbours of *node_id*.

        Each edge set that contains *node_id* contributes all of its
        descriptors, collected into one set keyed by destination. The
        result is *node_id* itself plus the nodes two hops away. When
        several neighbours point at the same destination, the first
        neighbour in insertion order supplies the weight.
        """
        closed: set[Edge] = set()
        for edge_set in self._adjacency.values():
            if node_id in edge_set:
                closed.update(edge_set.values())
        return closed

    def adjacency_view(self, *, sort: bool = True) -> dict[int, list[tuple[int, int]]]:
        """Return ``{node: [(neighbour, weight), ...]}`` for presentation.

        Covers every id known to either map, including isolated nodes.
        """
        ids = list(dict.fromkeys([*self._adjacency, *self._nodes]))
        if sort:
            ids.sort()
        view: dict[int, list[tuple[int, int]]] = {}
        for node_id in ids:
            edge_set = self._adjacency.get(node_id, {})
            pairs = [(edge.dest, edge.weight) for edge in edge_set.values()]
            view[node_id] = sorted(pairs) if sort else pairs
        return view

    def validate(self) -> list[str]:
        """Return a description of every broken invariant (empty if consistent)."""
        problems: list[str] = []
        if len(self._nodes) > self.order:
            problems.append(f"{len(self._nodes)} node records exceed order {self.order}")
        for src, edge_set in self._adjacency.items():
            for dest, edge in edge_set.items():
                mirror = self._adjacency.get(dest, {}).get(src)
                if mirror is None:
                    problems.append(f"edge {src} -> {dest} has no mirror")
                elif mirror.weight != edge.weight:
                    problems.append(
                        f"edge {src} - {dest} weights differ ({edge.weight} != {mirror.weight})"
                    )
                if dest not in self._nodes:
                    problems.append(f"edge {src} -> {dest} points at a missing node")
            if edge_set and src not in self._nodes:
                problems.append(f"node {src} has edges but no record")
        for node_id, node in self._nodes.items():
            actual = len(self._adjacency.get(node_id, {}))
            if node.degree != actual:
                problems.append(f"node {node_id} degree {node.degree} != {actual} edges")
        return problems

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def _ensure_node(self, node_id: int) -> None:
        if node_id not in self._nodes:
            self.add_node(node_id)

    def get_union(self, other: Graph) -> Graph:
        """Return a graph holding the edges of both graphs.

        The result's order is the larger of the two, with node records
        for ids ``1..order``. Edges of *other* are added last, so its
        weights win on conflicts.
        """
        result = Graph(max(self.order, other.order))
        for node_id in range(1, result.order + 1):
            result.add_node(node_id)
        for source in (self, other):
            for src, dest, weight in source.edges():
                result._ensure_node(src)
                result._ensure_node(dest)
                result.add_edge(src, dest, weight)
        logger.debug(
            "Union of order %d built with %d edges", result.order, result.get_num_edges()
        )
        return result

    def get_complement(self, mode: ComplementMode | str = ComplementMode.ANCHOR) -> Graph:
        """Return a graph with weight-1 edges where this graph has none.

        ``anchor`` mode only considers pairs involving the first node
        record (insertion order). ``full`` mode considers every pair of
        ids ``1..order``. Node records are cloned with degree 0.

        Raises:
            GraphCompleteError: the graph is already complete.
        """
        if self.is_complete():
            raise GraphCompleteError(self.order)
        mode = ComplementMode(mode)
        result = Graph(self.order)
        for node_id, node in self._nodes.items():
            result._nodes[node_id] = node.copy(reset_degree=True)

        ids = range(1, self.order + 1)
        if mode is ComplementMode.ANCHOR:
            if not self._nodes:
                return result
            anchor = next(iter(self._nodes))
            for other in ids:
                if other == anchor or self.has_edge(anchor, other):
                    continue
                result._ensure_node(other)
                result.add_edge(anchor, other, COMPLEMENT_WEIGHT)
        else:
            for low in ids:
                for high in range(low + 1, self.order + 1):
                    if self.has_edge(low, high):
                        continue
                    result._ensure_node(low)
                    result._ensure_node(high)
                    result.add_edge(low, high, COMPLEMENT_WEIGHT)
        logger.debug(
            "Complement (%s) of order %d built with %d edges",
            mode,
            result.order,
            result.get_num_edges(),
        )
        return result
