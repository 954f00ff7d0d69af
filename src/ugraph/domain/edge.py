"""Edge descriptors — one per endpoint of an undirected edge.

An undirected edge between A and B is stored as two descriptors:
``Edge(B, w)`` in A's edge set and ``Edge(A, w)`` in B's.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Edge:
    """Outward view of an edge from one endpoint.

    Identity is the destination alone: two descriptors pointing at the
    same neighbour are equal whatever their weights, so a node can hold
    at most one descriptor per neighbour.
    """

    dest: int
    weight: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.dest == other.dest

    def __hash__(self) -> int:
        return hash(self.dest)

    def __lt__(self, other: Edge) -> bool:
        return self.dest < other.dest

    def to_dict(self) -> dict[str, int]:
        return {"dest": self.dest, "weight": self.weight}
