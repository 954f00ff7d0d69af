"""Node records owned by a graph.

A node's weight is derived from its id when not given explicitly.
The degree counter is maintained by the owning graph, never recomputed here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ugraph.domain.errors import DegreeUnderflowError

WEIGHT_MODULUS = 200


def derive_weight(node_id: int) -> float:
    """Return the default weight for *node_id*: ``(id mod 200) + 1``."""
    return float(node_id % WEIGHT_MODULUS + 1)


@dataclass
class Node:
    """A vertex with an immutable id and weight and a mutable degree."""

    id: int
    weight: float
    degree: int = field(default=0)

    @classmethod
    def create(cls, node_id: int, weight: float | None = None) -> Node:
        """Build a fresh node with degree 0.

        Uses :func:`derive_weight` when *weight* is None.
        """
        if node_id < 0:
            msg = f"Node id must be >= 0, got {node_id}"
            raise ValueError(msg)
        if weight is None:
            weight = derive_weight(node_id)
        return cls(id=node_id, weight=float(weight))

    def increment_degree(self) -> None:
        self.degree += 1

    def decrement_degree(self) -> None:
        if self.degree == 0:
            raise DegreeUnderflowError(self.id)
        self.degree -= 1

    def copy(self, *, reset_degree: bool = False) -> Node:
        """Return an independent copy, optionally with degree 0."""
        return Node(id=self.id, weight=self.weight, degree=0 if reset_degree else self.degree)
