"""Typed errors raised by the graph domain.

Every error derives from :class:`GraphError` and also from the builtin
exception that best describes it, so callers may catch either.
The service layer maps each class to a stable error code.
"""

from __future__ import annotations

from pathlib import Path


class GraphError(Exception):
    """Base class for all graph errors."""

    code = "GRAPH_ERROR"


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is not a positive integer."""

    code = "INVALID_WEIGHT"

    def __init__(self, weight: object) -> None:
        self.weight = weight
        super().__init__(f"Edge weight must be an integer greater than 0, got {weight!r}")


class SelfLoopError(GraphError, ValueError):
    """An edge would connect a node to itself."""

    code = "SELF_LOOP"

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Self-loops are not allowed (node {node})")


class DegreeUnderflowError(GraphError, ValueError):
    """A node's degree counter would drop below zero."""

    code = "DEGREE_UNDERFLOW"

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(f"Degree of node {node} is already 0")


class NodeNotFoundError(GraphError, KeyError):
    """No node record exists for an id."""

    code = "NODE_NOT_FOUND"

    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(node)

    def __str__(self) -> str:
        return f"Node {self.node} not found"


class EdgeNotFoundError(GraphError, KeyError):
    """One or both descriptors of an edge are missing."""

    code = "NOT_FOUND"

    def __init__(self, src: int, dest: int) -> None:
        self.src = src
        self.dest = dest
        super().__init__((src, dest))

    def __str__(self) -> str:
        return f"Edge {self.src} - {self.dest} not found"


class GraphCompleteError(GraphError):
    """The operation requires a graph that is not complete."""

    code = "ALREADY_COMPLETE"

    def __init__(self, order: int) -> None:
        self.order = order
        super().__init__(f"Graph of order {order} is already complete")


class GraphReadError(GraphError, OSError):
    """An edge-list file could not be read or parsed."""

    code = "READ_ERROR"

    def __init__(self, path: Path, reason: str, *, line: int | None = None) -> None:
        self.path = path
        self.reason = reason
        self.line = line
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"{location}: {reason}")

    def __str__(self) -> str:
        location = f"{self.path}:{self.line}" if self.line is not None else str(self.path)
        return f"{location}: {self.reason}"
