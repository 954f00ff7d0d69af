"""Enumerations shared across layers."""

from __future__ import annotations

from enum import StrEnum


class ComplementMode(StrEnum):
    """How :meth:`Graph.get_complement` chooses the pairs to connect."""

    ANCHOR = "anchor"  # only pairs involving the first node record
    FULL = "full"  # every non-adjacent pair
