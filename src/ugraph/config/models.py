"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ugraph.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ugraph.domain.types import ComplementMode

# --- ugraph.toml sections ---


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    default_weight: int = Field(default=1, ge=1)
    complement_mode: ComplementMode = ComplementMode.ANCHOR


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    sort_nodes: bool = True


class UgraphConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
