"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All GraphService methods return ServiceResult.
Domain exceptions never escape the service layer; each
:class:`~ugraph.domain.errors.GraphError` maps to a stable error code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ugraph.domain.errors import GraphError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: GraphError) -> ServiceError:
        """Build an error payload from a domain exception.

        Public attributes of the exception (``src``, ``dest``, ``node``,
        ``weight``, ``path``, ...) become ``detail`` entries.
        """
        detail = {
            key: str(value) if not isinstance(value, (int, str)) else value
            for key, value in vars(exc).items()
            if not key.startswith("_") and value is not None
        }
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"remove_edge"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (source file, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: GraphError) -> ServiceResult:
        """Return a failed result for *op* caused by *exc*."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
