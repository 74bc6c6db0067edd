"""OperationResult and OperationError — the contract between engine and CLI.

INVARIANT: every CalendarService method returns an OperationResult; engine
errors are captured in ``error`` with their stable code, never raised past
the service boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from periodkit.domain.errors import PeriodKitError


class OperationError(BaseModel):
    """Structured error payload within an OperationResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class OperationResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"divide"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: OperationError | None = None

    @classmethod
    def failure(cls, op: str, exc: PeriodKitError) -> OperationResult:
        """Wrap an engine error under its stable code."""
        return cls(
            ok=False,
            op=op,
            error=OperationError(
                code=exc.code,
                message=str(exc),
                detail={"type": type(exc).__name__},
            ),
        )
