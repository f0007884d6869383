"""ServiceResult and ServiceError — what every console operation returns.

The interactive loop, batch runner and renderers all consume this type,
so a command's outcome never escapes as a raw exception.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one console command.

    Attributes:
        ok: Whether the command was accepted and applied.
        op: Operation name (e.g. ``"fill"``, ``"new_shape"``).
        data: Operation-specific payload; ``grid`` holds the rendered window.
        warnings: Non-fatal issues such as clipped cells.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (line numbers in batch runs, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def message(self) -> str:
        """One-line human-readable confirmation or error text."""
        if self.error is not None:
            return self.error.message
        return str(self.data.get("message", ""))
