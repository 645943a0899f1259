"""ServiceResult and ServiceError — the contract between services and the CLI.

Services never let a load error escape; they report it as a failed result
with an error code the CLI can render and turn into an exit status.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

CONFIG_ERROR = "CONFIG_ERROR"
DATA_ERROR = "DATA_ERROR"
IO_ERROR = "IO_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"load"``).
        data: Operation-specific payload (counts, loaded sources).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
