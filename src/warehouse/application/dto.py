"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.exceptions import DomainException


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a manager operation.

    Manager operations never raise domain errors; they come back here
    with ``ok=False`` and the original exception in ``error``.
    """

    ok: bool
    message: str
    error: DomainException | None = None

    @classmethod
    def success(cls, message: str) -> OperationResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, operation: str, error: DomainException) -> OperationResult:
        return cls(ok=False, message=f"{operation} error: {error}", error=error)
