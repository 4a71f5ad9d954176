"""Domain-level exceptions.

Every failure the order core can report is a subclass of DomainException,
so callers (CLI, API adapters) catch one base class and branch on the kind:

- ValidationError: the proposed data breaks one or more rules.  Carries the
  full list of violations so a form can show every problem at once.
- LifecycleConflictError: the stored state forbids the attempted change, e.g.
  an order's status or a stale version.  Callers should reload instead of
  retrying.
- EntityNotFoundError: a referenced order, customer or product is unknown.
- TransportError: the storage collaborator failed (I/O, malformed data).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from repuestos.domain.model.violation import Violation


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more business rules were violated."""

    def __init__(self, message: str, violations: list[Violation] | None = None) -> None:
        super().__init__(message)
        self.violations: list[Violation] = list(violations or [])

    @classmethod
    def from_violations(
        cls, violations: list[Violation], subject: str = "Order data"
    ) -> ValidationError:
        noun = "violation" if len(violations) == 1 else "violations"
        return cls(f"{subject} has {len(violations)} {noun}", violations)


class LifecycleConflictError(DomainException):
    """The stored state does not allow the requested change."""


class InvalidCancellationError(ValidationError, LifecycleConflictError):
    """A cancel request with an unknown reason or a missing required note.

    It is both a validation failure and a lifecycle conflict, so callers
    handling either kind will see it.
    """


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class TransportError(DomainException):
    """The persistence or catalog collaborator could not complete a call."""
