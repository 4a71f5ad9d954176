"""Map domain error kinds to click exceptions with distinct exit codes.

A conflict exits differently from a validation failure so scripts can
reload the order's real status instead of retrying blindly.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click

from repuestos.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    LifecycleConflictError,
    TransportError,
    ValidationError,
)

EXIT_VALIDATION = 1
EXIT_CONFLICT = 3
EXIT_NOT_FOUND = 4
EXIT_TRANSPORT = 5


class DomainClickException(click.ClickException):

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@contextmanager
def domain_errors() -> Iterator[None]:
    try:
        yield
    except ValidationError as exc:
        details = [str(exc)] + [f"  - {v}" for v in exc.violations]
        raise DomainClickException("\n".join(details), EXIT_VALIDATION) from exc
    except LifecycleConflictError as exc:
        raise DomainClickException(f"Conflict: {exc}", EXIT_CONFLICT) from exc
    except EntityNotFoundError as exc:
        raise DomainClickException(str(exc), EXIT_NOT_FOUND) from exc
    except TransportError as exc:
        raise DomainClickException(f"Storage error: {exc}", EXIT_TRANSPORT) from exc
    except DomainException as exc:
        raise click.ClickException(str(exc)) from exc
