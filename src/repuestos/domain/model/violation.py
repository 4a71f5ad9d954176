"""Violation — a single reported validation failure."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    """A rule failure attached to the input it concerns.

    ``path`` locates the input, e.g. ``("delivery_date",)`` or
    ``("lines", 1, "product_id")``, so a form can route the message
    to the right field.
    """

    path: tuple[str | int, ...]
    message: str

    @property
    def field(self) -> str:
        """Dotted form of the path, e.g. ``lines.1.product_id``."""
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
