"""Customer — the party an order is placed for.

Orders only hold the customer's id; nothing in the order core ever
mutates a customer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from repuestos.domain.model.violation import Violation

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class Customer:
    id: str
    name: str
    contact_name: str
    email: str
    phone: str
    address: str | None = None
    city: str | None = None
    tax_id: str | None = None

    def matches(self, term: str) -> bool:
        """Case-insensitive match on company or contact name."""
        term = term.lower()
        return term in self.name.lower() or term in self.contact_name.lower()


def check_contact_fields(name: str, contact_name: str, email: str, phone: str) -> list[Violation]:
    """Every problem with a customer's required fields (already stripped)."""
    violations: list[Violation] = []
    if len(name) < 2:
        violations.append(Violation(("name",), "Name is required"))
    if len(contact_name) < 2:
        violations.append(Violation(("contact_name",), "Contact is required"))
    if not _EMAIL_RE.match(email):
        violations.append(Violation(("email",), "Invalid email"))
    if len(phone) < 7:
        violations.append(Violation(("phone",), "Phone is required"))
    return violations
