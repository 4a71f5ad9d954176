"""Application service: Update Customer use case.

Only the given fields change; the id never does, so orders keep
pointing at the same customer.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from repuestos.domain.exceptions import EntityNotFoundError, ValidationError
from repuestos.domain.model.customer import Customer, check_contact_fields
from repuestos.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        name: str | None = None,
        contact_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        city: str | None = None,
        tax_id: str | None = None,
    ) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found: '{customer_id}'")

        updated = replace(
            customer,
            name=customer.name if name is None else name.strip(),
            contact_name=customer.contact_name if contact_name is None else contact_name.strip(),
            email=customer.email if email is None else email.strip(),
            phone=customer.phone if phone is None else phone.strip(),
            address=customer.address if address is None else address.strip() or None,
            city=customer.city if city is None else city.strip() or None,
            tax_id=customer.tax_id if tax_id is None else tax_id.strip() or None,
        )

        violations = check_contact_fields(
            updated.name, updated.contact_name, updated.email, updated.phone
        )
        if violations:
            raise ValidationError.from_violations(violations, subject="Customer data")

        self._customer_repo.save(updated)
        logger.info("Customer %s updated", updated.id)
        return updated
