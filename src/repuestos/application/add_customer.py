"""Application service: Add Customer use case."""

from __future__ import annotations

from repuestos.domain.exceptions import ValidationError
from repuestos.domain.model.customer import Customer, check_contact_fields
from repuestos.domain.repository.customer_repository import CustomerRepository


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        contact_name: str,
        email: str,
        phone: str,
        address: str | None = None,
        city: str | None = None,
        tax_id: str | None = None,
    ) -> Customer:
        name, contact_name = name.strip(), contact_name.strip()
        email, phone = email.strip(), phone.strip()

        violations = check_contact_fields(name, contact_name, email, phone)
        if violations:
            raise ValidationError.from_violations(violations, subject="Customer data")

        all_customers = self._customer_repo.list_all()
        numeric_ids = [int(c.id[1:]) for c in all_customers if c.id[1:].isdigit()]
        next_id = f"C{max(numeric_ids) + 1 if numeric_ids else 1}"

        customer = Customer(
            id=next_id,
            name=name,
            contact_name=contact_name,
            email=email,
            phone=phone,
            address=address or None,
            city=city or None,
            tax_id=tax_id or None,
        )
        self._customer_repo.save(customer)
        return customer
