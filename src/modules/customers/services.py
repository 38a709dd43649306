"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer entity, delegating
persistence to the injected ``ICustomerRepository``.

Rules enforced here:
- A missing customer is reported as ``Err(CustomerNotFound(id))``.
- Updates replace first name, last name and email on the stored record;
  the id is never touched.
- Email uniqueness is NOT enforced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.customers.exceptions import CustomerNotFound
from modules.customers.models import Customer
from shared.domain.result import Err, Ok, Result

if TYPE_CHECKING:
    from modules.customers.dtos import CustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    Holds no per-request state, so one instance may serve every request.
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_customers(self) -> List[Customer]:
        """Return every stored customer in repository order."""
        logger.info("customer.list_requested")
        return self._repo.list()

    def get_customer_by_id(self, id: int) -> Result[Customer, CustomerNotFound]:
        logger.info("customer.fetch_requested", customer_id=id)
        customer = self._repo.get_by_id(id)
        if customer is None:
            logger.info("customer.not_found", customer_id=id)
            return Err(CustomerNotFound(id))
        return Ok(customer)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def add_customer(self, dto: CustomerDTO) -> Customer:
        """Persist a new customer exactly as submitted.

        The repository assigns the id.  Storage errors propagate.
        """
        log = logger.bind(email=dto.email)
        customer = Customer(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
        )
        customer = self._repo.save(customer)
        log.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(
        self, id: int, dto: CustomerDTO
    ) -> Result[Customer, CustomerNotFound]:
        """Overwrite first name, last name and email of an existing customer.

        Full replace: every field comes from ``dto``; nothing is merged.
        """
        log = logger.bind(customer_id=id)
        customer = self._repo.get_by_id(id)
        if customer is None:
            log.info("customer.not_found")
            return Err(CustomerNotFound(id))

        customer.first_name = dto.first_name
        customer.last_name = dto.last_name
        customer.email = dto.email

        customer = self._repo.save(customer)
        log.info("customer.updated")
        return Ok(customer)

    @transaction.atomic
    def delete_customer(self, id: int) -> Result[None, CustomerNotFound]:
        """Delete a customer after checking that it exists.

        The check and the delete are two repository calls inside one
        transaction; a concurrent delete may still win the race, in which
        case the caller sees the same not-found outcome on retry.
        """
        log = logger.bind(customer_id=id)
        if not self._repo.exists(id):
            log.info("customer.not_found")
            return Err(CustomerNotFound(id))
        self._repo.delete(id)
        log.info("customer.removed")
        return Ok(None)
