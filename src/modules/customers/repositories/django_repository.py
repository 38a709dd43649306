"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing entity into a domain error.  Database errors propagate.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Customer]:
        return Customer.objects.filter(id=id).first()

    def exists(self, id: int) -> bool:
        return Customer.objects.filter(id=id).exists()

    def list(self) -> List[Customer]:
        return list(Customer.objects.all())

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Insert the customer if it has no id yet, update it otherwise."""
        is_new = entity.pk is None
        entity.save()
        logger.info("customer.saved", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Hard-delete a customer by ID.

        Returns ``True`` if a row was removed, ``False`` if no customer
        exists with the given ID.
        """
        deleted, _ = Customer.objects.filter(id=id).delete()
        if deleted:
            logger.info("customer.deleted", customer_id=id)
        return bool(deleted)

    def get_by_email(self, email: str) -> Optional[Customer]:
        return Customer.objects.filter(email=email).first()

    def exists_by_email(self, email: str) -> bool:
        return Customer.objects.filter(email=email).exists()
