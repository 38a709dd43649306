"""Customer repository interface.

Extends ``IRepository[Customer]`` with the email look-ups used when
seeding reference data.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve the first customer registered with this email."""

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Return ``True`` if any customer uses this email."""
