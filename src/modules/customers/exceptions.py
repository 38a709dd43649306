"""Customer domain errors.

Returned by the Service Layer inside ``Err`` results.  The API layer
(Views) checks the result and translates these into HTTP responses.
"""

from __future__ import annotations


class CustomerNotFound(Exception):
    """No customer is stored under the requested id."""

    def __init__(self, customer_id: int) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer not found with id: {customer_id}")
