"""Customer model.

The surrogate ``id`` is an auto-incrementing integer assigned by the
database on first save.  ``email`` is indexed for look-ups but is not
unique: the service layer does not enforce email uniqueness.
"""

from __future__ import annotations

from django.db import models


class Customer(models.Model):
    """A customer record: first name, last name and email."""

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    email = models.EmailField(max_length=254, db_index=True)

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} <{self.email}>"
