from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository

SEED_CUSTOMERS = [
    ("Alice", "Smith", "alice@example.com"),
    ("Bob", "Jones", "bob@example.com"),
    ("Carol", "White", "carol@example.com"),
]


class Command(BaseCommand):
    help = "Insert the reference customers, skipping any whose email is already stored."

    @transaction.atomic
    def handle(self, *args, **options):
        repo = CustomerDjangoRepository()
        created = 0
        for first_name, last_name, email in SEED_CUSTOMERS:
            if repo.exists_by_email(email):
                continue
            repo.save(Customer(first_name=first_name, last_name=last_name, email=email))
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: created={created}, "
                f"skipped={len(SEED_CUSTOMERS) - created}"
            )
        )
