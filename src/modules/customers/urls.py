"""Customer URL configuration.

Explicit routing table: each (path, HTTP method) pair is bound to one
``CustomerViewSet`` action.  The service is wired once, at import time.
"""

from __future__ import annotations

from django.urls import path

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService
from modules.customers.views import CustomerViewSet

customer_service = CustomerService(repository=CustomerDjangoRepository())

customer_list = CustomerViewSet.as_view(
    {"get": "list", "post": "create"},
    service=customer_service,
)
customer_detail = CustomerViewSet.as_view(
    {"get": "retrieve", "put": "update", "delete": "destroy"},
    service=customer_service,
)

urlpatterns = [
    path("customers", customer_list, name="customer-list"),
    path("customers/<int:pk>", customer_detail, name="customer-detail"),
]
