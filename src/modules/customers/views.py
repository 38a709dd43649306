"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet.  Request
bodies are validated by ``validate_customer_payload`` before the service
is called; service results are checked and translated into HTTP status
codes.  The view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import structlog
from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CustomerDTO
from modules.customers.exceptions import CustomerNotFound
from modules.customers.serializers import (
    CustomerSerializer,
    ErrorSerializer,
    ValidationErrorSerializer,
)
from modules.customers.services import CustomerService
from shared.domain.result import Err

logger = structlog.get_logger(__name__)

_NOT_FOUND = OpenApiResponse(ErrorSerializer, description="Customer not found")
_INVALID = OpenApiResponse(ValidationErrorSerializer, description="Invalid request body")


def validate_customer_payload(
    data: Any,
) -> Tuple[CustomerDTO | None, Dict[str, Any] | None]:
    """Build a ``CustomerDTO`` from a request body.

    Returns ``(dto, None)`` on success or ``(None, error_body)`` where
    ``error_body`` is the 400 response payload with per-field messages.
    """
    try:
        return CustomerDTO.model_validate(data), None
    except PydanticValidationError as exc:
        fields: Dict[str, List[str]] = {}
        for error in exc.errors():
            key = ".".join(str(part) for part in error["loc"]) or "body"
            fields.setdefault(key, []).append(error["msg"])
        return None, {"error": "Invalid request body", "fields": fields}


def _not_found(error: CustomerNotFound) -> Response:
    return Response({"error": str(error)}, status=status.HTTP_404_NOT_FOUND)


@extend_schema_view(
    list=extend_schema(
        summary="Get all customers",
        responses={200: CustomerSerializer(many=True)},
    ),
    retrieve=extend_schema(
        summary="Get a customer by ID",
        responses={200: CustomerSerializer, 404: _NOT_FOUND},
    ),
    create=extend_schema(
        summary="Add a customer",
        request=CustomerSerializer,
        responses={201: CustomerSerializer, 400: _INVALID},
    ),
    update=extend_schema(
        summary="Update a customer",
        request=CustomerSerializer,
        responses={200: CustomerSerializer, 400: _INVALID, 404: _NOT_FOUND},
    ),
    destroy=extend_schema(
        summary="Delete a customer",
        responses={204: None, 404: _NOT_FOUND},
    ),
)
class CustomerViewSet(ViewSet):
    """ViewSet for Customer CRUD operations.

    The ``CustomerService`` is passed in through ``as_view(...,
    service=...)`` by the URL configuration.  All ORM access goes through
    the service/repository layer.
    """

    service: CustomerService | None = None

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/customers"""
        customers = self.service.get_all_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    def retrieve(self, request: Request, pk: int) -> Response:
        """GET /api/customers/{pk}"""
        result = self.service.get_customer_by_id(pk)
        if isinstance(result, Err):
            return _not_found(result.error)
        return Response(CustomerSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/customers"""
        dto, errors = validate_customer_payload(request.data)
        if errors is not None:
            logger.info("customer.invalid_payload", fields=sorted(errors["fields"]))
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        customer = self.service.add_customer(dto)
        return Response(
            CustomerSerializer(customer).data, status=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: int) -> Response:
        """PUT /api/customers/{pk}"""
        dto, errors = validate_customer_payload(request.data)
        if errors is not None:
            logger.info(
                "customer.invalid_payload",
                customer_id=pk,
                fields=sorted(errors["fields"]),
            )
            return Response(errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.service.update_customer(pk, dto)
        if isinstance(result, Err):
            return _not_found(result.error)
        return Response(CustomerSerializer(result.value).data)

    def destroy(self, request: Request, pk: int) -> Response:
        """DELETE /api/customers/{pk}"""
        result = self.service.delete_customer(pk)
        if isinstance(result, Err):
            return _not_found(result.error)
        return Response(status=status.HTTP_204_NO_CONTENT)
