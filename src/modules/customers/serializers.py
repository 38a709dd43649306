"""Customer DRF serializers for API output.

The serializer operates at the Interface layer (API Views).  It renders
``Customer`` instances with the camelCase field names used on the wire
and documents the resource for the OpenAPI schema.  Input validation is
done by the Pydantic ``CustomerDTO`` in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import Customer


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    firstName = serializers.CharField(source="first_name", max_length=255)
    lastName = serializers.CharField(source="last_name", max_length=255)

    class Meta:
        model = Customer
        fields = ["id", "firstName", "lastName", "email"]
        read_only_fields = ["id"]


class ErrorSerializer(serializers.Serializer):
    """Error envelope: ``{"error": "<message>"}``."""

    error = serializers.CharField()


class ValidationErrorSerializer(ErrorSerializer):
    """Error envelope with per-field messages."""

    fields = serializers.DictField(child=serializers.ListField(child=serializers.CharField()))
