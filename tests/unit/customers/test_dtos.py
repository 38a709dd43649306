"""Unit tests for the customer request DTO.

Covers:
- Accepting the camelCase wire names.
- Required fields, blank names and malformed emails.
- Immutability and ignored keys.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.customers.dtos import CustomerDTO

pytestmark = pytest.mark.unit


def _payload(**overrides) -> dict:
    payload = {
        "firstName": "Dave",
        "lastName": "Brown",
        "email": "dave@example.com",
    }
    payload.update(overrides)
    return payload


def _error_fields(exc: ValidationError) -> set:
    return {error["loc"][0] for error in exc.errors()}


class TestCustomerDTOValid:
    def test_accepts_camel_case_payload(self):
        dto = CustomerDTO.model_validate(_payload())
        assert dto.first_name == "Dave"
        assert dto.last_name == "Brown"
        assert dto.email == "dave@example.com"

    def test_accepts_field_names(self):
        dto = CustomerDTO(first_name="Dave", last_name="Brown", email="dave@example.com")
        assert dto.first_name == "Dave"

    def test_keeps_surrounding_whitespace(self):
        dto = CustomerDTO.model_validate(_payload(firstName=" Dave "))
        assert dto.first_name == " Dave "

    def test_email_kept_as_submitted(self):
        dto = CustomerDTO.model_validate(_payload(email="Dave@Example.COM"))
        assert dto.email == "Dave@Example.COM"

    def test_ignores_id(self):
        dto = CustomerDTO.model_validate(_payload(id=99))
        assert not hasattr(dto, "id")

    def test_is_frozen(self):
        dto = CustomerDTO.model_validate(_payload())
        with pytest.raises(ValidationError):
            dto.first_name = "Other"


class TestCustomerDTOInvalid:
    def test_all_fields_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            CustomerDTO.model_validate({})
        assert _error_fields(exc_info.value) == {"firstName", "lastName", "email"}

    @pytest.mark.parametrize("field", ["firstName", "lastName"])
    @pytest.mark.parametrize("value", ["", "   ", "\t"])
    def test_blank_names_rejected(self, field, value):
        with pytest.raises(ValidationError, match="must not be blank") as exc_info:
            CustomerDTO.model_validate(_payload(**{field: value}))
        assert _error_fields(exc_info.value) == {field}

    def test_null_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CustomerDTO.model_validate(_payload(lastName=None))
        assert _error_fields(exc_info.value) == {"lastName"}

    def test_non_string_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CustomerDTO.model_validate(_payload(firstName=123))
        assert _error_fields(exc_info.value) == {"firstName"}

    def test_name_too_long_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CustomerDTO.model_validate(_payload(firstName="x" * 256))
        assert _error_fields(exc_info.value) == {"firstName"}

    @pytest.mark.parametrize(
        "email", ["", "not-an-email", "dave@", "@example.com", "dave example@x.com"]
    )
    def test_malformed_email_rejected(self, email):
        with pytest.raises(ValidationError) as exc_info:
            CustomerDTO.model_validate(_payload(email=email))
        assert _error_fields(exc_info.value) == {"email"}

    def test_non_object_payload_rejected(self):
        with pytest.raises(ValidationError):
            CustomerDTO.model_validate(["Dave", "Brown"])

    @pytest.mark.parametrize(
        "email", ["Dave <dave@example.com>", "Dave Brown <dave@example.com>", "<dave@example.com>"]
    )
    def test_display_name_email_rejected(self, email):
        with pytest.raises(ValidationError, match="not a valid email address") as exc_info:
            CustomerDTO.model_validate(_payload(email=email))
        assert _error_fields(exc_info.value) == {"email"}
