"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
``CustomerDTO`` is the contract between the API layer and the Service
layer for both creation and full-replace updates.  It is immutable
(``frozen=True``) and accepts the camelCase names used on the wire.
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class CustomerDTO(BaseModel):
    """Immutable DTO for customer create and update requests.

    Validates:
    - ``firstName`` / ``lastName`` are strings that are not blank.
    - ``email`` is a bare, well-formed address (checked with
      *email-validator*); ``Name <addr>`` forms are rejected.

    Values are kept exactly as submitted; validation never normalises
    them.  Unknown keys (including ``id``) are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(alias="firstName", max_length=255)
    last_name: str = Field(alias="lastName", max_length=255)
    email: str = Field(max_length=254)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        """Check syntax only; the submitted value is returned unchanged."""
        if "<" in v or ">" in v:
            raise ValueError(
                "value is not a valid email address: display names are not allowed"
            )
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"value is not a valid email address: {exc}") from exc
        return v
