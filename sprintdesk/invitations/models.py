"""
Sprintdesk invitation models.

Pydantic models for invitation records and token validation results.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

MISSING_PARAMETERS = "Missing parameters"
INVALID_OR_EXPIRED = "Invalid or expired token"


class UserCategory(str, Enum):
    """The two user partitions an invitation can belong to."""

    INTERNAL = "internal"
    PARTNER = "partner"

    @classmethod
    def parse(cls, value: Any) -> Optional["UserCategory"]:
        """Return the category for value, or None if it is not one."""
        try:
            return cls(value)
        except (TypeError, ValueError):
            return None


class InviteRecord(BaseModel):
    """
    A row from one of the user partition tables.

    Owned by the data store. Sprintdesk only reads it; issuing an invite and
    consuming it (setting auth_id) happen elsewhere. Identifiers and email
    are taken as stored, without format checks.
    """

    id: Any
    name: str
    email: str
    invite_token: Optional[str] = None
    invite_expires_at: datetime
    auth_id: Optional[Any] = None

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Ana Souza",
                "email": "ana@example.com",
                "invite_expires_at": "2024-01-08T00:00:00Z",
                "auth_id": None,
            }
        },
    }


class InvitedUser(BaseModel):
    """The only profile fields exposed to whoever holds a valid token."""

    name: str
    email: str
    expires_at: datetime


class ValidationOutcome(str, Enum):
    """How a validation call ended, with the transport status it maps to."""

    VALID = "valid"
    MISSING_PARAMETERS = "missing_parameters"
    INVALID_OR_EXPIRED = "invalid_or_expired"
    BACKEND_FAILURE = "backend_failure"

    @property
    def status_code(self) -> int:
        return _OUTCOME_STATUS[self]


_OUTCOME_STATUS = {
    ValidationOutcome.VALID: 200,
    ValidationOutcome.MISSING_PARAMETERS: 400,
    # A normal business outcome, not a transport error
    ValidationOutcome.INVALID_OR_EXPIRED: 200,
    ValidationOutcome.BACKEND_FAILURE: 500,
}


class TokenValidationResult(BaseModel):
    """
    Result of validating an invitation token.

    Either ``{valid: true, user: {...}}`` or ``{valid: false, error: "..."}``.
    """

    valid: bool
    user: Optional[InvitedUser] = None
    error: Optional[str] = None
    outcome: ValidationOutcome = Field(exclude=True)

    @classmethod
    def success(cls, record: InviteRecord) -> "TokenValidationResult":
        return cls(
            valid=True,
            user=InvitedUser(
                name=record.name,
                email=record.email,
                expires_at=record.invite_expires_at,
            ),
            outcome=ValidationOutcome.VALID,
        )

    @classmethod
    def missing_parameters(cls) -> "TokenValidationResult":
        return cls(
            valid=False,
            error=MISSING_PARAMETERS,
            outcome=ValidationOutcome.MISSING_PARAMETERS,
        )

    @classmethod
    def invalid_or_expired(cls) -> "TokenValidationResult":
        return cls(
            valid=False,
            error=INVALID_OR_EXPIRED,
            outcome=ValidationOutcome.INVALID_OR_EXPIRED,
        )

    @classmethod
    def failure(cls, message: str) -> "TokenValidationResult":
        return cls(
            valid=False,
            error=message,
            outcome=ValidationOutcome.BACKEND_FAILURE,
        )

    @property
    def status_code(self) -> int:
        """HTTP status for this result."""
        return self.outcome.status_code

    def to_response(self) -> Dict[str, Any]:
        """JSON-ready response body."""
        return self.model_dump(mode="json", exclude_none=True)
