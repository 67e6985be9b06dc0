"""Password request and response schemas (DTOs)."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class PasswordResponseStatus(StrEnum):
    """Outcome of a password validation attempt."""

    VALID = "VALID"
    INVALID = "INVALID"
    ERROR = "ERROR"


# Request schemas
class ValidateRequest(BaseModel):
    """Password validation request.

    The password is optional at the transport level; a missing value is
    reported by the validators as a rule violation.
    """

    password: str | None = Field(None, description="Password to validate")


# Response schemas
class PasswordResponse(BaseModel):
    """Validation outcome returned by every password endpoint."""

    model_config = ConfigDict(frozen=True)

    status: PasswordResponseStatus
    message: str
    password: str | None = None


def build_password_response(
    message: str | None, password: str | None, status: PasswordResponseStatus
) -> PasswordResponse:
    """Create a PasswordResponse, treating a missing message as empty."""
    return PasswordResponse(status=status, message=message or "", password=password)
