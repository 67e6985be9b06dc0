"""Rule-based password validation router (API endpoints)."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from src.shared.schemas.password import (
    PasswordResponse,
    PasswordResponseStatus,
    ValidateRequest,
    build_password_response,
)
from src.shared.validators.password import VALIDATION_ERROR_MESSAGE, validate_password

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Password Validation"])

STATUS_CODES = {
    PasswordResponseStatus.VALID: status.HTTP_200_OK,
    PasswordResponseStatus.INVALID: status.HTTP_422_UNPROCESSABLE_CONTENT,
}


def _to_http_response(response: PasswordResponse) -> JSONResponse:
    status_code = STATUS_CODES.get(response.status, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))


@router.post(
    "/validate",
    response_model=PasswordResponse,
    responses={
        status.HTTP_422_UNPROCESSABLE_CONTENT: {"model": PasswordResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PasswordResponse},
    },
)
async def validate(data: ValidateRequest):
    """Validate a password against the complexity policy.

    - **password**: 8 to 128 characters with at least one uppercase letter,
      one lowercase letter, one digit and one of `@$!%*?&`

    Returns 200 when the password is valid and 422 when a rule fails.
    """
    try:
        response = validate_password(data.password)
    except Exception:
        logger.exception("Unexpected error in password validation endpoint")
        response = build_password_response(VALIDATION_ERROR_MESSAGE, None, PasswordResponseStatus.ERROR)

    return _to_http_response(response)
