"""AI-backed password router (API endpoints)."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.shared.schemas.password import (
    PasswordResponse,
    PasswordResponseStatus,
    ValidateRequest,
    build_password_response,
)

from .dependencies import get_ai_password_service
from .exceptions import AIPasswordError
from .service import AIPasswordService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ai", tags=["AI Password"])

VALIDATOR_UNAVAILABLE_MESSAGE = "Sorry, the AI validator is having issues right now!"
CREATOR_UNAVAILABLE_MESSAGE = "Sorry, the AI creator is having issues right now!"


def _server_error(message: str, password: str | None) -> JSONResponse:
    response = build_password_response(message, password, PasswordResponseStatus.ERROR)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response.model_dump(mode="json"),
    )


@router.post(
    "/validate",
    response_model=PasswordResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PasswordResponse}},
)
async def validate(data: ValidateRequest, service: AIPasswordService = Depends(get_ai_password_service)):
    """Validate a password with the AI validator.

    - **password**: Password to validate

    Valid and invalid verdicts are both returned with 200; the verdict is in
    the `status` field.
    """
    try:
        return await service.validate_password(data.password)
    except AIPasswordError as exc:
        logger.error(f"AI password validation failed: {exc.detail}")
        return _server_error(VALIDATOR_UNAVAILABLE_MESSAGE, data.password)


@router.post(
    "/generate",
    response_model=PasswordResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": PasswordResponse}},
)
async def generate(service: AIPasswordService = Depends(get_ai_password_service)):
    """Generate a password with the AI creator, validated by the AI validator."""
    try:
        return await service.generate_and_validate_password()
    except AIPasswordError as exc:
        logger.error(f"AI password generation failed: {exc.detail}")
        return _server_error(CREATOR_UNAVAILABLE_MESSAGE, None)
