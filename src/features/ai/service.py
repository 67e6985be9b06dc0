"""AI-backed password service layer."""

import logging
from collections.abc import Awaitable

from src.config.settings import settings
from src.shared.schemas.password import PasswordResponse, PasswordResponseStatus

from .client import AIPasswordClient
from .exceptions import AIPasswordError, AIServiceError, EmptyGeneratedPasswordError, GenerationAttemptsExhaustedError
from .parser import create_password_response
from .prompts import GENERATE_PASSWORD_MESSAGE

logger = logging.getLogger(__name__)


class AIPasswordService:
    """Service for validating and generating passwords with the AI client."""

    def __init__(self, client: AIPasswordClient, max_attempts: int | None = None):
        if max_attempts is None:
            max_attempts = settings.ai_max_generation_attempts
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.client = client
        self.max_attempts = max_attempts

    async def _call(self, operation: str, coro: Awaitable[str]) -> str:
        try:
            return await coro
        except AIPasswordError:
            raise
        except Exception as exc:
            raise AIServiceError(f"AI {operation} call failed: {type(exc).__name__}") from exc

    async def validate_password(self, password: str | None) -> PasswordResponse:
        """Validate a password with the AI validator.

        Args:
            password: Password to validate

        Returns:
            PasswordResponse parsed from the validator's answer

        Raises:
            AIServiceError: If the AI service call fails

        """
        logger.debug(f"Validating password using AI validator: {'***' if password is not None else 'null'}")

        raw = await self._call("validator", self.client.validate(password))
        response = create_password_response(raw, password)
        logger.info(f"AI validation result: {response.status}")
        return response

    async def generate_and_validate_password(self) -> PasswordResponse:
        """Generate a password with the AI creator and validate it with the AI validator.

        Candidates are regenerated until the validator accepts one or
        ``max_attempts`` is reached.

        Returns:
            VALID PasswordResponse carrying the generated password

        Raises:
            EmptyGeneratedPasswordError: If the creator returns an empty password
            GenerationAttemptsExhaustedError: If no candidate was accepted
            AIServiceError: If either AI call fails

        """
        for attempt in range(1, self.max_attempts + 1):
            logger.info(f"Password generation attempt #{attempt}")

            candidate = await self._call("creator", self.client.generate(GENERATE_PASSWORD_MESSAGE))
            if candidate is None or not candidate.strip():
                logger.warning(f"AI password creator returned null or empty password on attempt #{attempt}")
                raise EmptyGeneratedPasswordError()

            raw = await self._call("validator", self.client.validate(candidate))
            response = create_password_response(raw, candidate)

            if response.status == PasswordResponseStatus.VALID:
                logger.info(f"Password generation and validation completed successfully on attempt #{attempt}")
                return response

            logger.warning(f"Generated password is {response.status} on attempt #{attempt}, retrying...")

        logger.error(f"Password generation gave up after {self.max_attempts} attempt(s)")
        raise GenerationAttemptsExhaustedError(self.max_attempts)
