"""Client for the external AI text-completion service."""

import logging

import httpx

from src.config.settings import Settings, settings

from .exceptions import AIServiceError, AIServiceNotConfiguredError
from .prompts import CREATOR_SYSTEM_PROMPT, VALIDATOR_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class AIPasswordClient:
    """Calls an OpenAI-compatible chat-completions endpoint.

    Exposes the two capabilities the password service needs: generating a
    candidate password and validating a password. Both return the model's
    raw text answer and raise AIServiceError on any failure.
    """

    def __init__(self, config: Settings = settings, http_client: httpx.AsyncClient | None = None):
        self.config = config
        self._http_client = http_client

    async def generate(self, message: str) -> str:
        """Ask the model for a new password."""
        return await self._complete(CREATOR_SYSTEM_PROMPT, message)

    async def validate(self, password: str | None) -> str:
        """Ask the model to judge a password, answering ``status;message``."""
        return await self._complete(VALIDATOR_SYSTEM_PROMPT, password or "")

    async def _complete(self, system_prompt: str, user_message: str) -> str:
        if not self.config.ai_api_key:
            raise AIServiceNotConfiguredError()

        payload = {
            "model": self.config.ai_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "temperature": self.config.ai_temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.config.ai_api_key}",
            "Content-Type": "application/json",
        }

        try:
            if self._http_client is not None:
                response = await self._http_client.post(self.config.ai_api_url, json=payload, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self.config.ai_timeout_seconds) as client:
                    response = await client.post(self.config.ai_api_url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(f"AI service returned HTTP {exc.response.status_code}")
            raise AIServiceError(f"AI service returned HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.error(f"AI service request failed: {exc!r}")
            raise AIServiceError(f"AI service request failed: {type(exc).__name__}") from exc

        try:
            result = response.json()
            content = result["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error("AI service returned an unreadable payload")
            raise AIServiceError("AI service returned an unreadable payload") from exc

        return (content or "").strip()
