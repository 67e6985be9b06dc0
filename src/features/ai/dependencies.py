"""AI feature dependencies for FastAPI endpoints."""

from fastapi import Depends

from .client import AIPasswordClient
from .service import AIPasswordService


def get_ai_client() -> AIPasswordClient:
    """Dependency to get the AI client configured from settings."""
    return AIPasswordClient()


def get_ai_password_service(client: AIPasswordClient = Depends(get_ai_client)) -> AIPasswordService:
    """Dependency to get the AI password service."""
    return AIPasswordService(client)
