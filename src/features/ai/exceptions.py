"""AI password feature exceptions."""


class AIPasswordError(Exception):
    """Base exception for AI-backed password operations."""

    def __init__(self, detail: str = "AI password operation failed"):
        super().__init__(detail)
        self.detail = detail


class AIServiceError(AIPasswordError):
    """Raised when the external AI service cannot be reached or answers unusably."""

    def __init__(self, detail: str = "AI service call failed"):
        super().__init__(detail=detail)


class AIServiceNotConfiguredError(AIServiceError):
    """Raised when no API key is configured for the AI service."""

    def __init__(self):
        super().__init__(detail="AI service API key is not configured")


class PasswordGenerationError(AIPasswordError):
    """Base exception for password generation failures."""

    def __init__(self, detail: str = "Password generation failed"):
        super().__init__(detail=detail)


class EmptyGeneratedPasswordError(PasswordGenerationError):
    """Raised when the AI creator returns an empty password."""

    def __init__(self):
        super().__init__(detail="AI password creator returned null or empty password")


class GenerationAttemptsExhaustedError(PasswordGenerationError):
    """Raised when no valid password was produced within the attempt limit."""

    def __init__(self, attempts: int):
        super().__init__(detail=f"No valid password generated after {attempts} attempt(s)")
        self.attempts = attempts
