"""Parser for the AI validator's ``status;message`` answers.

The AI validator is prompted to answer with a status token and a free-text
reason separated by ``;`` (e.g. ``"VALID;Awesome password, bro!"``). This
module turns such answers into PasswordResponse objects and is the only
place that knows about that text contract.
"""

import logging

from src.shared.schemas.password import PasswordResponse, PasswordResponseStatus, build_password_response

logger = logging.getLogger(__name__)

SEPARATOR = ";"


def parse_status(token: str) -> PasswordResponseStatus | None:
    """Map a lower-cased status token to a status by prefix, or None if unknown."""
    if token.startswith("invalid"):
        return PasswordResponseStatus.INVALID
    if token.startswith("valid"):
        return PasswordResponseStatus.VALID
    return None


def create_password_response(raw: str | None, password: str | None) -> PasswordResponse:
    """Create a PasswordResponse from an AI answer.

    Args:
        raw: The model's answer, expected as ``"status;message"``
        password: The password that was validated; always echoed back
            instead of anything the model repeated

    Returns:
        PasswordResponse with the parsed status and trimmed message, or an
        ERROR response describing why the answer could not be parsed.

    Examples:
        >>> create_password_response("valid;Nice password", "Abc123!@").message
        'Nice password'
        >>> create_password_response("weird", None).status
        <PasswordResponseStatus.ERROR: 'ERROR'>

    """
    if raw is None or not raw.strip():
        logger.warning("AI response is empty")
        return build_password_response("Invalid response format", password, PasswordResponseStatus.ERROR)

    parts = raw.split(SEPARATOR)
    while parts and not parts[-1]:
        parts.pop()

    if len(parts) < 2:
        logger.warning("AI response has no status/message separator")
        return build_password_response(
            "Response must contain at least status and message", password, PasswordResponseStatus.ERROR
        )

    token = parts[0].strip().lower()
    message = parts[1].strip()

    status = parse_status(token)
    if status is None:
        logger.warning(f"AI response has unknown status token: {token}")
        return build_password_response(f"Invalid status format: {token}", password, PasswordResponseStatus.ERROR)

    return build_password_response(message, password, status)
