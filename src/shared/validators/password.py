"""Password validation functions."""

import logging
import re
from enum import Enum

from src.shared.schemas.password import PasswordResponse, PasswordResponseStatus, build_password_response

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
SPECIAL_CHARACTERS = "@$!%*?&"
VALIDATION_ERROR_MESSAGE = "Unexpected error while validating password"

PASSWORD_POLICY_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]+")


class PasswordRule(Enum):
    """Password rules in evaluation order, with their user-facing descriptions."""

    PASSWORD_IS_REQUIRED = "Password is required"
    AT_LEAST_8_CHARACTERS = "Password must be at least 8 characters long"
    AT_MOST_128_CHARACTERS = "Password must be less than 128 characters long"
    AT_LEAST_RULES = (
        "Password must contain at least one uppercase letter, at least one lowercase letter, "
        "at least one number, at least one special character"
    )
    PASSWORD_IS_VALID = "Password is valid"

    @property
    def description(self) -> str:
        return self.value


def meets_character_policy(password: str) -> bool:
    """Check the character-class policy.

    The password needs at least one ASCII lowercase letter, one ASCII uppercase
    letter, one digit and one of ``@$!%*?&``, and may contain nothing else.

    Examples:
        >>> meets_character_policy("Abc123!@")
        True
        >>> meets_character_policy("Abc123!#")
        False

    """
    return PASSWORD_POLICY_PATTERN.fullmatch(password) is not None


def _check_password(password: str | None) -> PasswordRule:
    """Return the first failing rule, or PASSWORD_IS_VALID."""
    if password is None:
        logger.warning("Password validation failed: password is null")
        return PasswordRule.PASSWORD_IS_REQUIRED
    if len(password) < MIN_PASSWORD_LENGTH:
        logger.warning(f"Password validation failed: password too short ({len(password)} characters)")
        return PasswordRule.AT_LEAST_8_CHARACTERS
    if len(password) > MAX_PASSWORD_LENGTH:
        logger.warning(f"Password validation failed: password too long ({len(password)} characters)")
        return PasswordRule.AT_MOST_128_CHARACTERS
    if not meets_character_policy(password):
        logger.warning("Password validation failed: password does not meet complexity requirements")
        return PasswordRule.AT_LEAST_RULES
    return PasswordRule.PASSWORD_IS_VALID


def validate_password(password: str | None) -> PasswordResponse:
    """Validate a password against the fixed complexity policy.

    Rules are evaluated in order and evaluation stops at the first failure:
    - Password is present
    - At least 8 characters
    - At most 128 characters
    - Character-class policy (see ``meets_character_policy``)

    Args:
        password: Password string to validate, or None

    Returns:
        PasswordResponse with VALID or INVALID status and the rule description.
        Unexpected failures are reported as an ERROR response instead of raising.

    Examples:
        >>> validate_password("Abc123!@").status
        <PasswordResponseStatus.VALID: 'VALID'>
        >>> validate_password("short").message
        'Password must be at least 8 characters long'

    """
    logger.debug(f"Validating password: {'***' if password is not None else 'null'}")

    try:
        rule = _check_password(password)
    except Exception:
        logger.exception("Error during password validation")
        return build_password_response(VALIDATION_ERROR_MESSAGE, None, PasswordResponseStatus.ERROR)

    if rule is PasswordRule.PASSWORD_IS_VALID:
        logger.info("Password validation successful")
        return build_password_response(rule.description, password, PasswordResponseStatus.VALID)

    return build_password_response(rule.description, password, PasswordResponseStatus.INVALID)
