"""Tests for parsing AI validator answers."""

import pytest

from src.features.ai.parser import create_password_response, parse_status
from src.shared.schemas.password import PasswordResponseStatus


class TestCreatePasswordResponse:
    """Tests for create_password_response()"""

    def test_valid_answer(self):
        response = create_password_response("valid;Nice password", "Abc123!@")
        assert response.status == PasswordResponseStatus.VALID
        assert response.message == "Nice password"
        assert response.password == "Abc123!@"

    def test_invalid_answer(self):
        response = create_password_response("invalid;too short", "abc")
        assert response.status == PasswordResponseStatus.INVALID
        assert response.message == "too short"
        assert response.password == "abc"

    def test_status_is_case_insensitive_and_trimmed(self):
        response = create_password_response("  VALID ;  Awesome password, bro!  ", "pw")
        assert response.status == PasswordResponseStatus.VALID
        assert response.message == "Awesome password, bro!"

    def test_status_matched_by_prefix(self):
        """Status tokens only need to start with valid/invalid."""
        assert create_password_response("VALID!!;yes", None).status == PasswordResponseStatus.VALID
        assert create_password_response("Invalid password;no", None).status == PasswordResponseStatus.INVALID

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_answer_is_error(self, raw):
        response = create_password_response(raw, "pw")
        assert response.status == PasswordResponseStatus.ERROR
        assert response.message == "Invalid response format"
        assert response.password == "pw"

    @pytest.mark.parametrize("raw", ["weird", "valid;", "valid;;"])
    def test_missing_message_is_error(self, raw):
        response = create_password_response(raw, None)
        assert response.status == PasswordResponseStatus.ERROR
        assert response.message == "Response must contain at least status and message"

    def test_unknown_status_is_error(self):
        response = create_password_response("banana;whatever", "pw")
        assert response.status == PasswordResponseStatus.ERROR
        assert response.message == "Invalid status format: banana"
        assert response.password == "pw"

    def test_extra_segments_are_ignored(self):
        response = create_password_response("invalid;no digits;no symbols", None)
        assert response.status == PasswordResponseStatus.INVALID
        assert response.message == "no digits"

    def test_password_comes_from_caller(self):
        """The model's echo of the password is never used."""
        response = create_password_response("valid;Str0ng!Pass is great", "Abc123!@")
        assert response.password == "Abc123!@"


class TestParseStatus:
    """Tests for parse_status()"""

    def test_known_tokens(self):
        assert parse_status("valid") == PasswordResponseStatus.VALID
        assert parse_status("invalid") == PasswordResponseStatus.INVALID

    def test_unknown_token(self):
        assert parse_status("error") is None
        assert parse_status("") is None
