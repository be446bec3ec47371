"""Unit tests for input sanitization."""
import pytest

from app.core.sanitization import (
    is_valid_token_format,
    sanitize_display_field,
    sanitize_member_id,
    sanitize_text,
)
from app.core.security import generate_member_token


@pytest.mark.unit
class TestSanitizeText:

    def test_strips_tags_and_whitespace(self):
        assert sanitize_text("  <b>Ada</b>   Lovelace ") == "Ada Lovelace"

    def test_rejects_leftover_angle_brackets(self):
        with pytest.raises(ValueError):
            sanitize_text("a < b")

    def test_max_length(self):
        with pytest.raises(ValueError, match="maximum length"):
            sanitize_text("x" * 11, max_length=10)


@pytest.mark.unit
class TestFieldHelpers:

    def test_display_field_none_passes_through(self):
        assert sanitize_display_field(None) is None

    def test_member_id_cannot_be_blank(self):
        with pytest.raises(ValueError, match="empty"):
            sanitize_member_id("   ")

    def test_token_format(self):
        assert is_valid_token_format(generate_member_token())
        assert not is_valid_token_format("")
        assert not is_valid_token_format("ABCDEF" * 6)
        assert not is_valid_token_format("../../etc/passwd")
        assert not is_valid_token_format(generate_member_token() + "0")
