"""Input sanitization utilities."""
import re
from typing import Optional

from app.core.constants import MEMBER_TOKEN_LENGTH


# Maximum length constraints for security
MAX_MEMBER_ID_LENGTH = 64
MAX_DISPLAY_FIELD_LENGTH = 200

_TOKEN_RE = re.compile(r'^[0-9a-f]+$')


def sanitize_text(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Strips HTML tags and normalizes whitespace. Output is not HTML-escaped;
    the frontend escapes on render.

    Raises:
        ValueError: If text exceeds max_length or contains dangerous patterns
    """
    if not isinstance(text, str):
        raise ValueError("Input must be a string")

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    if strip_html:
        sanitized = re.sub(r'<[^>]*>', '', sanitized)

    # Malformed tags or encoded attacks that survived stripping
    if '<' in sanitized or '>' in sanitized:
        raise ValueError("Input contains invalid HTML-like patterns")

    sanitized = re.sub(r'\s+', ' ', sanitized)

    return sanitized


def sanitize_display_field(value: Optional[str]) -> Optional[str]:
    """Sanitize a name/hospital/major field; None passes through."""
    if value is None:
        return None
    return sanitize_text(value, max_length=MAX_DISPLAY_FIELD_LENGTH)


def sanitize_member_id(member_id: str) -> str:
    """Trim and bound a member id supplied by the admin."""
    sanitized = sanitize_text(member_id, max_length=MAX_MEMBER_ID_LENGTH)
    if not sanitized:
        raise ValueError("Member id cannot be empty")
    return sanitized


def is_valid_token_format(token: str) -> bool:
    """
    Cheap shape check for member tokens before touching the database.

    Tokens are lowercase hex of a fixed length; anything else can never
    resolve, so callers treat a malformed token as not found.
    """
    return (
        isinstance(token, str)
        and len(token) == MEMBER_TOKEN_LENGTH
        and bool(_TOKEN_RE.match(token))
    )
