"""Validation utilities for the alias registry."""

import re
from urllib.parse import urlparse
from datetime import datetime, timedelta
from typing import Any, Optional, Tuple


def is_valid_url(url: Any) -> Tuple[bool, str]:
    """Validate an absolute URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if url is None or (isinstance(url, str) and not url.strip()):
        return False, "Original URL is required"

    if not isinstance(url, str):
        return False, "Please enter a valid URL"

    try:
        result = urlparse(url.strip())

        if not result.scheme:
            return False, "Please enter a valid URL"

        # Check if a host exists
        if not result.netloc or not result.hostname:
            return False, "Please enter a valid URL"

        # Raises ValueError on a non-numeric or out-of-range port
        result.port

        if any(c.isspace() for c in result.netloc):
            return False, "Please enter a valid URL"

        return True, ""

    except ValueError:
        return False, "Please enter a valid URL"


def is_valid_validity(minutes: Any, now: Optional[datetime] = None) -> Tuple[bool, str]:
    """Validate a validity period given in minutes.

    Args:
        minutes: Candidate validity
        now: When given, the expiry derived from it must be representable

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int) or minutes < 1:
        return False, "Validity must be a positive integer"

    if now is not None:
        try:
            now + timedelta(minutes=minutes)
        except OverflowError:
            return False, "Validity is too long"

    return True, ""


def is_valid_short_code(short_code: Any, min_length: int = 3, max_length: int = 20) -> Tuple[bool, str]:
    """Validate a custom short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    pattern = rf'^[A-Za-z0-9-]{{{min_length},{max_length}}}$'
    if not isinstance(short_code, str) or not re.fullmatch(pattern, short_code):
        return False, (
            f"Short code must be {min_length}-{max_length} characters long "
            "and contain only letters, numbers, and hyphens"
        )

    return True, ""
