"""Display helpers for short URLs."""

from datetime import timedelta


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Origin supplied by the caller (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_code}"
    return f"{base}/{short_code}"


def format_time_remaining(remaining: timedelta) -> str:
    """Render time left before expiry the way the statistics table shows it.

    Uses the largest whole unit: "2 days", "1 hour", "15 minutes".
    Anything at or below zero is "Expired".
    """
    if remaining <= timedelta(0):
        return "Expired"

    minutes = int(remaining.total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} day{'s' if days > 1 else ''}"
    if hours > 0:
        return f"{hours} hour{'s' if hours > 1 else ''}"
    return f"{minutes} minute{'s' if minutes != 1 else ''}"
