"""Data models for the alias registry."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Optional


@dataclass(frozen=True)
class AliasRecord:
    """A short code mapped to an original URL until it expires."""

    id: str
    original_url: str
    code: str
    validity_minutes: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Check whether the alias is past its expiry at ``now``."""
        return now > self.expires_at

    def time_remaining(self, now: datetime) -> timedelta:
        """Time left before expiry, never negative."""
        return max(self.expires_at - now, timedelta(0))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "original_url": self.original_url,
            "code": self.code,
            "validity_minutes": self.validity_minutes,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
        }


@dataclass(frozen=True)
class CreationRequest:
    """A request to create one alias. Not stored."""

    original_url: Any
    validity_minutes: Optional[Any] = None
    custom_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CreationRequest":
        """Create from a form payload, accepting snake_case or camelCase keys."""
        return cls(
            original_url=data.get("original_url", data.get("originalUrl", "")),
            validity_minutes=data.get("validity_minutes", data.get("validityMinutes")),
            custom_code=data.get(
                "custom_code",
                data.get("customShortCode", data.get("customCode")),
            ),
        )
