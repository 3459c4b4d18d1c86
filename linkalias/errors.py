"""Error taxonomy for the alias registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class ErrorKind(str, Enum):
    """Validation failure kinds. All are recoverable by re-prompting the user."""

    REQUIRED_FIELD = "RequiredField"
    MALFORMED_URL = "MalformedUrl"
    INVALID_VALIDITY = "InvalidValidity"
    INVALID_CODE_FORMAT = "InvalidCodeFormat"
    CODE_ALREADY_IN_USE = "CodeAlreadyInUse"


@dataclass(frozen=True)
class ValidationError:
    """A single violation, attributable to one field of one request."""

    field: str
    kind: ErrorKind
    message: str
    index: Optional[int] = None

    @property
    def key(self) -> str:
        """Form-field key, suffixed with the batch position when known."""
        if self.index is None:
            return self.field
        return f"{self.field}_{self.index}"

    def with_index(self, index: int) -> "ValidationError":
        """Return a copy tagged with a batch position."""
        return ValidationError(self.field, self.kind, self.message, index)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "field": self.field,
            "kind": self.kind.value,
            "message": self.message,
            "index": self.index,
        }


class ValidationFailed(ValueError):
    """Raised by create/create_batch when one or more requests are invalid."""

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.key}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed: {summary}")

    def by_index(self) -> Dict[int, List[ValidationError]]:
        """Group errors by the position of the request that produced them."""
        grouped: Dict[int, List[ValidationError]] = {}
        for error in self.errors:
            grouped.setdefault(error.index if error.index is not None else 0, []).append(error)
        return grouped

    def as_field_map(self) -> Dict[str, str]:
        """Map form-field keys to messages, e.g. {"original_url_2": "..."}."""
        return {error.key: error.message for error in self.errors}


class AliasNotFound(LookupError):
    """Raised when a code is unknown or its alias has expired."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Short code not found: {code}")


class CodeSpaceExhausted(RuntimeError):
    """Raised when no free short code could be drawn within the retry bound."""
