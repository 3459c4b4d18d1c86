"""Short code generation utilities."""

import random
import string
from typing import Callable, Optional

from .errors import CodeSpaceExhausted


class ShortCodeGenerator:
    """Generate short codes for aliases."""

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, default_length: int = 6, rng: Optional[random.Random] = None):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
            rng: Optional random source (seed one for deterministic codes)
        """
        self.default_length = default_length
        self.rng = rng or random.Random()

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code, each character drawn uniformly
        """
        length = length or self.default_length
        return ''.join(self.rng.choices(self.BASE62_CHARS, k=length))

    def generate_unique(
        self,
        is_taken: Callable[[str], bool],
        max_attempts: int,
        length: Optional[int] = None,
    ) -> str:
        """Draw random codes until one is free.

        Args:
            is_taken: Predicate telling whether a candidate is occupied
            max_attempts: Number of draws before giving up
            length: Length of the code (uses default if not specified)

        Returns:
            A code for which ``is_taken`` is False

        Raises:
            CodeSpaceExhausted: If every draw collided
        """
        for _ in range(max_attempts):
            code = self.generate_random(length)
            if not is_taken(code):
                return code

        raise CodeSpaceExhausted(
            f"Unable to generate a free short code after {max_attempts} attempts"
        )

    def capacity(self, length: Optional[int] = None) -> int:
        """Number of distinct codes of the given length."""
        return len(self.BASE62_CHARS) ** (length or self.default_length)

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code only uses base62 characters."""
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
