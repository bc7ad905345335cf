"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes for URLs."""

    # Letters only (case-sensitive), 52 symbols
    ALPHABET = string.ascii_letters  # a-zA-Z

    def __init__(self, default_length: int = 8):
        """Initialize short code generator.

        Args:
            default_length: Default length for generated codes
        """
        if default_length < 1:
            raise ValueError("Short code length must be positive")
        self.default_length = default_length

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Uniqueness is not guaranteed; callers check the code against
        existing mappings.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        if length is None:
            length = self.default_length
        if length < 1:
            raise ValueError("Short code length must be positive")
        return ''.join(random.choices(self.ALPHABET, k=length))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code is non-empty and made of alphabet letters only."""
        return bool(code) and all(c in ShortCodeGenerator.ALPHABET for c in code)


def make_random_string(n: int) -> str:
    """Return a random string of ``n`` letters."""
    return ShortCodeGenerator(default_length=n).generate_random()
