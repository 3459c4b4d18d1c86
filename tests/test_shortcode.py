"""Tests for short code generation."""

import random

import pytest

from linkalias.errors import CodeSpaceExhausted
from linkalias.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_random(self):
        """Test random code generation."""
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate_random()
        assert len(code) == 6
        assert generator.is_valid_format(code)

    def test_generate_random_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=6)

        code = generator.generate_random(length=10)
        assert len(code) == 10
        assert generator.is_valid_format(code)

    def test_seeded_generators_agree(self):
        """Same seed, same codes."""
        first = ShortCodeGenerator(rng=random.Random(7))
        second = ShortCodeGenerator(rng=random.Random(7))

        assert [first.generate_random() for _ in range(5)] == [second.generate_random() for _ in range(5)]

    def test_generate_unique_skips_taken(self):
        """Taken candidates are redrawn."""
        generator = ShortCodeGenerator(rng=random.Random(42))
        taken = {ShortCodeGenerator(rng=random.Random(42)).generate_random()}

        code = generator.generate_unique(lambda c: c in taken, max_attempts=10)
        assert code not in taken

    def test_generate_unique_gives_up(self):
        """An always-taken space raises after the retry bound."""
        attempts = []

        def is_taken(code):
            attempts.append(code)
            return True

        generator = ShortCodeGenerator()
        with pytest.raises(CodeSpaceExhausted, match="3 attempts"):
            generator.generate_unique(is_taken, max_attempts=3)

        assert len(attempts) == 3

    def test_capacity(self):
        """Capacity is 62 to the power of the length."""
        assert ShortCodeGenerator(default_length=6).capacity() == 62 ** 6
        assert ShortCodeGenerator().capacity(length=2) == 62 ** 2

    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortCodeGenerator.is_valid_format("abc123")
        assert ShortCodeGenerator.is_valid_format("ABCxyz")

        # Invalid formats
        assert not ShortCodeGenerator.is_valid_format("")
        assert not ShortCodeGenerator.is_valid_format("abc 123")
        assert not ShortCodeGenerator.is_valid_format("test-code")
        assert not ShortCodeGenerator.is_valid_format("abc@123")
