"""Tests for short code generation."""

import string

import pytest
from shortener.shortcode import ShortCodeGenerator, make_random_string


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_random(self):
        """Test random code generation."""
        generator = ShortCodeGenerator()

        code = generator.generate_random()
        assert len(code) == 8
        assert generator.is_valid_format(code)

    def test_generate_random_custom_length(self):
        """Test random code with custom length."""
        generator = ShortCodeGenerator(default_length=8)

        code = generator.generate_random(length=12)
        assert len(code) == 12
        assert generator.is_valid_format(code)

    def test_codes_use_letters_only(self):
        """Generated codes never contain digits or punctuation."""
        generator = ShortCodeGenerator()

        for _ in range(200):
            code = generator.generate_random()
            assert set(code) <= set(string.ascii_letters)

    def test_codes_vary(self):
        """Consecutive codes are not all the same."""
        generator = ShortCodeGenerator()

        codes = {generator.generate_random() for _ in range(50)}
        assert len(codes) > 1

    def test_invalid_default_length(self):
        """Test non-positive length rejection."""
        with pytest.raises(ValueError):
            ShortCodeGenerator(default_length=0)

    def test_explicit_zero_length_rejected(self):
        """An explicit length of 0 is not replaced by the default."""
        generator = ShortCodeGenerator(default_length=8)

        with pytest.raises(ValueError):
            generator.generate_random(length=0)

    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortCodeGenerator.is_valid_format("abcDEFgh")
        assert ShortCodeGenerator.is_valid_format("Z")

        # Invalid formats
        assert not ShortCodeGenerator.is_valid_format("")
        assert not ShortCodeGenerator.is_valid_format("abc123")
        assert not ShortCodeGenerator.is_valid_format("abc-def")
        assert not ShortCodeGenerator.is_valid_format("abc def")

    def test_make_random_string(self):
        """Test module-level helper."""
        code = make_random_string(5)
        assert len(code) == 5
        assert ShortCodeGenerator.is_valid_format(code)
