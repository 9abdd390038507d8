"""Tests for CLI input validation."""

import pytest

from src.cli.utils.validation import clean_key_material, validate_created


class TestValidateCreated:
    def test_accepts_zero(self):
        assert validate_created(0) == 0

    def test_accepts_positive(self):
        assert validate_created(1610000000) == 1610000000

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            validate_created(-1)


class TestCleanKeyMaterial:
    def test_strips_whitespace(self):
        assert clean_key_material("  abc\n") == "abc"

    def test_blank_becomes_empty(self):
        assert clean_key_material("   ") == ""
