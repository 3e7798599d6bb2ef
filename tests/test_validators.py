# tests/test_validators.py

import pytest
from pydantic import ValidationError
from pginfer.security.validators import (
    validate_url,
    validate_header_value,
    URLValidator,
    HeaderValueValidator,
)


class TestURLValidator:
    """Test endpoint URL validation."""

    def test_valid_urls(self):
        """Test that valid URLs pass validation."""
        valid_urls = [
            "http://localhost:5000/graphql",
            "https://api.example.com/graphql",
            "http://127.0.0.1:3000/graphql",
        ]

        for url in valid_urls:
            assert validate_url(url) == url

    def test_whitespace_stripped(self):
        """Test surrounding whitespace is removed."""
        assert validate_url("  https://api.example.com/graphql\n") == "https://api.example.com/graphql"

    def test_invalid_scheme(self):
        """Test that non-HTTP schemes fail validation."""
        for url in ("ftp://example.com", "ws://example.com/graphql", "example.com/graphql"):
            with pytest.raises(ValueError):
                validate_url(url)

    def test_empty_url(self):
        """Test that empty URL fails validation."""
        with pytest.raises(ValidationError):
            URLValidator(url="")


class TestHeaderValueValidator:
    """Test header value validation."""

    def test_valid_value(self):
        """Test that ordinary header values pass."""
        assert validate_header_value("Bearer abc.def.ghi") == "Bearer abc.def.ghi"

    def test_line_breaks_rejected(self):
        """Test that CR, LF and NUL are rejected."""
        for value in ("Bearer x\r\nX-Evil: 1", "a\nb", "a\x00b"):
            with pytest.raises(ValueError):
                validate_header_value(value)

    def test_too_long(self):
        """Test that overlong values fail validation."""
        with pytest.raises(ValidationError):
            HeaderValueValidator(value="a" * 8193)
