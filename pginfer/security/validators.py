# pginfer/security/validators.py

from pydantic import BaseModel, Field, field_validator


class URLValidator(BaseModel):
    """Validator for GraphQL endpoint URLs."""
    url: str = Field(..., min_length=1)

    @field_validator('url')
    def validate_scheme(cls, v):
        v = v.strip()
        if not v.startswith('https://') and not v.startswith('http://'):
            raise ValueError("URL must use HTTP or HTTPS protocol")
        return v


class HeaderValueValidator(BaseModel):
    """Validator for values sent as HTTP headers (Authorization, extras)."""
    value: str = Field(..., max_length=8192)

    @field_validator('value')
    def reject_line_breaks(cls, v):
        if '\r' in v or '\n' in v or '\x00' in v:
            raise ValueError("Header values must not contain line breaks or null bytes")
        return v


def validate_url(url: str) -> str:
    """Validate URL format.

    Args:
        url: URL to validate

    Returns:
        Validated URL (surrounding whitespace removed)

    Raises:
        ValueError: If URL is invalid
    """
    return URLValidator(url=url).url


def validate_header_value(value: str) -> str:
    """Validate a header value.

    Raises:
        ValueError: If the value could split the header block
    """
    return HeaderValueValidator(value=value).value
