"""Exceptions raised by Social Feed Monitor."""

from typing import Any


class SFMError(Exception):
    """Base class; details carries structured context for logging."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(SFMError):
    """Settings from the environment or .env are invalid."""


class APIError(SFMError):
    """The proxy answered with a non-success status."""

    def __init__(self, status_code: int, message: str, response_text: str | None = None) -> None:
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
        self.response_text = response_text


class ValidationError(SFMError):
    """A user-supplied value is invalid."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class CacheError(SFMError):
    """The on-disk cache cannot be used."""


class ExportError(SFMError):
    """Results cannot be written in the requested format."""

    def __init__(self, format: str, message: str) -> None:
        super().__init__(message, {"format": format})
        self.format = format


class PostGenerationError(SFMError):
    """The language model did not produce posts."""

    def __init__(self, message: str, keywords: list[str] | None = None) -> None:
        super().__init__(message, {"keywords": keywords or []})
        self.keywords = keywords or []


class FeedServiceError(SFMError):
    """The feed could not be fetched from the proxy."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
