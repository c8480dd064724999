"""Exceptions raised by mdlingo."""

from typing import Optional


class MdlingoError(Exception):
    """Base exception for all custom errors."""


class ProviderError(MdlingoError):
    """Raised when the translation provider fails a request."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Raised when the translation provider rejects a request as rate limited."""


class UnsupportedLanguageError(MdlingoError):
    """Raised when a requested target language cannot be translated to."""


class ConfigurationError(MdlingoError):
    """Raised when a configuration file cannot be read or parsed."""


def is_rate_limited(error: BaseException) -> bool:
    """Rate limits are signalled by type, by HTTP status or only by message."""

    if isinstance(error, RateLimitError):
        return True
    if getattr(error, "status_code", None) == 429 or getattr(error, "status", None) == 429:
        return True
    return "Too Many Requests" in str(error)
