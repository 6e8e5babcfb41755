"""
Flickr client exception hierarchy.

All exceptions inherit from FlickrError for easy catching.
"""

from typing import Any


class FlickrError(Exception):
    """Base exception for all flickr_client errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx})"
        return self.message


class SignatureUnavailableError(FlickrError):
    """A signed operation was attempted without a shared secret."""

    def __init__(self, message: str = "Shared secret required for signed calls") -> None:
        super().__init__(message)


class ApiKeyMissingError(FlickrError):
    """An operation requires an API key that was never configured."""

    def __init__(self, message: str = "API key required") -> None:
        super().__init__(message)


class ParsingError(FlickrError):
    """A response could not be parsed into the expected object."""


class UnexpectedElementError(ParsingError):
    """The cursor was positioned on a different element than expected."""

    def __init__(self, got: str | None, expected: str) -> None:
        super().__init__(
            f"Unknown element name '{got}' found in Flickr response", got=got, expected=expected
        )
        self.got = got
        self.expected = expected


class UnknownAttributeError(ParsingError):
    """An attribute outside the recognized wire vocabulary was found."""

    def __init__(self, name: str, value: str, *, element: str | None = None) -> None:
        super().__init__(f"Unknown attribute value: {name}={value}", element=element)
        self.name = name
        self.value = value
        self.element = element


class FormatError(ParsingError):
    """A wire value did not match its expected format."""

    def __init__(self, value: str, *, expected: str) -> None:
        super().__init__(f"Invalid value {value!r}", expected=expected)
        self.value = value
        self.expected = expected


class MalformedResponseError(ParsingError):
    """The response is not well-formed XML or lacks a payload."""


class APIError(FlickrError):
    """The Flickr API answered with a failure envelope."""

    def __init__(self, message: str, *, code: int, method: str | None = None) -> None:
        super().__init__(message, code=code, method=method)
        self.code = code
        self.method = method


class AuthenticationError(APIError):
    """Signature, token, frob or permission rejected by the API."""


class ServiceUnavailableError(APIError):
    """The API is temporarily unavailable."""

    def __init__(self, message: str, *, method: str | None = None) -> None:
        super().__init__(message, code=105, method=method)


class NetworkError(FlickrError):
    """Network-level error (connection failed, timeout, bad HTTP status)."""
