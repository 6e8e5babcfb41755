"""
Flickr REST response envelope handling.

Responses look like ``<rsp stat="ok">payload</rsp>`` or
``<rsp stat="fail"><err code="98" msg="Invalid auth token"/></rsp>``.
"""

from enum import IntEnum
from typing import NoReturn, TypeVar

import structlog

from flickr_client.exceptions import (
    APIError,
    AuthenticationError,
    MalformedResponseError,
    ServiceUnavailableError,
)
from flickr_client.parsing.converters import parse_int
from flickr_client.parsing.cursor import XmlCursor
from flickr_client.parsing.protocol import Parsable

logger = structlog.get_logger(__name__)

P = TypeVar("P", bound=Parsable)


class FlickrAPICode(IntEnum):
    """Flickr API error codes with dedicated handling."""

    INVALID_SIGNATURE = 96
    MISSING_SIGNATURE = 97
    LOGIN_FAILED = 98
    INSUFFICIENT_PERMISSIONS = 99
    INVALID_API_KEY = 100
    SERVICE_UNAVAILABLE = 105
    INVALID_FROB = 108


_AUTH_CODES = frozenset(
    {
        FlickrAPICode.INVALID_SIGNATURE,
        FlickrAPICode.MISSING_SIGNATURE,
        FlickrAPICode.LOGIN_FAILED,
        FlickrAPICode.INSUFFICIENT_PERMISSIONS,
        FlickrAPICode.INVALID_FROB,
    }
)


def parse_response(
    data: bytes | str,
    parsable: type[P],
    *,
    strict: bool = True,
    method: str | None = None,
) -> P:
    """
    Parse a response envelope and load its payload.

    Args:
        data: Raw response document.
        parsable: Type of the expected payload element.
        strict: Reject unknown attributes in the payload.
        method: API method name, for error reporting.

    Returns:
        The loaded payload.

    Raises:
        APIError: If the envelope reports a failure.
        MalformedResponseError: If the envelope is invalid or has no payload.
        ParsingError: If the payload cannot be loaded.
    """
    cursor = _open_envelope(data, strict=strict, method=method)

    result: P | None = None
    for _ in cursor.children():
        if result is None:
            result = parsable.load(cursor)

    if result is None:
        msg = "Response has no payload"
        raise MalformedResponseError(msg, method=method)
    return result


def parse_text_response(data: bytes | str, tag: str, *, method: str | None = None) -> str:
    """
    Parse a response envelope whose payload is a single text element.

    Args:
        data: Raw response document.
        tag: Name of the payload element (e.g. ``frob``).
        method: API method name, for error reporting.

    Returns:
        The payload text.
    """
    cursor = _open_envelope(data, strict=True, method=method)

    text: str | None = None
    for name in cursor.children():
        if name == tag and text is None:
            text = cursor.read_inner_text()

    if text is None:
        msg = f"Response has no <{tag}> element"
        raise MalformedResponseError(msg, method=method)
    return text


def _open_envelope(data: bytes | str, *, strict: bool, method: str | None) -> XmlCursor:
    """Return a cursor on ``<rsp>``, raising if the call failed."""
    cursor = XmlCursor(data, strict=strict)
    cursor.expect("rsp")

    stat = dict(cursor.attributes()).get("stat")
    if stat == "ok":
        return cursor
    if stat != "fail":
        msg = "Unknown response status"
        raise MalformedResponseError(msg, stat=stat, method=method)

    code, message = 0, "Unknown error"
    for name in cursor.children():
        if name == "err":
            attributes = dict(cursor.attributes())
            code = parse_int(attributes.get("code", "0"))
            message = attributes.get("msg", message)

    logger.debug("API call failed", method=method, code=code)
    _raise_api_error(code, message, method)


def _raise_api_error(code: int, message: str, method: str | None) -> NoReturn:
    if code == FlickrAPICode.SERVICE_UNAVAILABLE:
        raise ServiceUnavailableError(message, method=method)
    if code in _AUTH_CODES:
        raise AuthenticationError(message, code=code, method=method)

    raise APIError(message, code=code, method=method)
