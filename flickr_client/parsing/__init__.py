"""
Response parsing for the Flickr API.

This module provides:
- A forward-only XML cursor over streamed responses
- The Parsable protocol every response type implements
- Wire value converters (dates, integers, booleans)
- Response envelope handling
"""

from flickr_client.parsing.converters import (
    alternate_date_to_date,
    date_to_alternate_format,
    date_to_unix_timestamp,
    parse_bool,
    parse_date,
    parse_int,
    unix_timestamp_to_date,
)
from flickr_client.parsing.cursor import XmlCursor, XmlEvent
from flickr_client.parsing.protocol import Parsable
from flickr_client.parsing.response import FlickrAPICode, parse_response, parse_text_response

__all__ = [
    "XmlCursor",
    "XmlEvent",
    "Parsable",
    "FlickrAPICode",
    "parse_response",
    "parse_text_response",
    "parse_bool",
    "parse_date",
    "parse_int",
    "unix_timestamp_to_date",
    "alternate_date_to_date",
    "date_to_unix_timestamp",
    "date_to_alternate_format",
]
