"""
Flickr API client layer.

Provides async HTTP communication with the Flickr REST API.
"""

from flickr_client.api.http_client import AsyncHttpClient, sanitize_for_log

__all__ = ["AsyncHttpClient", "sanitize_for_log"]
