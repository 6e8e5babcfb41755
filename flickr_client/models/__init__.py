"""
Domain models for the Flickr API.

These are immutable (frozen) dataclasses, each able to load itself from a
response via ``load(cursor)``.
"""

from flickr_client.models.auth import Auth, AuthLevel, AuthUser, Credentials
from flickr_client.models.photos import (
    PhotoCount,
    PhotoCountCollection,
    Photoset,
    PhotosetCollection,
)

__all__ = [
    # Auth
    "Auth",
    "AuthLevel",
    "AuthUser",
    "Credentials",
    # Photos
    "Photoset",
    "PhotosetCollection",
    "PhotoCount",
    "PhotoCountCollection",
]
