"""
Business logic services for the Flickr client.
"""

from flickr_client.services.auth_service import AuthService

__all__ = [
    "AuthService",
]
