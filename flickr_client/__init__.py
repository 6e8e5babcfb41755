"""
Flickr API Python Client.

An async client for the Flickr REST API with request signing and typed
response parsing.

Example:
    ```python
    from flickr_client import AuthLevel, FlickrClient, FlickrConfig

    config = FlickrConfig(api_key="key", shared_secret="secret")

    async with FlickrClient(config) as client:
        frob = await client.get_frob()
        print(client.calc_url(frob, AuthLevel.READ))

        # once the user has authorized the application
        auth = await client.get_token(frob)

        counts = await client.get_photo_counts(dates)
    ```
"""

from flickr_client.client import FlickrClient
from flickr_client.config import FlickrConfig
from flickr_client.exceptions import (
    APIError,
    ApiKeyMissingError,
    AuthenticationError,
    FlickrError,
    FormatError,
    MalformedResponseError,
    NetworkError,
    ParsingError,
    ServiceUnavailableError,
    SignatureUnavailableError,
    UnexpectedElementError,
    UnknownAttributeError,
)
from flickr_client.models.auth import Auth, AuthLevel, AuthUser, Credentials
from flickr_client.models.photos import (
    PhotoCount,
    PhotoCountCollection,
    Photoset,
    PhotosetCollection,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "FlickrClient",
    "FlickrConfig",
    # Models
    "Auth",
    "AuthLevel",
    "AuthUser",
    "Credentials",
    "Photoset",
    "PhotosetCollection",
    "PhotoCount",
    "PhotoCountCollection",
    # Exceptions
    "FlickrError",
    "SignatureUnavailableError",
    "ApiKeyMissingError",
    "ParsingError",
    "UnexpectedElementError",
    "UnknownAttributeError",
    "FormatError",
    "MalformedResponseError",
    "APIError",
    "AuthenticationError",
    "ServiceUnavailableError",
    "NetworkError",
]
