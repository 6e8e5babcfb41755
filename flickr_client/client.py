"""
Flickr client facade.

This is the main entry point for users of the library. It wires the HTTP
client, the authentication service and the API methods together.
"""

import asyncio
from collections.abc import Sequence
from datetime import datetime
from typing import Self

import httpx
import structlog

from flickr_client.api.endpoints.photos import (
    get_photo_counts,
    get_photoset_info,
    get_photoset_list,
)
from flickr_client.api.http_client import AsyncHttpClient
from flickr_client.config import FlickrConfig
from flickr_client.models.auth import Auth, AuthLevel
from flickr_client.models.photos import PhotoCountCollection, Photoset, PhotosetCollection
from flickr_client.services.auth_service import AuthService

logger = structlog.get_logger(__name__)


class FlickrClient:
    """
    Async client for the Flickr API.

    Example:
        ```python
        config = FlickrConfig(api_key="key", shared_secret="secret")

        async with FlickrClient(config) as client:
            frob = await client.get_frob()
            print(client.calc_url(frob, AuthLevel.READ))
            input("Press enter once the application is authorized")
            auth = await client.get_token(frob)

            for photoset in await client.get_photoset_list():
                print(photoset.title, photoset.number_of_photos)
        ```

    Args:
        config: Client configuration.
        transport: Optional httpx transport for testing (mock transport).
    """

    def __init__(
        self,
        config: FlickrConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

        self._http: AsyncHttpClient | None = None
        self._auth_service: AuthService | None = None

        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def __aenter__(self) -> Self:
        """Enter async context."""
        await self._ensure_initialized()
        return self

    async def __aexit__(
        self, exc_type: type | None, exc_val: BaseException | None, exc_tb: object
    ) -> None:
        """Exit async context."""
        await self.close()

    async def _ensure_initialized(self) -> None:
        async with self._init_lock:
            if self._initialized:
                return

            self._http = AsyncHttpClient(self._config, transport=self._transport)
            await self._http.__aenter__()
            self._auth_service = AuthService(self._http)

            self._initialized = True
            logger.debug("Client initialized")

    async def close(self) -> None:
        """Close the client and release resources."""
        async with self._init_lock:
            if self._http:
                await self._http.__aexit__(None, None, None)
                self._http = None

            self._auth_service = None
            self._initialized = False
            logger.debug("Client closed")

    @property
    def config(self) -> FlickrConfig:
        return self._config

    @property
    def auth_token(self) -> str | None:
        """Token sent with signed calls, if any."""
        return self._http.auth_token if self._http else None

    @property
    def is_authenticated(self) -> bool:
        """Check if a session token is set."""
        return self._http is not None and self._http.is_authenticated

    async def set_auth_token(self, token: str | None) -> None:
        """Restore a token saved from an earlier session."""
        await self._ensure_initialized()
        await self._require_http().set_auth_token(token)

    # Authentication

    async def get_frob(self) -> str:
        """Get a frob to start desktop authentication."""
        return await (await self._require_auth()).get_frob()

    def calc_url(self, frob: str, perms: AuthLevel | str) -> str:
        """Build the URL a desktop user must visit to authorize a frob."""
        return self._auth_or_standalone().calc_url(frob, perms)

    def calc_web_url(self, perms: AuthLevel | str) -> str:
        """Build the URL a web application user must visit."""
        return self._auth_or_standalone().calc_web_url(perms)

    def calc_mobile_url(self, perms: AuthLevel | str) -> str:
        """Build the URL a mobile web application user must visit."""
        return self._auth_or_standalone().calc_mobile_url(perms)

    async def get_token(self, frob: str) -> Auth:
        """Exchange an authorized frob for a token and make it the session token."""
        return await (await self._require_auth()).get_token(frob)

    async def get_full_token(self, mini_token: str) -> Auth:
        """Exchange a mini token for a full token and make it the session token."""
        return await (await self._require_auth()).get_full_token(mini_token)

    async def check_token(self, token: str) -> Auth:
        """Check a token without changing the session token."""
        return await (await self._require_auth()).check_token(token)

    async def logout(self) -> None:
        """Forget the session token."""
        if self._auth_service:
            await self._auth_service.logout()

    # Photos

    async def get_photoset_list(
        self,
        user_id: str | None = None,
        *,
        page: int | None = None,
        per_page: int | None = None,
    ) -> PhotosetCollection:
        """Get the photosets of a user, or of the authenticated user."""
        await self._ensure_initialized()
        return await get_photoset_list(
            self._require_http(), user_id, page=page, per_page=per_page
        )

    async def get_photoset_info(self, photoset_id: str) -> Photoset:
        """Get the details of a single photoset."""
        await self._ensure_initialized()
        return await get_photoset_info(self._require_http(), photoset_id)

    async def get_photo_counts(
        self,
        dates: Sequence[datetime] = (),
        *,
        taken_dates: Sequence[datetime] = (),
    ) -> PhotoCountCollection:
        """Count the authenticated user's photos between consecutive dates."""
        await self._ensure_initialized()
        return await get_photo_counts(self._require_http(), dates, taken_dates=taken_dates)

    async def _require_auth(self) -> AuthService:
        await self._ensure_initialized()
        if self._auth_service is None:
            raise RuntimeError("Client not initialized")
        return self._auth_service

    def _require_http(self) -> AsyncHttpClient:
        if self._http is None:
            raise RuntimeError("Client not initialized")
        return self._http

    def _auth_or_standalone(self) -> AuthService:
        # URL building needs no connection, so it also works before initialization.
        if self._auth_service is not None:
            return self._auth_service
        return AuthService(AsyncHttpClient(self._config))
