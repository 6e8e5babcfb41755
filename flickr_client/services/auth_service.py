"""
Authentication service for Flickr.

Handles the desktop frob flow, the web and mobile redirect flows and token
checks.
"""

import asyncio
from urllib.parse import urlencode, urlsplit, urlunsplit

import structlog

from flickr_client.api.endpoints.auth import (
    check_token,
    get_frob,
    get_full_token,
    get_token,
)
from flickr_client.api.http_client import AsyncHttpClient
from flickr_client.crypto.signature import sign
from flickr_client.exceptions import ApiKeyMissingError, SignatureUnavailableError
from flickr_client.models.auth import Auth, AuthLevel, Credentials

logger = structlog.get_logger(__name__)


def mobile_auth_url(auth_url: str) -> str:
    """Swap the ``www.`` host of an auth URL for the mobile ``m.`` host."""
    parts = urlsplit(auth_url)
    if not parts.netloc.startswith("www."):
        return auth_url
    return urlunsplit(parts._replace(netloc="m." + parts.netloc.removeprefix("www.")))


class AuthService:
    """
    Handles Flickr authentication.

    Desktop flow::

        frob = await auth.get_frob()
        url = auth.calc_url(frob, AuthLevel.READ)
        # send the user to url, wait until they have authorized the app
        result = await auth.get_token(frob)

    The token lives in the AsyncHttpClient. ``get_token`` and
    ``get_full_token`` replace it and also return it in the Auth result so
    callers can persist it. ``check_token`` never touches it.

    Concurrency:
    - Token-replacing calls run under an internal lock, one at a time
    - The service is meant for a single logical session; concurrent flows
      overwrite each other's token
    """

    def __init__(self, http_client: AsyncHttpClient) -> None:
        """
        Args:
            http_client: HTTP client for API requests.
        """
        self._http = http_client
        self._lock = asyncio.Lock()
        self._auth: Auth | None = None

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is set."""
        return self._http.is_authenticated

    @property
    def auth(self) -> Auth | None:
        """Result of the last successful token exchange."""
        return self._auth

    @property
    def _credentials(self) -> Credentials:
        return self._http.config.credentials

    async def get_frob(self) -> str:
        """
        Get a frob to start desktop authentication.

        Returns:
            The frob, to pass to ``calc_url`` and then ``get_token``.
        """
        logger.debug("Requesting frob")
        return await get_frob(self._http)

    def calc_url(self, frob: str, perms: AuthLevel | str) -> str:
        """
        Build the URL a desktop user must visit to authorize a frob.

        Args:
            frob: Frob from ``get_frob``.
            perms: Permission level requested.

        Returns:
            Auth URL carrying api_key, perms, frob and api_sig.

        Raises:
            SignatureUnavailableError: If no shared secret is configured.
        """
        credentials = self._credentials
        if not credentials.can_sign:
            raise SignatureUnavailableError()

        level = AuthLevel.parse(perms)
        api_key = credentials.api_key or ""
        signature = sign(
            credentials.shared_secret,
            api_key,
            [("frob", frob), ("perms", level.value)],
        )
        query = urlencode(
            [("api_key", api_key), ("perms", level.value), ("frob", frob), ("api_sig", signature)]
        )
        return f"{self._http.config.auth_url}?{query}"

    def calc_web_url(self, perms: AuthLevel | str) -> str:
        """
        Build the URL a web application user must visit to authorize it.

        Raises:
            ApiKeyMissingError: If no API key is configured.
            SignatureUnavailableError: If no shared secret is configured.
        """
        return self._calc_redirect_url(self._http.config.auth_url, perms)

    def calc_mobile_url(self, perms: AuthLevel | str) -> str:
        """
        Build the mobile-site URL a user must visit to authorize the application.

        Raises:
            ApiKeyMissingError: If no API key is configured.
            SignatureUnavailableError: If no shared secret is configured.
        """
        return self._calc_redirect_url(mobile_auth_url(self._http.config.auth_url), perms)

    async def get_token(self, frob: str) -> Auth:
        """
        Exchange an authorized frob for a token and make it the session token.

        Args:
            frob: Frob the user authorized.

        Returns:
            Auth with the token, its permissions and its user.

        Raises:
            SignatureUnavailableError: If no shared secret is configured.
            AuthenticationError: If the frob is invalid or was not authorized.
        """
        self._require_signing()

        async with self._lock:
            logger.info("Exchanging frob for token")
            auth = await get_token(self._http, frob)
            await self._store(auth)
            return auth

    async def get_full_token(self, mini_token: str) -> Auth:
        """
        Exchange a mini token for a full token and make it the session token.

        Args:
            mini_token: Mini token as shown to the user, hyphens allowed.

        Raises:
            SignatureUnavailableError: If no shared secret is configured.
            AuthenticationError: If the mini token is rejected.
        """
        self._require_signing()

        async with self._lock:
            logger.info("Exchanging mini token for token")
            auth = await get_full_token(self._http, mini_token)
            await self._store(auth)
            return auth

    async def check_token(self, token: str) -> Auth:
        """
        Check a token without changing the session token.

        Raises:
            SignatureUnavailableError: If no shared secret is configured.
            AuthenticationError: If the token is invalid.
        """
        self._require_signing()

        logger.debug("Checking token")
        return await check_token(self._http, token)

    async def logout(self) -> None:
        """Forget the session token."""
        async with self._lock:
            await self._http.set_auth_token(None)
            self._auth = None
            logger.info("Session token cleared")

    def _calc_redirect_url(self, auth_url: str, perms: AuthLevel | str) -> str:
        credentials = self._credentials
        if not credentials.api_key:
            raise ApiKeyMissingError()
        if not credentials.can_sign:
            raise SignatureUnavailableError()

        level = AuthLevel.parse(perms)
        signature = sign(credentials.shared_secret, credentials.api_key, [("perms", level.value)])
        query = urlencode(
            [("api_key", credentials.api_key), ("perms", level.value), ("api_sig", signature)]
        )
        return f"{auth_url}?{query}"

    def _require_signing(self) -> None:
        if not self._credentials.can_sign:
            raise SignatureUnavailableError()

    async def _store(self, auth: Auth) -> None:
        await self._http.set_auth_token(auth.token)
        self._auth = auth
        logger.info(
            "Authentication successful",
            perms=auth.perms.value,
            user_id=auth.user.user_id,
        )
