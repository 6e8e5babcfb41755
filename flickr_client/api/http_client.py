"""
Async HTTP client for the Flickr REST API.

Adds the API key, session token and signature to each call. ``call`` returns
the raw XML body; ``request`` also loads the payload into a Parsable type.
"""

import asyncio
from typing import Any

import httpx
import structlog

from flickr_client.config import FlickrConfig
from flickr_client.crypto.signature import sign_parameters
from flickr_client.exceptions import ApiKeyMissingError, NetworkError, SignatureUnavailableError
from flickr_client.parsing.response import P, parse_response, parse_text_response

logger = structlog.get_logger(__name__)

SENSITIVE_KEYS = frozenset(
    {
        "api_sig",
        "auth_token",
        "frob",
        "mini_token",
    }
)


def sanitize_for_log(data: dict[str, Any]) -> dict[str, Any]:
    """
    Remove sensitive fields from a dict before logging.

    Args:
        data: Request parameters that may contain tokens or signatures.

    Returns:
        Copy with sensitive values replaced by "***".
    """
    return {key: "***" if key in SENSITIVE_KEYS else value for key, value in data.items()}


class AsyncHttpClient:
    """Async HTTP client for the Flickr REST API."""

    def __init__(
        self,
        config: FlickrConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            config: Client configuration.
            transport: Optional transport for testing (mock transport).
        """
        self._config = config
        self._transport = transport

        self._auth_token: str | None = None
        self._client: httpx.AsyncClient | None = None

        self._client_lock = asyncio.Lock()
        self._token_lock = asyncio.Lock()

    async def __aenter__(self) -> "AsyncHttpClient":
        await self._ensure_client()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._close()

    @property
    def config(self) -> FlickrConfig:
        return self._config

    @property
    def can_sign(self) -> bool:
        """Check if a shared secret is configured."""
        return self._config.credentials.can_sign

    @property
    def auth_token(self) -> str | None:
        """Token sent with signed calls, if any."""
        return self._auth_token

    @property
    def is_authenticated(self) -> bool:
        """Check if we have an auth token."""
        return bool(self._auth_token)

    async def set_auth_token(self, token: str | None) -> None:
        """
        Replace the session token.

        Note:
            Called by AuthService after a successful token exchange. Other
            callers may use it to restore a token stored from an earlier session.
        """
        async with self._token_lock:
            self._auth_token = token or None

    async def _ensure_client(self) -> httpx.AsyncClient:
        async with self._client_lock:
            if self._client is None:
                self._client = httpx.AsyncClient(
                    timeout=self._config.timeout,
                    transport=self._transport,
                    headers={"User-Agent": self._config.user_agent},
                )
        return self._client

    async def _close(self) -> None:
        async with self._client_lock:
            if self._client is None:
                logger.debug("Client not open.")
                return
            await self._client.aclose()
            self._client = None

    def build_parameters(
        self,
        method: str,
        params: dict[str, str] | None = None,
        *,
        signed: bool = False,
    ) -> dict[str, str]:
        """
        Build the full parameter set for a call.

        Signed calls carry the session token (unless ``params`` already names
        one) and an ``api_sig`` computed over all parameters sorted by name.

        Raises:
            ApiKeyMissingError: If no API key is configured.
            SignatureUnavailableError: If ``signed`` and no shared secret is configured.
        """
        credentials = self._config.credentials
        if not credentials.api_key:
            raise ApiKeyMissingError()
        if signed and not credentials.can_sign:
            raise SignatureUnavailableError()

        args = {"method": method, "api_key": credentials.api_key, **(params or {})}
        if signed:
            token = self._auth_token
            if token and "auth_token" not in args:
                args["auth_token"] = token
            args["api_sig"] = sign_parameters(credentials.shared_secret, sorted(args.items()))
        return args

    async def call(
        self,
        method: str,
        params: dict[str, str] | None = None,
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Invoke an API method.

        Args:
            method: Flickr method name (e.g., "flickr.auth.getToken").
            params: Call-specific parameters.
            signed: Whether to sign the call.

        Returns:
            Raw XML response body.

        Raises:
            ApiKeyMissingError: If no API key is configured.
            SignatureUnavailableError: If signing is requested without a shared secret.
            NetworkError: If the request fails or the HTTP status is not 2xx.
        """
        args = self.build_parameters(method, params, signed=signed)

        if self._client is None:
            msg = "HTTP client not initialized. Use 'async with' first."
            raise RuntimeError(msg)

        logger.debug("Calling API", params=sanitize_for_log(args))
        try:
            response = await self._client.post(self._config.api_url, data=args)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = "Unexpected HTTP status"
            raise NetworkError(msg, status=e.response.status_code, method=method) from e
        except httpx.HTTPError as e:
            msg = "Request failed"
            raise NetworkError(msg, method=method, error_type=type(e).__name__) from e

        return response.content

    async def request(
        self,
        method: str,
        parsable: type[P],
        params: dict[str, str] | None = None,
        *,
        signed: bool = False,
    ) -> P:
        """
        Invoke an API method and load its payload.

        Args:
            method: Flickr method name.
            parsable: Type of the expected payload.
            params: Call-specific parameters.
            signed: Whether to sign the call.

        Returns:
            The loaded payload.

        Raises:
            APIError: If the API reports a failure.
            ParsingError: If the payload cannot be parsed.
        """
        data = await self.call(method, params, signed=signed)
        return parse_response(
            data,
            parsable,
            strict=self._config.strict_parsing,
            method=method,
        )

    async def request_text(
        self,
        method: str,
        tag: str,
        params: dict[str, str] | None = None,
        *,
        signed: bool = False,
    ) -> str:
        """Invoke an API method whose payload is a single text element."""
        data = await self.call(method, params, signed=signed)
        return parse_text_response(data, tag, method=method)
