"""Authentication-related API methods."""

from flickr_client.api.http_client import AsyncHttpClient
from flickr_client.models.auth import Auth


async def get_frob(http: AsyncHttpClient) -> str:
    """
    Get a frob to start desktop authentication.

    The call is signed when a shared secret is available.

    Args:
        http: Configured async HTTP client.

    Returns:
        The frob.
    """
    return await http.request_text("flickr.auth.getFrob", "frob", signed=http.can_sign)


async def get_token(http: AsyncHttpClient, frob: str) -> Auth:
    """
    Exchange an authorized frob for a token.

    Args:
        http: Configured async HTTP client.
        frob: Frob the user authorized.

    Returns:
        Auth with the token, its permissions and its user.
    """
    return await http.request("flickr.auth.getToken", Auth, {"frob": frob}, signed=True)


async def get_full_token(http: AsyncHttpClient, mini_token: str) -> Auth:
    """
    Exchange a mini token typed in by the user for a full token.

    Args:
        http: Configured async HTTP client.
        mini_token: Mini token, with or without hyphens.
    """
    return await http.request(
        "flickr.auth.getFullToken",
        Auth,
        {"mini_token": mini_token.replace("-", "")},
        signed=True,
    )


async def check_token(http: AsyncHttpClient, token: str) -> Auth:
    """Check that a token is still valid."""
    return await http.request("flickr.auth.checkToken", Auth, {"auth_token": token}, signed=True)
