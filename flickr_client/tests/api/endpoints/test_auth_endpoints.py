from unittest.mock import AsyncMock, Mock

import pytest

from flickr_client.api.endpoints.auth import check_token, get_frob, get_full_token, get_token
from flickr_client.models.auth import Auth
from flickr_client.tests.utils.responses import AUTH_TOKEN, FROB


@pytest.fixture
def mock_http() -> Mock:
    http = Mock()
    http.can_sign = True
    http.request = AsyncMock(return_value=Auth(token=AUTH_TOKEN))
    http.request_text = AsyncMock(return_value=FROB)
    return http


@pytest.mark.asyncio
async def test_get_frob_calls_correct_method(mock_http: Mock) -> None:
    result = await get_frob(mock_http)

    mock_http.request_text.assert_called_once_with("flickr.auth.getFrob", "frob", signed=True)
    assert result == FROB


@pytest.mark.asyncio
async def test_get_frob_is_unsigned_without_secret(mock_http: Mock) -> None:
    mock_http.can_sign = False

    await get_frob(mock_http)

    assert mock_http.request_text.call_args.kwargs["signed"] is False


@pytest.mark.asyncio
async def test_get_token_sends_frob_signed(mock_http: Mock) -> None:
    result = await get_token(mock_http, FROB)

    mock_http.request.assert_called_once_with(
        "flickr.auth.getToken", Auth, {"frob": FROB}, signed=True
    )
    assert result.token == AUTH_TOKEN


@pytest.mark.asyncio
async def test_get_full_token_strips_hyphens(mock_http: Mock) -> None:
    await get_full_token(mock_http, "123-456-789")

    mock_http.request.assert_called_once_with(
        "flickr.auth.getFullToken", Auth, {"mini_token": "123456789"}, signed=True
    )


@pytest.mark.asyncio
async def test_check_token_sends_token(mock_http: Mock) -> None:
    await check_token(mock_http, AUTH_TOKEN)

    mock_http.request.assert_called_once_with(
        "flickr.auth.checkToken", Auth, {"auth_token": AUTH_TOKEN}, signed=True
    )
