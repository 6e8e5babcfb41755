from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from flickr_client.api.endpoints.photos import (
    get_photo_counts,
    get_photoset_info,
    get_photoset_list,
)
from flickr_client.models.photos import PhotoCountCollection, Photoset, PhotosetCollection


@pytest.fixture
def mock_http() -> Mock:
    http = Mock()
    http.is_authenticated = False
    http.request = AsyncMock()
    return http


@pytest.mark.asyncio
async def test_get_photoset_list_passes_optional_parameters(mock_http: Mock) -> None:
    mock_http.request.return_value = PhotosetCollection()

    await get_photoset_list(mock_http, "7@N01", page=2, per_page=50)

    mock_http.request.assert_called_once_with(
        "flickr.photosets.getList",
        PhotosetCollection,
        {"user_id": "7@N01", "page": "2", "per_page": "50"},
        signed=False,
    )


@pytest.mark.asyncio
async def test_get_photoset_list_signs_when_authenticated(mock_http: Mock) -> None:
    mock_http.is_authenticated = True

    await get_photoset_list(mock_http)

    call_args = mock_http.request.call_args
    assert call_args[0][2] == {}
    assert call_args[1]["signed"] is True


@pytest.mark.asyncio
async def test_get_photoset_info_sends_id(mock_http: Mock) -> None:
    await get_photoset_info(mock_http, "72157624618609504")

    mock_http.request.assert_called_once_with(
        "flickr.photosets.getInfo",
        Photoset,
        {"photoset_id": "72157624618609504"},
        signed=False,
    )


@pytest.mark.asyncio
async def test_get_photo_counts_formats_dates(mock_http: Mock) -> None:
    dates = [datetime(2008, 1, 1, tzinfo=timezone.utc), datetime(2008, 2, 1, tzinfo=timezone.utc)]

    await get_photo_counts(mock_http, dates, taken_dates=dates)

    mock_http.request.assert_called_once_with(
        "flickr.photos.getCounts",
        PhotoCountCollection,
        {
            "dates": "1199145600,1201824000",
            "taken_dates": "2008-01-01 00:00:00,2008-02-01 00:00:00",
        },
        signed=True,
    )
