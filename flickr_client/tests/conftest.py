from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from flickr_client.api.http_client import AsyncHttpClient
from flickr_client.config import FlickrConfig
from flickr_client.tests.utils.responses import API_KEY, SHARED_SECRET, MockTransport


@pytest.fixture
def config() -> FlickrConfig:
    return FlickrConfig(api_key=API_KEY, shared_secret=SHARED_SECRET)


@pytest.fixture
def unsigned_config() -> FlickrConfig:
    return FlickrConfig(api_key=API_KEY)


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest_asyncio.fixture
async def http(
    config: FlickrConfig, mock_transport: MockTransport
) -> AsyncIterator[AsyncHttpClient]:
    async with AsyncHttpClient(config, transport=mock_transport) as client:
        yield client
