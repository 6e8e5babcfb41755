import dataclasses

import pytest

from flickr_client.config import FlickrConfig
from flickr_client.models.auth import Credentials


def test_defaults_point_at_flickr() -> None:
    config = FlickrConfig()

    assert config.api_url == "https://api.flickr.com/services/rest/"
    assert config.auth_url == "https://www.flickr.com/services/auth/"
    assert config.strict_parsing is True


def test_config_is_immutable() -> None:
    config = FlickrConfig(api_key="key")

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"  # type: ignore[misc]


def test_credentials_come_from_config() -> None:
    config = FlickrConfig(api_key="key", shared_secret="secret")

    assert config.credentials == Credentials(api_key="key", shared_secret="secret")


def test_secret_is_not_in_repr() -> None:
    assert "secret-value" not in repr(FlickrConfig(api_key="key", shared_secret="secret-value"))


@pytest.mark.parametrize(
    "kwargs",
    [{"timeout": 0}, {"timeout": -1.0}, {"api_url": ""}, {"auth_url": ""}],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        FlickrConfig(**kwargs)
