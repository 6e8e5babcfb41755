"""
Flickr client configuration.
"""

from dataclasses import dataclass, field

from flickr_client.models.auth import Credentials


@dataclass(frozen=True, kw_only=True)
class FlickrConfig:
    """
    Attributes:
        api_key: Public API key issued by Flickr.
        shared_secret: Private secret paired with the key; required for signed calls.
        api_url: Endpoint of the REST API.
        auth_url: Page users are redirected to for authentication.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
        strict_parsing: Reject unknown response attributes instead of ignoring them.
    """

    api_key: str | None = None
    shared_secret: str | None = field(default=None, repr=False)
    api_url: str = "https://api.flickr.com/services/rest/"
    auth_url: str = "https://www.flickr.com/services/auth/"
    timeout: float = 30.0
    user_agent: str = "flickr-client-python/0.1"
    strict_parsing: bool = True

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if not self.api_url:
            msg = "api_url must not be empty"
            raise ValueError(msg)
        if not self.auth_url:
            msg = "auth_url must not be empty"
            raise ValueError(msg)

    @property
    def credentials(self) -> Credentials:
        """Key and secret as an immutable pair."""
        return Credentials(api_key=self.api_key, shared_secret=self.shared_secret)
