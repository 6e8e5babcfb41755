"""Photo and photoset API methods."""

from collections.abc import Sequence
from datetime import datetime

from flickr_client.api.http_client import AsyncHttpClient
from flickr_client.models.photos import PhotoCountCollection, Photoset, PhotosetCollection
from flickr_client.parsing.converters import date_to_alternate_format, date_to_unix_timestamp


async def get_photoset_list(
    http: AsyncHttpClient,
    user_id: str | None = None,
    *,
    page: int | None = None,
    per_page: int | None = None,
) -> PhotosetCollection:
    """
    Get the photosets of a user.

    Args:
        http: Configured async HTTP client.
        user_id: NSID of the user. Defaults to the authenticated user.
        page: Page to return.
        per_page: Photosets per page.
    """
    params: dict[str, str] = {}
    if user_id is not None:
        params["user_id"] = user_id
    if page is not None:
        params["page"] = str(page)
    if per_page is not None:
        params["per_page"] = str(per_page)

    return await http.request(
        "flickr.photosets.getList",
        PhotosetCollection,
        params,
        signed=http.is_authenticated,
    )


async def get_photoset_info(http: AsyncHttpClient, photoset_id: str) -> Photoset:
    """Get the details of a single photoset."""
    return await http.request(
        "flickr.photosets.getInfo",
        Photoset,
        {"photoset_id": photoset_id},
        signed=http.is_authenticated,
    )


async def get_photo_counts(
    http: AsyncHttpClient,
    dates: Sequence[datetime] = (),
    *,
    taken_dates: Sequence[datetime] = (),
) -> PhotoCountCollection:
    """
    Count the authenticated user's photos between consecutive dates.

    Args:
        http: Configured async HTTP client.
        dates: Upload date boundaries, sent as unix timestamps.
        taken_dates: Taken date boundaries, sent in ``YYYY-MM-DD HH:MM:SS`` form.

    Returns:
        One count per pair of consecutive boundaries, in boundary order.
    """
    params: dict[str, str] = {}
    if dates:
        params["dates"] = ",".join(date_to_unix_timestamp(d) for d in dates)
    if taken_dates:
        params["taken_dates"] = ",".join(date_to_alternate_format(d) for d in taken_dates)

    return await http.request("flickr.photos.getCounts", PhotoCountCollection, params, signed=True)
