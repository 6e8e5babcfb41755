"""
Photo-related domain models.

Entities refer to other entities (owners, primary photos) by identifier
only.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Self

from flickr_client.parsing.converters import parse_bool, parse_date, parse_int
from flickr_client.parsing.cursor import XmlCursor

PHOTOSET_URL_TEMPLATE = "https://www.flickr.com/photos/{owner_id}/sets/{photoset_id}/"


@dataclass(frozen=True, kw_only=True)
class Photoset:
    """
    An album of photos and videos.

    ``photos``, ``total`` and ``count_photos`` are synonyms on the wire, as
    are ``owner`` and ``owner_id``.
    """

    photoset_id: str = ""
    url: str = ""
    owner_id: str = ""
    username: str = ""
    primary_photo_id: str = ""
    secret: str = ""
    server: str = ""
    farm: str = ""
    number_of_photos: int = 0
    number_of_videos: int = 0
    view_count: int = 0
    comment_count: int = 0
    can_comment: bool = False
    date_created: datetime | None = None
    date_updated: datetime | None = None
    title: str = ""
    description: str = ""

    @property
    def web_url(self) -> str:
        """The explicit URL if the API sent one, otherwise the standard set page."""
        if self.url:
            return self.url
        return PHOTOSET_URL_TEMPLATE.format(owner_id=self.owner_id, photoset_id=self.photoset_id)

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("photoset")

        values: dict[str, Any] = {}
        for name, value in cursor.attributes():
            match name:
                case "id":
                    values["photoset_id"] = value
                case "url":
                    values["url"] = value
                case "owner_id" | "owner":
                    values["owner_id"] = value
                case "username":
                    values["username"] = value
                case "primary":
                    values["primary_photo_id"] = value
                case "secret":
                    values["secret"] = value
                case "farm":
                    values["farm"] = value
                case "server":
                    values["server"] = value
                case "photos" | "total" | "count_photos":
                    values["number_of_photos"] = parse_int(value)
                case "videos" | "count_videos":
                    values["number_of_videos"] = parse_int(value)
                case "count_views":
                    values["view_count"] = parse_int(value)
                case "count_comments":
                    values["comment_count"] = parse_int(value)
                case "can_comment":
                    values["can_comment"] = parse_bool(value)
                case "date_create":
                    values["date_created"] = parse_date(value)
                case "date_update":
                    values["date_updated"] = parse_date(value)
                case _:
                    cursor.unknown_attribute(name, value)

        for child in cursor.children():
            match child:
                case "title":
                    values["title"] = cursor.read_inner_text()
                case "description":
                    values["description"] = cursor.read_inner_text()

        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class PhotosetCollection:
    """One page of a user's photosets, in API order."""

    page: int = 0
    pages: int = 0
    per_page: int = 0
    total: int = 0
    can_create: bool = False
    photosets: tuple[Photoset, ...] = ()

    def __iter__(self) -> Iterator[Photoset]:
        return iter(self.photosets)

    def __len__(self) -> int:
        return len(self.photosets)

    def __getitem__(self, index: int) -> Photoset:
        return self.photosets[index]

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("photosets")

        values: dict[str, Any] = {}
        for name, value in cursor.attributes():
            match name:
                case "page":
                    values["page"] = parse_int(value)
                case "pages":
                    values["pages"] = parse_int(value)
                case "perpage" | "per_page":
                    values["per_page"] = parse_int(value)
                case "total":
                    values["total"] = parse_int(value)
                case "cancreate":
                    values["can_create"] = parse_bool(value)
                case _:
                    cursor.unknown_attribute(name, value)

        photosets = [Photoset.load(cursor) for child in cursor.children() if child == "photoset"]
        return cls(photosets=tuple(photosets), **values)


@dataclass(frozen=True, kw_only=True)
class PhotoCount:
    """
    Number of photos in one date range.

    Attributes:
        count: Photos between ``from_date`` and ``to_date``.
        from_date: Start of the range.
        to_date: End of the range.
    """

    count: int = 0
    from_date: datetime | None = None
    to_date: datetime | None = None

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("photocount")

        values: dict[str, Any] = {}
        for name, value in cursor.attributes():
            match name:
                case "count":
                    values["count"] = parse_int(value)
                case "fromdate":
                    values["from_date"] = parse_date(value)
                case "todate":
                    values["to_date"] = parse_date(value)
                case _:
                    cursor.unknown_attribute(name, value)

        cursor.skip()
        return cls(**values)


@dataclass(frozen=True, kw_only=True)
class PhotoCountCollection:
    """Photo counts per requested date range, in the order the ranges were requested."""

    counts: tuple[PhotoCount, ...] = ()

    def __iter__(self) -> Iterator[PhotoCount]:
        return iter(self.counts)

    def __len__(self) -> int:
        return len(self.counts)

    def __getitem__(self, index: int) -> PhotoCount:
        return self.counts[index]

    @classmethod
    def load(cls, cursor: XmlCursor) -> Self:
        cursor.expect("photocounts")

        for name, value in cursor.attributes():
            cursor.unknown_attribute(name, value)

        counts = [PhotoCount.load(cursor) for child in cursor.children() if child == "photocount"]
        return cls(counts=tuple(counts))
