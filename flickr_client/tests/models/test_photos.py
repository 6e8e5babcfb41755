from datetime import datetime, timezone

import pytest

from flickr_client.exceptions import FormatError, UnexpectedElementError, UnknownAttributeError
from flickr_client.models.photos import (
    PhotoCount,
    PhotoCountCollection,
    Photoset,
    PhotosetCollection,
)
from flickr_client.parsing.cursor import XmlCursor

PHOTOSET_XML = (
    '<photoset id="72157624618609504" owner="34427466731@N01" primary="4847770787"'
    ' secret="6abd09a292" server="4153" farm="5" photos="55" videos="2"'
    ' count_views="12" count_comments="1" can_comment="1"'
    ' date_create="1281315346" date_update="2010-08-09 01:02:03">'
    "<title>Test Set</title>"
    "<description>Pictures &amp; videos</description>"
    "</photoset>"
)

PHOTOCOUNTS_XML = (
    "<photocounts>"
    '<photocount count="4" fromdate="1093566950" todate="1093653350" />'
    '<photocount count="0" fromdate="2004-08-27 00:00:00" todate="2004-08-28 00:00:00" />'
    "</photocounts>"
)


def test_photoset_load_reads_attributes_and_children() -> None:
    photoset = Photoset.load(XmlCursor(PHOTOSET_XML))

    assert photoset.photoset_id == "72157624618609504"
    assert photoset.owner_id == "34427466731@N01"
    assert photoset.primary_photo_id == "4847770787"
    assert photoset.secret == "6abd09a292"
    assert photoset.server == "4153"
    assert photoset.farm == "5"
    assert photoset.number_of_photos == 55
    assert photoset.number_of_videos == 2
    assert photoset.view_count == 12
    assert photoset.comment_count == 1
    assert photoset.can_comment is True
    assert photoset.date_created == datetime(2010, 8, 9, 0, 55, 46, tzinfo=timezone.utc)
    assert photoset.date_updated == datetime(2010, 8, 9, 1, 2, 3, tzinfo=timezone.utc)
    assert photoset.title == "Test Set"
    assert photoset.description == "Pictures & videos"


def test_photoset_total_is_number_of_photos() -> None:
    xml = '<photoset id="1" total="5"><title>My Set</title></photoset>'

    photoset = Photoset.load(XmlCursor(xml))

    assert photoset.number_of_photos == 5
    assert photoset.title == "My Set"
    assert photoset.description == ""


def test_photoset_owner_id_synonym() -> None:
    photoset = Photoset.load(XmlCursor('<photoset id="1" owner_id="99@N01"/>'))

    assert photoset.owner_id == "99@N01"


def test_photoset_missing_fields_keep_defaults() -> None:
    photoset = Photoset.load(XmlCursor('<photoset id="1"/>'))

    assert photoset == Photoset(photoset_id="1")


def test_photoset_web_url_is_derived_when_absent() -> None:
    photoset = Photoset.load(XmlCursor('<photoset id="42" owner="7@N01"/>'))

    assert photoset.web_url == "https://www.flickr.com/photos/7@N01/sets/42/"


def test_photoset_web_url_prefers_explicit_url() -> None:
    photoset = Photoset.load(XmlCursor('<photoset id="42" url="https://example.com/s/42"/>'))

    assert photoset.web_url == "https://example.com/s/42"


def test_photoset_rejects_unknown_attribute() -> None:
    with pytest.raises(UnknownAttributeError) as exc_info:
        Photoset.load(XmlCursor('<photoset id="1" sparkle="yes"><title>t</title></photoset>'))

    assert exc_info.value.name == "sparkle"
    assert exc_info.value.value == "yes"


def test_photoset_lenient_ignores_unknown_attribute() -> None:
    cursor = XmlCursor('<photoset id="1" sparkle="yes"><title>t</title></photoset>', strict=False)

    photoset = Photoset.load(cursor)

    assert photoset.photoset_id == "1"
    assert photoset.title == "t"


def test_photoset_rejects_bad_number() -> None:
    with pytest.raises(FormatError):
        Photoset.load(XmlCursor('<photoset id="1" photos="many"/>'))


def test_photoset_skips_unknown_children_and_lands_after_element() -> None:
    xml = (
        "<rsp>"
        '<photoset id="1"><extra><deep/></extra><title>t</title></photoset>'
        '<photoset id="2"/>'
        "</rsp>"
    )
    cursor = XmlCursor(xml)
    cursor.read()

    first = Photoset.load(cursor)
    second = Photoset.load(cursor)

    assert first.title == "t"
    assert second.photoset_id == "2"


def test_photoset_rejects_other_element() -> None:
    with pytest.raises(UnexpectedElementError):
        Photoset.load(XmlCursor('<photo id="1"/>'))


def test_photoset_load_is_repeatable() -> None:
    assert Photoset.load(XmlCursor(PHOTOSET_XML)) == Photoset.load(XmlCursor(PHOTOSET_XML))


def test_photoset_collection_keeps_document_order() -> None:
    xml = (
        '<photosets page="1" pages="1" perpage="2" total="2" cancreate="1">'
        '<photoset id="b" photos="1"><title>B</title></photoset>'
        '<photoset id="a" photos="2"><title>A</title></photoset>'
        "</photosets>"
    )

    collection = PhotosetCollection.load(XmlCursor(xml))

    assert [p.photoset_id for p in collection] == ["b", "a"]
    assert len(collection) == 2
    assert collection[1].title == "A"
    assert collection.total == 2
    assert collection.can_create is True


def test_photo_count_reads_both_date_formats() -> None:
    collection = PhotoCountCollection.load(XmlCursor(PHOTOCOUNTS_XML))

    assert [c.count for c in collection] == [4, 0]
    assert collection[0].from_date == datetime(2004, 8, 27, 0, 35, 50, tzinfo=timezone.utc)
    assert collection[1].from_date == datetime(2004, 8, 27, tzinfo=timezone.utc)
    assert collection[1].to_date == datetime(2004, 8, 28, tzinfo=timezone.utc)


@pytest.mark.parametrize("xml", ["<photocounts/>", "<photocounts></photocounts>"])
def test_empty_photo_counts_yield_empty_sequence(xml: str) -> None:
    collection = PhotoCountCollection.load(XmlCursor(xml))

    assert collection.counts == ()
    assert list(collection) == []


def test_photo_count_rejects_unknown_attribute() -> None:
    xml = '<photocounts><photocount count="1" bucket="x"/></photocounts>'

    with pytest.raises(UnknownAttributeError):
        PhotoCountCollection.load(XmlCursor(xml))


def test_photo_count_rejects_bad_date() -> None:
    with pytest.raises(FormatError):
        PhotoCount.load(XmlCursor('<photocount count="1" fromdate="last week"/>'))


def test_photo_count_collection_rejects_wrong_wrapper() -> None:
    with pytest.raises(UnexpectedElementError):
        PhotoCountCollection.load(XmlCursor("<photosets/>"))
