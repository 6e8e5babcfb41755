from datetime import datetime, timezone

import pytest

from flickr_client.exceptions import FormatError
from flickr_client.parsing.converters import (
    alternate_date_to_date,
    date_to_alternate_format,
    date_to_unix_timestamp,
    parse_bool,
    parse_date,
    parse_int,
    unix_timestamp_to_date,
)

NEW_YEAR_2008 = datetime(2008, 1, 1, tzinfo=timezone.utc)


def test_unix_timestamp_to_date_returns_utc_datetime() -> None:
    assert unix_timestamp_to_date("1199145600") == NEW_YEAR_2008
    assert unix_timestamp_to_date("0") == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["", "-5", "12a", "1.5", " 12", "1\n", "1199145600\n"])
def test_unix_timestamp_to_date_rejects_non_digits(value: str) -> None:
    with pytest.raises(FormatError):
        unix_timestamp_to_date(value)


def test_alternate_date_to_date_parses_database_format() -> None:
    assert alternate_date_to_date("2008-01-01 00:00:00") == NEW_YEAR_2008
    assert alternate_date_to_date("2009-07-14 18:05:31") == datetime(
        2009, 7, 14, 18, 5, 31, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "value", ["2008-01-01", "2008-01-01T00:00:00", "2008-13-01 00:00:00", "yesterday"]
)
def test_alternate_date_to_date_rejects_other_formats(value: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        alternate_date_to_date(value)

    assert exc_info.value.value == value


def test_parse_date_dispatches_on_digits() -> None:
    from_timestamp = parse_date("1199145600")
    from_alternate = parse_date("2008-01-01 00:00:00")

    assert from_timestamp == from_alternate == NEW_YEAR_2008
    assert from_timestamp.date() == from_alternate.date()


def test_parse_date_rejects_garbage() -> None:
    with pytest.raises(FormatError):
        parse_date("not a date")


def test_parse_int_accepts_signed_decimal() -> None:
    assert parse_int("5") == 5
    assert parse_int("-12") == -12
    assert parse_int("+7") == 7


@pytest.mark.parametrize("value", ["", "1,000", "1_000", "0x10", "٣", "5.0"])
def test_parse_int_rejects_non_invariant_numbers(value: str) -> None:
    with pytest.raises(FormatError):
        parse_int(value)


def test_parse_bool_accepts_zero_and_one() -> None:
    assert parse_bool("1") is True
    assert parse_bool("0") is False


def test_parse_bool_rejects_other_values() -> None:
    with pytest.raises(FormatError):
        parse_bool("true")


def test_date_to_unix_timestamp_treats_naive_as_utc() -> None:
    assert date_to_unix_timestamp(NEW_YEAR_2008) == "1199145600"
    assert date_to_unix_timestamp(datetime(2008, 1, 1)) == "1199145600"


def test_date_to_alternate_format_converts_to_utc() -> None:
    assert date_to_alternate_format(NEW_YEAR_2008) == "2008-01-01 00:00:00"
    assert date_to_alternate_format(datetime(2009, 7, 14, 18, 5, 31)) == "2009-07-14 18:05:31"


def test_parse_date_rejects_timestamp_with_trailing_newline() -> None:
    with pytest.raises(FormatError):
        parse_date("1199145600\n")
