"""
Unit tests for date parsing and person age helpers.
"""

from datetime import date, datetime, timezone

import pytest

from user_registration.utils.datetime import (
    DateTimeError,
    InvalidDate,
    InvalidDateFormatError,
    as_date,
    calculate_person_age,
    now_iso,
    parse_date,
)


@pytest.mark.unit
class TestParseDate:

    def test_iso_string(self):
        assert parse_date("1990-05-17") == date(1990, 5, 17)

    def test_surrounding_whitespace(self):
        assert parse_date(" 1990-05-17 ") == date(1990, 5, 17)

    def test_other_formats_via_dateutil(self):
        assert parse_date("May 17, 1990") == date(1990, 5, 17)
        assert parse_date("1990/05/17") == date(1990, 5, 17)

    def test_datetime_string_keeps_the_date(self):
        assert parse_date("1990-05-17T23:30:00") == date(1990, 5, 17)

    @pytest.mark.parametrize("value,expected", [
        ("2008", date(2008, 1, 1)),
        ("May 1990", date(1990, 5, 1)),
        ("May 17", date(2000, 5, 17)),
    ])
    def test_partial_dates_use_fixed_default(self, value, expected):
        assert parse_date(value) == expected

    def test_date_passthrough(self):
        value = date(2000, 1, 1)
        assert parse_date(value) is value

    def test_invalid_date_passthrough(self):
        marker = InvalidDate("x")
        assert parse_date(marker) is marker

    @pytest.mark.parametrize("value", ["not-a-date", "2001-02-30", ""])
    def test_unparseable_yields_marker(self, value):
        result = parse_date(value)
        assert isinstance(result, InvalidDate)
        assert result == InvalidDate(value)

    @pytest.mark.parametrize("value", [None, 19900517, ["1990-05-17"]])
    def test_non_string_raises(self, value):
        with pytest.raises(InvalidDateFormatError):
            parse_date(value)


@pytest.mark.unit
class TestDateHelpers:

    def test_as_date_drops_time(self):
        assert as_date(datetime(2020, 1, 2, 3, 4)) == date(2020, 1, 2)

    def test_as_date_keeps_date(self):
        assert as_date(date(2020, 1, 2)) == date(2020, 1, 2)

    def test_now_iso_is_utc(self):
        stamp = now_iso()
        assert stamp.endswith("Z")
        parsed = datetime.fromisoformat(stamp[:-1]).replace(tzinfo=timezone.utc)
        assert abs((datetime.now(timezone.utc) - parsed).total_seconds()) < 60

    def test_invalid_date_repr_and_hash(self):
        assert repr(InvalidDate("abc")) == "InvalidDate('abc')"
        assert len({InvalidDate("abc"), InvalidDate("abc")}) == 1


@pytest.mark.unit
class TestCalculatePersonAge:

    def test_returns_age(self):
        person = {"birth": date(1990, 5, 17)}
        assert calculate_person_age(person, date(2026, 5, 16)) == 35
        assert calculate_person_age(person, date(2026, 5, 17)) == 36

    def test_accepts_datetime(self):
        assert calculate_person_age({"birth": datetime(2000, 1, 1, 12)}, date(2026, 1, 1)) == 26

    @pytest.mark.parametrize("person", [None, {}])
    def test_missing_person(self, person):
        with pytest.raises(DateTimeError, match="missing param person"):
            calculate_person_age(person)

    def test_not_a_mapping(self):
        with pytest.raises(InvalidDateFormatError):
            calculate_person_age(["birth"])

    def test_missing_birth(self):
        with pytest.raises(DateTimeError, match="missing birth field"):
            calculate_person_age({"name": "Jean"})

    def test_invalid_birth(self):
        with pytest.raises(InvalidDateFormatError, match="invalid birth date"):
            calculate_person_age({"birth": InvalidDate("nope")})

    def test_birth_not_a_date(self):
        with pytest.raises(InvalidDateFormatError):
            calculate_person_age({"birth": "1990-05-17"})
