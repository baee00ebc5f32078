"""
Date utility functions for birth-date parsing and age calculation.

Key Features:
- Calendar-exact age calculation (month/day aware, leap-day safe)
- Lenient birth-date string parsing with python-dateutil
- ``InvalidDate`` marker for strings that cannot be parsed, so the age
  validator can tell an unparseable date apart from a wrong type
- UTC ISO-8601 timestamps for persisted records
"""

import datetime
from collections.abc import Mapping
from typing import Any, Optional, Union

from dateutil import parser as dateutil_parser

import logging
logger = logging.getLogger(__name__)


class DateTimeError(Exception):
    """Base exception for datetime utility errors."""
    pass


class InvalidDateFormatError(DateTimeError):
    """Raised when a date value cannot be used for a calculation."""
    pass


class InvalidDate:
    """
    A date value whose underlying calendar date is undefined.

    Produced by ``parse_date`` when the input cannot be parsed. It counts as a
    date-typed value, but every calculation on it is meaningless.
    """

    __slots__ = ('source',)

    def __init__(self, source: Any = None):
        self.source = source

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, InvalidDate) and other.source == self.source

    def __hash__(self) -> int:
        return hash(('InvalidDate', self.source))

    def __repr__(self) -> str:
        return f"InvalidDate({self.source!r})"


DateLike = Union[datetime.date, InvalidDate]

# Fills the fields a partial date string leaves out
PARSE_DEFAULT = datetime.datetime(2000, 1, 1)


def today() -> datetime.date:
    return datetime.date.today()


def now_iso() -> str:
    """Get current UTC timestamp as an ISO-8601 string."""
    return datetime.datetime.now(datetime.timezone.utc).isoformat().replace('+00:00', 'Z')


def as_date(value: datetime.date) -> datetime.date:
    """Drop the time component of a datetime, leave dates untouched."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def parse_date(value: Any) -> DateLike:
    """
    Parse a birth-date value into a ``datetime.date``.

    ISO ``YYYY-MM-DD`` strings (what an HTML date input submits) are parsed
    strictly; anything else goes through the dateutil parser. Unparseable
    strings yield an ``InvalidDate``. Components missing from a partial date
    ("2008", "May 1990") are taken from ``PARSE_DEFAULT``, never from today.

    Args:
        value: Date, datetime or string

    Returns:
        Parsed date, or ``InvalidDate`` when parsing fails

    Raises:
        InvalidDateFormatError: If value is neither a date nor a string
    """
    if isinstance(value, (datetime.date, InvalidDate)):
        return value

    if not isinstance(value, str):
        raise InvalidDateFormatError(f"Cannot parse {type(value).__name__} as a date")

    candidate = value.strip()
    try:
        return datetime.date.fromisoformat(candidate)
    except ValueError:
        pass

    try:
        return dateutil_parser.parse(candidate, default=PARSE_DEFAULT).date()
    except (ValueError, OverflowError) as e:
        logger.debug("Unparseable date %r: %s", value, e)
        return InvalidDate(value)


def calculate_age(birth_date: datetime.date,
                  reference_date: Optional[datetime.date] = None) -> int:
    """
    Calculate age in whole years from birth date.

    The year difference is reduced by one while the reference month/day has
    not yet reached the birth month/day. A Feb 29 birthday therefore counts
    from Mar 1 in non-leap years.

    Args:
        birth_date: Date of birth
        reference_date: Reference date for calculation (default: today)

    Returns:
        Age in years
    """
    if reference_date is None:
        reference_date = today()

    age = reference_date.year - birth_date.year

    # Adjust if birthday hasn't occurred this year
    if (reference_date.month, reference_date.day) < (birth_date.month, birth_date.day):
        age -= 1

    return age


def calculate_person_age(person: Any,
                         reference_date: Optional[datetime.date] = None) -> int:
    """
    Calculate the age in years of a person mapping with a ``birth`` date.

    Raises:
        DateTimeError: If ``person`` is missing or has no ``birth`` field
        InvalidDateFormatError: If ``person`` is not a mapping, or ``birth``
            is not a valid date
    """
    if not person:
        raise DateTimeError("missing param person")

    if not isinstance(person, Mapping):
        raise InvalidDateFormatError("param person must be a mapping")

    birth = person.get('birth')
    if not birth:
        raise DateTimeError("missing birth field")

    if isinstance(birth, InvalidDate):
        raise InvalidDateFormatError("invalid birth date")

    if not isinstance(birth, datetime.date):
        raise InvalidDateFormatError("birth field must be a date")

    return calculate_age(as_date(birth), reference_date)
