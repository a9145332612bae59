"""Conversion between Gregorian and Nanakshahi dates.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Both directions pivot on the day offset: the number of days elapsed
since the most recent Nanakshahi new year (March 14).  Offset 0 is
1 Chet.

Exported Functions:
day_offset -- Days since the last March 14 for a Gregorian date.
to_nanakshahi -- Gregorian year/month/day to a NanakshahiDate.
to_gregorian -- Nanakshahi year/month/day to a GregorianDate.
NanakshahiFromDate -- datetime.date to a NanakshahiDate.
DateFromNanakshahi -- Nanakshahi year/month/day to a datetime.date.
"""

__all__ = ['day_offset', 'to_nanakshahi', 'to_gregorian',
           'NanakshahiFromDate', 'DateFromNanakshahi']

import logging
from datetime import date as Date

from typing import Union  # pylint: disable=unused-import

from .calendar import add_days, days_between, ymd2day
from .datatype import (EPOCH_BEFORE_MID_MARCH, EPOCH_ON_OR_AFTER_MID_MARCH,
                       GREGORIAN_MONTH_NAMES, MONTH_NAMES, NEW_YEAR,
                       GregorianDate, NanakshahiDate, gregorian_month_number,
                       month_lengths, nanakshahi_month_number)
from .exception import InvalidDate, InvalidDay, OffsetOverflow

_log = logging.getLogger(__name__)


def _epoch(month, day):
    # type: (int, int) -> int
    if (month, day) >= NEW_YEAR:
        return EPOCH_ON_OR_AFTER_MID_MARCH
    return EPOCH_BEFORE_MID_MARCH


def day_offset(year, month, day):
    # type: (int, Union[int, str], int) -> int
    """Return the days elapsed since the most recent March 14.

    On or after March 14 the reference is March 14 of ``year``, before
    it March 14 of the previous year.  Leap days are counted.
    """
    month = gregorian_month_number(month)
    ymd2day(year, month, day)  # validation
    ref_year = year if (month, day) >= NEW_YEAR else year - 1
    return days_between((ref_year,) + NEW_YEAR, (year, month, day))


def to_nanakshahi(year, month, day):
    # type: (int, Union[int, str], int) -> NanakshahiDate
    """Convert a Gregorian date to a Nanakshahi date.

    ``month`` is 1..12 or a Gregorian month name.  Raises InvalidDate for
    dates that do not exist, e.g. to_nanakshahi(2025, 2, 30).

    >>> to_nanakshahi(2025, 3, 14)
    NanakshahiDate(year=557, month='Chet', day=1)
    """
    month = gregorian_month_number(month)
    offset = day_offset(year, month, day)
    ns_year = year - _epoch(month, day)

    remaining = offset
    for index, days in enumerate(month_lengths(ns_year)):
        if remaining < days:
            return NanakshahiDate(ns_year, MONTH_NAMES[index], remaining + 1)
        remaining -= days

    _log.error("Offset %d of %04d-%02d-%02d exceeds the Nanakshahi year %d",
               offset, year, month, day, ns_year)
    raise OffsetOverflow("Offset exceeded the total number of days in the"
                         " Nanakshahi year", offset)


def to_gregorian(year, month, day):
    # type: (int, Union[int, str], int) -> GregorianDate
    """Convert a Nanakshahi date to a Gregorian date.

    ``month`` is 1..12 or a Nanakshahi month name and is checked before
    anything else; ``day`` must fit the month in that year, so Phaggan 31
    only exists in leap years.

    >>> to_gregorian(557, 1, 1)
    GregorianDate(year=2025, month='March', day=14)
    """
    month = nanakshahi_month_number(month)
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidDate("year must be an integer, not %r" % (year,))
    lengths = month_lengths(year)
    if isinstance(day, bool) or not isinstance(day, int):
        raise InvalidDay("day must be an integer, not %r" % (day,))
    if day < 1 or day > lengths[month - 1]:
        raise InvalidDay("day %d not between 1 and %d for %s %d"
                         % (day, lengths[month - 1], MONTH_NAMES[month - 1], year))

    offset = sum(lengths[:month - 1]) + day - 1
    new_year = (year + EPOCH_ON_OR_AFTER_MID_MARCH,) + NEW_YEAR
    y, m, d = add_days(new_year, offset)
    return GregorianDate(y, GREGORIAN_MONTH_NAMES[m - 1], d)


def NanakshahiFromDate(value):
    # type: (Date) -> NanakshahiDate
    """Convert a datetime.date (or datetime) to a NanakshahiDate."""
    return to_nanakshahi(value.year, value.month, value.day)


def DateFromNanakshahi(year, month, day):
    # type: (int, Union[int, str], int) -> Date
    """Convert a Nanakshahi date to a datetime.date."""
    return to_gregorian(year, month, day).to_date()
