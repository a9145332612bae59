"""A module for housing the calendar tables and date classes.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
NanakshahiDate -- (year, month name, day) in the Nanakshahi calendar
GregorianDate -- (year, month name, day) in the Gregorian calendar

Exported Functions:
month_lengths -- Nanakshahi month lengths for a given year.
is_leap_year -- True if a Nanakshahi year has 366 days.
days_in_month -- Length of one Nanakshahi month.
nanakshahi_month_number -- Nanakshahi month name or number to 1..12.
gregorian_month_number -- Gregorian month name or number to 1..12.

Constants:
EPOCH_ON_OR_AFTER_MID_MARCH -- Gregorian minus Nanakshahi year from March 14
EPOCH_BEFORE_MID_MARCH -- Gregorian minus Nanakshahi year before March 14
NEW_YEAR -- (month, day) of the Nanakshahi new year in the Gregorian calendar
DAYS_IN_MONTHS -- month lengths of a common year, Chet first
MONTH_NAMES -- Nanakshahi month names, Chet first
GREGORIAN_MONTH_NAMES -- Gregorian month names, January first
"""

__all__ = ['NanakshahiDate', 'GregorianDate', 'EPOCH_ON_OR_AFTER_MID_MARCH',
           'EPOCH_BEFORE_MID_MARCH', 'NEW_YEAR', 'DAYS_IN_MONTHS',
           'MONTH_NAMES', 'GREGORIAN_MONTH_NAMES', 'month_lengths',
           'is_leap_year', 'days_in_month', 'nanakshahi_month_number',
           'gregorian_month_number']

from collections import namedtuple
from datetime import date as Date

from typing import Optional, Tuple, Union  # pylint: disable=unused-import

from .calendar import is_leap
from .exception import InvalidMonth

EPOCH_ON_OR_AFTER_MID_MARCH = 1468
EPOCH_BEFORE_MID_MARCH = 1469
NEW_YEAR = (3, 14)

DAYS_IN_MONTHS = (31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30, 30)
MONTH_NAMES = ("Chet", "Vaisakh", "Jeth", "Harh", "Sawan", "Bhadon",
               "Assu", "Kattak", "Maghar", "Poh", "Magh", "Phaggan")
GREGORIAN_MONTH_NAMES = ("January", "February", "March", "April", "May",
                         "June", "July", "August", "September", "October",
                         "November", "December")

# Phaggan is the month that holds February 29
LEAP_MONTH = 12

_NANAKSHAHI_LOOKUP = dict((n.lower(), i) for i, n in enumerate(MONTH_NAMES, 1))
_GREGORIAN_LOOKUP = dict((n.lower(), i) for i, n in enumerate(GREGORIAN_MONTH_NAMES, 1))

MonthArg = Union[int, str]


class NanakshahiDate(namedtuple('NanakshahiDate', 'year month day')):
    """A Nanakshahi date: year, month name and day of month.

    The month name doubles as an ordinal: ``ordinal`` is its 0-based
    position in MONTH_NAMES and ``month_number`` the 1-based number that
    to_gregorian() accepts.
    """

    __slots__ = ()

    @property
    def ordinal(self):
        # type: () -> int
        return MONTH_NAMES.index(self.month)

    @property
    def month_number(self):
        # type: () -> int
        return self.ordinal + 1

    def __str__(self):
        return '%d %s %d NS' % (self.day, self.month, self.year)


class GregorianDate(namedtuple('GregorianDate', 'year month day')):
    """A Gregorian date as returned by to_gregorian()."""

    __slots__ = ()

    @property
    def month_number(self):
        # type: () -> int
        return GREGORIAN_MONTH_NAMES.index(self.month) + 1

    def to_date(self):
        # type: () -> Date
        return Date(self.year, self.month_number, self.day)

    def __str__(self):
        return '%d %s %d' % (self.day, self.month, self.year)


def is_leap_year(year):
    # type: (int) -> bool
    """Return True if Nanakshahi ``year`` contains a February 29.

    Year N runs from March 14 of N+1468 to March 13 of N+1469, so it is
    long exactly when the Gregorian year it ends in is a leap year.
    """
    return is_leap(year + EPOCH_BEFORE_MID_MARCH)


def month_lengths(year=None):
    # type: (Optional[int]) -> Tuple[int, ...]
    """Return the 12 month lengths for Nanakshahi ``year``.

    Without a year, or in a common year, this is DAYS_IN_MONTHS.  In a
    leap year Phaggan has 31 days.
    """
    if year is None or not is_leap_year(year):
        return DAYS_IN_MONTHS
    lengths = list(DAYS_IN_MONTHS)
    lengths[LEAP_MONTH - 1] += 1
    return tuple(lengths)


def _month_number(month, lookup, names):
    # type: (MonthArg, dict, Tuple[str, ...]) -> int
    if isinstance(month, str):
        number = lookup.get(month.strip().lower())
        if number is None:
            raise InvalidMonth('unknown month name "%s"' % (month))
        return number
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidMonth("month must be a name or an integer, not %r" % (month,))
    if month < 1 or month > len(names):
        raise InvalidMonth("month %d not between 1 and %d" % (month, len(names)))
    return month


def nanakshahi_month_number(month):
    # type: (MonthArg) -> int
    """Return 1..12 for a Nanakshahi month name (any case) or number."""
    return _month_number(month, _NANAKSHAHI_LOOKUP, MONTH_NAMES)


def gregorian_month_number(month):
    # type: (MonthArg) -> int
    """Return 1..12 for a Gregorian month name (any case) or number."""
    return _month_number(month, _GREGORIAN_LOOKUP, GREGORIAN_MONTH_NAMES)


def days_in_month(month, year=None):
    # type: (MonthArg, Optional[int]) -> int
    """Return the number of days in Nanakshahi ``month``.

    Phaggan is 31 days long in leap years; without ``year`` the common
    year length is returned.
    """
    return month_lengths(year)[nanakshahi_month_number(month) - 1]
