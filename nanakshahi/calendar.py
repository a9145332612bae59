"""A module to calculate dates from number of days from 1/1/1970.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to number
of days from unix epoch (1/1/1970) on the proleptic Gregorian calendar,
the same calendar python datetime uses.  Dates before 10/15/1582 are
extended backward with Gregorian leap rules; no Julian switch-over is
applied.

These are the only date arithmetic primitives the converters need:
validation, subtraction, addition and extraction of components.
"""

__all__ = ['ymd2day', 'day2ymd', 'is_valid', 'is_leap', 'days_between',
           'add_days']

from typing import Tuple  # pylint: disable=unused-import
import jdcal

from .exception import InvalidDate

JD_EPOCH = sum(jdcal.gcal2jd(1970, 1, 1))
MIN_YEAR = 1
MAX_YEAR = 9999
MIN_DAYNUM = -719162
MAX_DAYNUM = 2932896


def _check_int(name, value):
    # type: (str, object) -> None
    # bool is an int subclass but never a sensible year, month or day
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDate("Invalid date: %s must be an integer, not %r" % (name, value))


def ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year , month, day to number of days since unix EPOCH.
      year  - between 0001-9999
      month - 1 - 12
      day   - 1 - 31 (depending upon month and year)
    jdcal happily normalizes impossible dates (February 30 becomes
    March 2), so the result is converted back and compared with the
    input; any mismatch raises InvalidDate.
    """
    _check_int('year', year)
    _check_int('month', month)
    _check_int('day', day)

    if year < MIN_YEAR or year > MAX_YEAR:
        raise InvalidDate("Invalid date: year %d not between %d and %d"
                          % (year, MIN_YEAR, MAX_YEAR))
    if month < 1 or month > 12 or day < 1 or day > 31:
        raise InvalidDate("Invalid date: %04d-%02d-%02d" % (year, month, day))

    daynum = int(sum(jdcal.gcal2jd(year, month, day)) - JD_EPOCH)
    if daynum < MIN_DAYNUM or daynum > MAX_DAYNUM or day2ymd(daynum) != (year, month, day):
        raise InvalidDate("Invalid date: %04d-%02d-%02d" % (year, month, day))
    return daynum


def day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given day number relative to 1970-01-01 to a tuple (year,month,day).

       +----------------------------+
       |  daynum | (year,month,day) |
       |---------+------------------|
       |       0 | (1970,1,1)       |
       | -141427 | (1582,10,15)     |
       | -141428 | (1582,10,14)     |
       | -719162 | (1,1,1)          |
       | 2932896 | (9999,12,31)     |
       +----------------------------+
    """
    if daynum < MIN_DAYNUM or daynum > MAX_DAYNUM:
        raise InvalidDate("Invalid daynum (not between 1/1/1 and 12/31/9999 inclusive).")

    y, m, d, _ = jdcal.jd2gcal(daynum, JD_EPOCH)
    return y, m, d


def is_valid(year, month, day):
    # type: (int, int, int) -> bool
    """Return True if year/month/day is a real Gregorian date."""
    try:
        ymd2day(year, month, day)
    except InvalidDate:
        return False
    return True


def is_leap(year):
    # type: (int) -> bool
    """Return True if ``year`` has a February 29."""
    return bool(jdcal.is_leap(year))


def days_between(start, end):
    # type: (Tuple[int, int, int], Tuple[int, int, int]) -> int
    """Number of days from ``start`` to ``end``; negative if end is earlier."""
    return ymd2day(*end) - ymd2day(*start)


def add_days(ymd, days):
    # type: (Tuple[int, int, int], int) -> Tuple[int, int, int]
    """Return the date ``days`` days after ``ymd``."""
    return day2ymd(ymd2day(*ymd) + days)
