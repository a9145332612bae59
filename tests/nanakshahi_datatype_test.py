"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

from datetime import date

import pytest

import nanakshahi
from nanakshahi.datatype import (DAYS_IN_MONTHS, MONTH_NAMES,
                                 GREGORIAN_MONTH_NAMES, GregorianDate,
                                 NanakshahiDate)
from nanakshahi.exception import InvalidDate, InvalidMonth


class TestNanakshahiTables(object):

    def test_month_lengths_sum(self):
        # type: () -> None
        assert sum(DAYS_IN_MONTHS) == 365
        assert len(DAYS_IN_MONTHS) == len(MONTH_NAMES) == 12

    def test_month_lengths_shape(self):
        # type: () -> None
        """Five months of 31 days followed by seven of 30."""
        assert DAYS_IN_MONTHS[:5] == (31,) * 5
        assert DAYS_IN_MONTHS[5:] == (30,) * 7

    def test_month_names(self):
        # type: () -> None
        assert MONTH_NAMES[0] == "Chet"
        assert MONTH_NAMES[-1] == "Phaggan"
        assert GREGORIAN_MONTH_NAMES[2] == "March"

    def test_epochs(self):
        # type: () -> None
        assert nanakshahi.EPOCH_ON_OR_AFTER_MID_MARCH == 1468
        assert nanakshahi.EPOCH_BEFORE_MID_MARCH == 1469
        assert nanakshahi.NEW_YEAR == (3, 14)

    def test_leap_years(self):
        # type: () -> None
        # 555 runs from 2023-03-14 to 2024-03-13
        assert nanakshahi.is_leap_year(555)
        assert not nanakshahi.is_leap_year(556)
        assert nanakshahi.is_leap_year(531)      # ends in 2000
        assert not nanakshahi.is_leap_year(431)  # ends in 1900

    def test_year_month_lengths(self):
        # type: () -> None
        assert nanakshahi.month_lengths() == DAYS_IN_MONTHS
        assert nanakshahi.month_lengths(556) == DAYS_IN_MONTHS
        leap = nanakshahi.month_lengths(555)
        assert sum(leap) == 366
        assert leap[-1] == 31
        assert leap[:-1] == DAYS_IN_MONTHS[:-1]

    def test_days_in_month(self):
        # type: () -> None
        assert nanakshahi.days_in_month(1) == 31
        assert nanakshahi.days_in_month("Bhadon") == 30
        assert nanakshahi.days_in_month("phaggan") == 30
        assert nanakshahi.days_in_month("Phaggan", 555) == 31
        assert nanakshahi.days_in_month(12, 556) == 30


class TestNanakshahiMonthLookup(object):

    def test_nanakshahi_month_number(self):
        # type: () -> None
        for number, name in enumerate(MONTH_NAMES, 1):
            assert nanakshahi.nanakshahi_month_number(name) == number
            assert nanakshahi.nanakshahi_month_number(name.upper()) == number
            assert nanakshahi.nanakshahi_month_number(number) == number
        assert nanakshahi.nanakshahi_month_number(" chet ") == 1

    def test_gregorian_month_number(self):
        # type: () -> None
        assert nanakshahi.gregorian_month_number("March") == 3
        assert nanakshahi.gregorian_month_number("december") == 12
        assert nanakshahi.gregorian_month_number(7) == 7

    @pytest.mark.parametrize("month", [0, 13, -1, "Chaitra", "", 1.0, None, True])
    def test_bad_nanakshahi_month(self, month):
        with pytest.raises(InvalidMonth):
            nanakshahi.nanakshahi_month_number(month)

    def test_bad_gregorian_month(self):
        # type: () -> None
        with pytest.raises(InvalidMonth):
            nanakshahi.gregorian_month_number("Chet")
        # InvalidMonth is an InvalidDate
        with pytest.raises(InvalidDate):
            nanakshahi.gregorian_month_number(13)


class TestNanakshahiDateTypes(object):

    def test_nanakshahi_date(self):
        # type: () -> None
        ndate = NanakshahiDate(557, "Kattak", 3)
        assert ndate == (557, "Kattak", 3)
        assert ndate.year == 557
        assert ndate.ordinal == 7
        assert ndate.month_number == 8
        assert str(ndate) == "3 Kattak 557 NS"

    def test_gregorian_date(self):
        # type: () -> None
        gdate = GregorianDate(2025, "March", 14)
        assert gdate.month_number == 3
        assert gdate.to_date() == date(2025, 3, 14)
        assert str(gdate) == "14 March 2025"

    def test_immutable(self):
        # type: () -> None
        ndate = NanakshahiDate(557, "Chet", 1)
        with pytest.raises(AttributeError):
            ndate.day = 2  # type: ignore[misc]
