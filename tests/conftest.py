"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
from datetime import date

import pytest

from typing import List  # pylint: disable=unused-import

from . import daterange

_log = logging.getLogger("nanakshahitest")

# Gregorian years in which a Nanakshahi year starts.  The ones followed by
# a leap year (1999, 2023, 2399) produce a 366 day Nanakshahi year; 1899
# and 2099 end in a century that is not a leap year.
START_YEARS = [1899, 1999, 2023, 2024, 2099, 2399]


@pytest.fixture(params=START_YEARS)
def nanakshahi_year_days(request):
    # type: (pytest.FixtureRequest) -> List[date]
    """Every Gregorian date of the Nanakshahi year starting in PARAM."""
    start = date(request.param, 3, 14)
    end = date(request.param + 1, 3, 13)
    _log.info("Nanakshahi year from %s to %s", start, end)
    return list(daterange(start, end))


@pytest.fixture(scope="session")
def gregorian_days():
    # type: () -> List[date]
    """Every date from 1996 to 2032, covering several leap cycles."""
    return list(daterange(date(1996, 1, 1), date(2032, 12, 31)))
