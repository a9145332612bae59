"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
from datetime import date, timedelta

from typing import Iterator  # pylint: disable=unused-import

_log = logging.getLogger("nanakshahitest")

ONE_DAY = timedelta(days=1)


def daterange(start, end):
    # type: (date, date) -> Iterator[date]
    """Yield every date from START up to and including END."""
    day = start
    while day <= end:
        yield day
        day += ONE_DAY
