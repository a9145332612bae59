"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Caller mistakes (impossible dates, unknown months, days past the end of a
month) are reported as DataError subclasses.  InternalError means the
library itself computed something impossible and is a bug.
"""

__all__ = ['Error', 'DataError', 'InvalidDate', 'InvalidMonth', 'InvalidDay',
           'InternalError', 'OffsetOverflow']


class Error(Exception):
    def __init__(self, value):
        Exception.__init__(self, value)
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class DataError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class InvalidDate(DataError, ValueError):
    """The year/month/day triple does not name a real calendar day."""

    def __init__(self, value):
        DataError.__init__(self, value)


class InvalidMonth(InvalidDate):
    def __init__(self, value):
        InvalidDate.__init__(self, value)


class InvalidDay(InvalidDate):
    def __init__(self, value):
        InvalidDate.__init__(self, value)


class InternalError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class OffsetOverflow(InternalError):
    """A day offset ran past the end of the Nanakshahi month table."""

    def __init__(self, value, offset=None):
        InternalError.__init__(self, value)
        self.offset = offset
