# Copyright (c) "civiltime" contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Units of measurement for date and time arithmetic.

A unit is either time based (an exact number of nanoseconds) or date based.
Date based units are counted either in days or in months and need a time
zone to be applied to an :class:`.Instant`.
"""


from __future__ import annotations

from ._arithmetic import (
    NANO_SECONDS,
    safe_multiply,
)


__all__ = [
    "DateTimeUnit",
    "TimeBased",
    "DateBased",
    "DayBased",
    "MonthBased",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "QUARTER",
    "YEAR",
    "CENTURY",
]


class DateTimeUnit:
    """ Base class of all units. Units are immutable and can be scaled by
    an integer factor::

        >>> HOUR * 2 == TimeBased(nanoseconds=7200000000000)
        True
    """

    NANOSECOND: TimeBased
    MICROSECOND: TimeBased
    MILLISECOND: TimeBased
    SECOND: TimeBased
    MINUTE: TimeBased
    HOUR: TimeBased
    DAY: DayBased
    WEEK: DayBased
    MONTH: MonthBased
    QUARTER: MonthBased
    YEAR: MonthBased
    CENTURY: MonthBased

    def times(self, scalar: int) -> DateTimeUnit:
        """ Produce a unit that is `scalar` times as long as this one.

        :raises OverflowError: if the resulting length is not representable
        """
        raise NotImplementedError

    def __mul__(self, scalar):
        if not isinstance(scalar, int):
            return NotImplemented
        return self.times(scalar)

    __rmul__ = __mul__

    @staticmethod
    def _format(value, name):
        return name if value == 1 else "%d-%s" % (value, name)


class TimeBased(DateTimeUnit):
    """ A unit with a precise length in nanoseconds.

    :param nanoseconds: length of the unit, must be positive

    :raises ValueError: if `nanoseconds` is not positive
    """

    def __init__(self, nanoseconds: int) -> None:
        if nanoseconds <= 0:
            raise ValueError("Unit duration must be positive, but was %d ns"
                             % nanoseconds)
        self.__nanoseconds = int(nanoseconds)

    @property
    def nanoseconds(self) -> int:
        return self.__nanoseconds

    def times(self, scalar: int) -> TimeBased:
        return TimeBased(safe_multiply(self.__nanoseconds, scalar))

    def __eq__(self, other):
        if isinstance(other, TimeBased):
            return self.__nanoseconds == other.__nanoseconds
        return NotImplemented

    def __hash__(self):
        return hash((TimeBased, self.__nanoseconds))

    def __repr__(self):
        return "civiltime.TimeBased(nanoseconds=%r)" % self.__nanoseconds

    def __str__(self):
        for name, size in _TIME_UNIT_NAMES:
            if self.__nanoseconds % size == 0:
                return self._format(self.__nanoseconds // size, name)
        raise AssertionError("unreachable")


_TIME_UNIT_NAMES = (
    ("HOUR", 3600 * NANO_SECONDS),
    ("MINUTE", 60 * NANO_SECONDS),
    ("SECOND", NANO_SECONDS),
    ("MILLISECOND", 1000000),
    ("MICROSECOND", 1000),
    ("NANOSECOND", 1),
)


class DateBased(DateTimeUnit):
    """ Base class for units whose length depends on the calendar.
    """

    def times(self, scalar: int) -> DateBased:
        raise NotImplementedError


class DayBased(DateBased):
    """ A unit counted in calendar days. A calendar day is not always
    24 hours long, e.g. on days of daylight saving time transitions.

    :param days: length of the unit, must be positive

    :raises ValueError: if `days` is not positive
    """

    def __init__(self, days: int) -> None:
        if days <= 0:
            raise ValueError("Unit duration must be positive, but was %d days"
                             % days)
        self.__days = int(days)

    @property
    def days(self) -> int:
        return self.__days

    def times(self, scalar: int) -> DayBased:
        return DayBased(safe_multiply(self.__days, scalar, bits=32))

    def __eq__(self, other):
        if isinstance(other, DayBased):
            return self.__days == other.__days
        return NotImplemented

    def __hash__(self):
        return hash((DayBased, self.__days))

    def __repr__(self):
        return "civiltime.DayBased(days=%r)" % self.__days

    def __str__(self):
        if self.__days % 7 == 0:
            return self._format(self.__days // 7, "WEEK")
        return self._format(self.__days, "DAY")


class MonthBased(DateBased):
    """ A unit counted in calendar months.

    :param months: length of the unit, must be positive

    :raises ValueError: if `months` is not positive
    """

    def __init__(self, months: int) -> None:
        if months <= 0:
            raise ValueError("Unit duration must be positive, but was %d "
                             "months" % months)
        self.__months = int(months)

    @property
    def months(self) -> int:
        return self.__months

    def times(self, scalar: int) -> MonthBased:
        return MonthBased(safe_multiply(self.__months, scalar, bits=32))

    def __eq__(self, other):
        if isinstance(other, MonthBased):
            return self.__months == other.__months
        return NotImplemented

    def __hash__(self):
        return hash((MonthBased, self.__months))

    def __repr__(self):
        return "civiltime.MonthBased(months=%r)" % self.__months

    def __str__(self):
        if self.__months % 1200 == 0:
            return self._format(self.__months // 1200, "CENTURY")
        if self.__months % 12 == 0:
            return self._format(self.__months // 12, "YEAR")
        if self.__months % 3 == 0:
            return self._format(self.__months // 3, "QUARTER")
        return self._format(self.__months, "MONTH")


NANOSECOND = TimeBased(nanoseconds=1)
MICROSECOND = NANOSECOND * 1000
MILLISECOND = MICROSECOND * 1000
SECOND = MILLISECOND * 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = DayBased(days=1)
WEEK = DAY * 7
MONTH = MonthBased(months=1)
QUARTER = MONTH * 3
YEAR = MONTH * 12
CENTURY = YEAR * 100

DateTimeUnit.NANOSECOND = NANOSECOND
DateTimeUnit.MICROSECOND = MICROSECOND
DateTimeUnit.MILLISECOND = MILLISECOND
DateTimeUnit.SECOND = SECOND
DateTimeUnit.MINUTE = MINUTE
DateTimeUnit.HOUR = HOUR
DateTimeUnit.DAY = DAY
DateTimeUnit.WEEK = WEEK
DateTimeUnit.MONTH = MONTH
DateTimeUnit.QUARTER = QUARTER
DateTimeUnit.YEAR = YEAR
DateTimeUnit.CENTURY = CENTURY
