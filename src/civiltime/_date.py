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


from __future__ import annotations

import typing as t
from enum import IntEnum
from functools import total_ordering
from re import compile as re_compile

from ._arithmetic import (
    fits,
    safe_add,
    safe_multiply,
    symmetric_divmod,
)
from ._period import DatePeriod
from ._units import (
    DateBased,
    DayBased,
    MonthBased,
)
from .exceptions import (
    DateTimeArithmeticError,
    DateTimeFormatError,
)


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._datetime import LocalDateTime
    from ._instant import Instant
    from ._time import LocalTime
    from ._zone import TimeZone


__all__ = [
    "DayOfWeek",
    "LocalDate",
    "MAX_YEAR",
    "MIN_YEAR",
    "Month",
]


#: The smallest year number allowed in a :class:`.LocalDate`.
MIN_YEAR: te.Final[int] = -999999999

#: The largest year number allowed in a :class:`.LocalDate`.
MAX_YEAR: te.Final[int] = 999999999

DATE_ISO_PATTERN = re_compile(r"^([+-]\d{4,9}|\d{4})-(\d{2})-(\d{2})$")

_DAYS_IN_MONTH = [-1, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
_DAYS_BEFORE_MONTH = [-1, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334]

_DI400Y = 146097  # number of days in 400 years
_DI100Y = 36524  # number of days in 100 years
_DI4Y = 1461  # number of days in 4 years

# ordinal (0001-01-01 being day 1) of 1970-01-01
_UNIX_EPOCH_ORDINAL = 719163


class Month(IntEnum):
    """The months of the year, numbered from 1 (January) to 12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def first_day_of_year(self, leap_year: bool) -> int:
        """The day of the year (starting at 1) this month begins on."""
        leap = 1 if leap_year and self > Month.FEBRUARY else 0
        return _DAYS_BEFORE_MONTH[self] + 1 + leap

    def length(self, leap_year: bool) -> int:
        if self == Month.FEBRUARY and leap_year:
            return 29
        return _DAYS_IN_MONTH[self]


class DayOfWeek(IntEnum):
    """The days of the week, ISO numbered from 1 (Monday) to 7 (Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


def _is_leap_year(year):
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def _days_in_month(year, month):
    if month == 2 and _is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _days_before_year(year):
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def _ymd_to_ordinal(year, month, day):
    days_before_month = (_DAYS_BEFORE_MONTH[month]
                         + (month > 2 and _is_leap_year(year)))
    return _days_before_year(year) + days_before_month + day


def _ordinal_to_ymd(n):
    # The proleptic Gregorian calendar repeats every 400 years, so the
    # ordinal is split into 400, 100, 4 and 1 year cycles. Floor division
    # keeps every remainder non-negative, also for ordinals before year 1.
    n -= 1
    n400, n = divmod(n, _DI400Y)
    year = n400 * 400 + 1
    n100, n = divmod(n, _DI100Y)
    n4, n = divmod(n, _DI4Y)
    n1, n = divmod(n, 365)
    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        # last day of a leap year closing a 4 or 400 year cycle
        return year - 1, 12, 31
    leap_year = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leap_year)
    if preceding > n:
        month -= 1
        preceding -= _DAYS_IN_MONTH[month] + (month == 2 and leap_year)
    n -= preceding
    return year, month, n + 1


def _check_year(year):
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError("Year out of range (%d..%d), got %d"
                         % (MIN_YEAR, MAX_YEAR, year))


def _proleptic_month(year, month):
    return year * 12 + month - 1


def _plus_months(year, month, day, months):
    year, month0 = divmod(_proleptic_month(year, month) + months, 12)
    _check_year(year)
    month = month0 + 1
    return year, month, min(day, _days_in_month(year, month))


@total_ordering
class LocalDate:
    """A date in the proleptic Gregorian calendar, without a time zone.

    Years between -999,999,999 and 999,999,999 are supported. Year 0 is the
    year before year 1 (1 BCE).

    :param year: the year. Minimum :data:`.MIN_YEAR`, maximum
        :data:`.MAX_YEAR`.
    :param month: the month. Minimum 1, maximum 12. A :class:`.Month` may
        be passed as well.
    :param day: the day. Minimum 1, maximum
        :meth:`LocalDate.days_in_month(year, month) <.days_in_month>`.

    :raises ValueError: if any of the fields is out of range
    """

    min: te.Final[LocalDate]  # type: ignore[name-defined]
    max: te.Final[LocalDate]  # type: ignore[name-defined]

    # CONSTRUCTOR #

    def __new__(cls, year: int, month: int, day: int) -> LocalDate:
        year, month, day = int(year), int(month), int(day)
        _check_year(year)
        if month < 1 or month > 12:
            raise ValueError("Month out of range (1..12), got %d" % month)
        days_in_month = _days_in_month(year, month)
        if day < 1 or day > days_in_month:
            raise ValueError("Day out of range (1..%d) for %04d-%02d, got %d"
                             % (days_in_month, year, month, day))
        return cls._unchecked_new(year, month, day)

    @classmethod
    def _unchecked_new(cls, year: int, month: int, day: int) -> LocalDate:
        instance = object.__new__(cls)
        instance.__year = year
        instance.__month = month
        instance.__day = day
        return instance

    # CLASS METHODS #

    @classmethod
    def from_epoch_days(cls, epoch_days: int) -> LocalDate:
        """The date that is `epoch_days` days after 1970-01-01.

        The corresponding instance method for the reverse transformation
        is :meth:`.to_epoch_days`.

        :raises ValueError: if the resulting date is out of range
        """
        if not _MIN_EPOCH_DAY <= epoch_days <= _MAX_EPOCH_DAY:
            raise ValueError("Epoch day %d is out of range (%d..%d)"
                             % (epoch_days, _MIN_EPOCH_DAY, _MAX_EPOCH_DAY))
        return cls._unchecked_new(
            *_ordinal_to_ymd(int(epoch_days) + _UNIX_EPOCH_ORDINAL)
        )

    @classmethod
    def from_iso_format(cls, s: str) -> LocalDate:
        """Parse an ISO formatted date string.

        Accepted formats:
            'YYYY-MM-DD', '+YYYYY-MM-DD', '-YYYY-MM-DD'

        :param s: the string to be parsed.

        :raises DateTimeFormatError: if the string could not be parsed.
        :raises ValueError: if the date does not exist.
        """
        m = DATE_ISO_PATTERN.match(s)
        if m:
            year = int(m.group(1))
            month = int(m.group(2))
            day = int(m.group(3))
            return cls(year, month, day)
        raise DateTimeFormatError("Date string must be in format YYYY-MM-DD, "
                                  "got %r" % s)

    @classmethod
    def is_leap_year(cls, year: int) -> bool:
        """Indicates whether or not `year` is a leap year.

        :param year: the year to look up
        """
        return _is_leap_year(year)

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        """Return the number of days in `month` of `year`.

        :raises ValueError: if `month` is out of range
        """
        if month < 1 or month > 12:
            raise ValueError("Month out of range (1..12), got %d" % month)
        return _days_in_month(year, month)

    # PROPERTIES #

    @property
    def year(self) -> int:
        return self.__year

    @property
    def month_number(self) -> int:
        return self.__month

    @property
    def month(self) -> Month:
        return Month(self.__month)

    @property
    def day(self) -> int:
        """The day of the month, starting at 1."""
        return self.__day

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek((self.to_epoch_days() + 3) % 7 + 1)

    @property
    def day_of_year(self) -> int:
        """The day of the year, starting at 1 on January 1st."""
        leap_year = _is_leap_year(self.__year)
        return self.month.first_day_of_year(leap_year) + self.__day - 1

    # OPERATIONS #

    def to_epoch_days(self) -> int:
        """The number of days since 1970-01-01, negative for dates before."""
        return (_ymd_to_ordinal(self.__year, self.__month, self.__day)
                - _UNIX_EPOCH_ORDINAL)

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time of day."""
        from ._datetime import LocalDateTime
        return LocalDateTime.combine(self, time)

    def at_start_of_day_in(self, zone: TimeZone) -> Instant:
        """The first instant of this date in `zone`.

        Usually this is midnight. If midnight does not exist in `zone`
        because of a transition, the earliest existing time after it is
        used.
        """
        return zone.at_start_of_day(self)

    def plus(self, value: int, unit: DateBased) -> LocalDate:
        """Add `value` times `unit` to this date.

        Adding months keeps the day of month where possible and otherwise
        truncates it to the last day of the resulting month, so
        ``LocalDate(2021, 1, 31).plus(1, MONTH)`` is 2021-02-28.

        :raises TypeError: if `unit` is not a date-based unit
        :raises DateTimeArithmeticError: if the result is out of range
        """
        try:
            if isinstance(unit, DayBased):
                days = safe_multiply(value, unit.days)
                return LocalDate.from_epoch_days(
                    safe_add(self.to_epoch_days(), days)
                )
            elif isinstance(unit, MonthBased):
                months = safe_multiply(value, unit.months)
                return LocalDate._unchecked_new(
                    *_plus_months(self.__year, self.__month, self.__day,
                                  months)
                )
        except (OverflowError, ValueError) as e:
            raise DateTimeArithmeticError(
                "The result of adding %d of %s to %s is out of LocalDate "
                "range" % (value, unit, self)
            ) from e
        raise TypeError("Only date based units can be added to a LocalDate, "
                        "got %r" % (unit,))

    def minus(self, value: int, unit: DateBased) -> LocalDate:
        """Subtract `value` times `unit` from this date.

        :raises TypeError: if `unit` is not a date-based unit
        :raises DateTimeArithmeticError: if the result is out of range
        """
        return self.plus(-value, unit)

    def days_until(self, other: LocalDate) -> int:
        return other.to_epoch_days() - self.to_epoch_days()

    def months_until(self, other: LocalDate) -> int:
        """The number of whole months between this date and `other`,
        rounded towards zero."""
        packed1 = _proleptic_month(self.__year, self.__month) * 32 + self.__day
        packed2 = (_proleptic_month(other.__year, other.__month) * 32
                   + other.__day)
        return symmetric_divmod(packed2 - packed1, 32)[0]

    def years_until(self, other: LocalDate) -> int:
        return symmetric_divmod(self.months_until(other), 12)[0]

    def until(self, other: LocalDate, unit: DateBased) -> int:
        """The number of whole `unit` between this date and `other`,
        rounded towards zero.

        :raises TypeError: if `unit` is not a date-based unit
        """
        if isinstance(unit, MonthBased):
            return symmetric_divmod(self.months_until(other), unit.months)[0]
        if isinstance(unit, DayBased):
            return symmetric_divmod(self.days_until(other), unit.days)[0]
        raise TypeError("Only date based units are supported, got %r"
                        % (unit,))

    def period_until(self, other: LocalDate) -> DatePeriod:
        """The period between this date and `other`.

        The months are counted first; the days remaining after adding those
        months make up the rest. Adding the result to this date gives
        `other`::

            >>> LocalDate(2021, 1, 1).period_until(LocalDate(2021, 3, 15))
            civiltime.DatePeriod(years=0, months=2, days=14)

        :raises DateTimeArithmeticError: if the number of months does not
            fit into a 32-bit integer
        """
        months = self.months_until(other)
        if not fits(months, bits=32):
            raise DateTimeArithmeticError(
                "The number of months between %s and %s does not fit in a "
                "32-bit integer" % (self, other)
            )
        start = LocalDate._unchecked_new(
            *_plus_months(self.__year, self.__month, self.__day, months)
        )
        days = start.days_until(other)
        return DatePeriod(months=months, days=days)

    def _plus_period(self, period: DatePeriod) -> LocalDate:
        try:
            year, month, day = self.__year, self.__month, self.__day
            if period.total_months:
                year, month, day = _plus_months(year, month, day,
                                                period.total_months)
            date = LocalDate._unchecked_new(year, month, day)
            if period.days:
                date = LocalDate.from_epoch_days(
                    date.to_epoch_days() + period.days
                )
            return date
        except ValueError as e:
            raise DateTimeArithmeticError(
                "The result of adding %s to %s is out of LocalDate range"
                % (period, self)
            ) from e

    def __add__(self, other):
        if isinstance(other, DatePeriod):
            return self._plus_period(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, DatePeriod):
            return self._plus_period(-other)
        if isinstance(other, LocalDate):
            return other.period_until(self)
        return NotImplemented

    # COMPARISON #

    def __key(self):
        return self.__year, self.__month, self.__day

    def __hash__(self):
        return hash(self.__key())

    def __eq__(self, other):
        if isinstance(other, LocalDate):
            return self.__key() == other.__key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, LocalDate):
            return self.__key() < other.__key()
        return NotImplemented

    def __reduce__(self):
        return type(self)._unchecked_new, self.__key()

    # FORMATTING #

    def __repr__(self):
        return "civiltime.LocalDate(%r, %r, %r)" % self.__key()

    def iso_format(self) -> str:
        """Return the date formatted as ISO string, e.g. ``2021-03-15``.

        Years outside 0000 to 9999 are prefixed with a sign.
        """
        year = self.__year
        if year > 9999:
            year_text = "+%04d" % year
        elif year < 0:
            year_text = "-%04d" % -year
        else:
            year_text = "%04d" % year
        return "%s-%02d-%02d" % (year_text, self.__month, self.__day)

    def __str__(self):
        return self.iso_format()


LocalDate.min = LocalDate._unchecked_new(MIN_YEAR, 1, 1)
LocalDate.max = LocalDate._unchecked_new(MAX_YEAR, 12, 31)

_MIN_EPOCH_DAY = LocalDate.min.to_epoch_days()
_MAX_EPOCH_DAY = LocalDate.max.to_epoch_days()
