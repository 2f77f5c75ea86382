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
from re import compile as re_compile

from ._arithmetic import (
    fits,
    NANO_SECONDS,
    safe_add,
    safe_multiply,
    symmetric_divmod,
)
from .exceptions import DateTimeFormatError


__all__ = [
    "DatePeriod",
    "DateTimePeriod",
]


PERIOD_ISO_PATTERN = re_compile(
    r"^([+-])?P(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)W)?(?:(\d+)D)?"
    r"(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:\.(\d{1,9}))?S)?)?$"
)

_NANOS_PER_HOUR = 3600 * NANO_SECONDS
_NANOS_PER_MINUTE = 60 * NANO_SECONDS


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _check_signs(months: int, days: int, nanoseconds: int) -> None:
    signs = {_sign(v) for v in (months, days, nanoseconds)} - {0}
    if len(signs) > 1:
        raise ValueError(
            "All non-zero components of a period must have the same sign, "
            "got months=%d, days=%d, nanoseconds=%d"
            % (months, days, nanoseconds)
        )


def _total_months(years: int, months: int) -> int:
    try:
        return safe_add(safe_multiply(years, 12, bits=32), months, bits=32)
    except OverflowError as e:
        raise ValueError("The total number of months in %d years and %d "
                         "months overflows a 32-bit integer"
                         % (years, months)) from e


def _total_nanoseconds(hours, minutes, seconds, nanoseconds) -> int:
    total = (hours * _NANOS_PER_HOUR + minutes * _NANOS_PER_MINUTE
             + seconds * NANO_SECONDS + nanoseconds)
    try:
        return safe_add(total, 0)
    except OverflowError as e:
        raise ValueError("The total number of nanoseconds in %d hours, %d "
                         "minutes, %d seconds and %d nanoseconds overflows "
                         "a 64-bit integer"
                         % (hours, minutes, seconds, nanoseconds)) from e


class DateTimePeriod(t.Tuple[int, int, int]):  # type: ignore[misc]
    """A difference between two instants, decomposed into date-based and
    time-based components.

    A period stores the total number of `months` (a year being 12 months),
    the number of `days`, and the total number of `nanoseconds`. The
    components are applied in this order, so ``P1M1D`` added to January 31
    first moves to the end of February and then one more day.

    All non-zero components must share the same sign.

    :param years: number of years
    :param months: number of months
    :param days: number of days
    :param hours: number of hours
    :param minutes: number of minutes
    :param seconds: number of seconds
    :param nanoseconds: number of nanoseconds

    :raises ValueError: if the components are of mixed signs or overflow
    """

    def __new__(
        cls,
        years: int = 0,
        months: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> DateTimePeriod:
        total_months = _total_months(int(years), int(months))
        total_nanoseconds = _total_nanoseconds(
            int(hours), int(minutes), int(seconds), int(nanoseconds)
        )
        if not fits(int(days), bits=32):
            raise ValueError("Number of days %d overflows a 32-bit integer"
                             % days)
        return cls._build(total_months, int(days), total_nanoseconds)

    @classmethod
    def _build(
        cls, total_months: int, days: int, total_nanoseconds: int
    ) -> DateTimePeriod:
        _check_signs(total_months, days, total_nanoseconds)
        if total_nanoseconds == 0:
            return tuple.__new__(DatePeriod, (total_months, days, 0))
        return tuple.__new__(DateTimePeriod,
                             (total_months, days, total_nanoseconds))

    @classmethod
    def from_iso_format(cls, s: str) -> DateTimePeriod:
        """Parse an ISO formatted period string.

        Accepted formats (all components optional):
            '[-]PnYnMnWnDTnHnMn.nS'

        :raises DateTimeFormatError: if the string could not be parsed
        :raises ValueError: if the components overflow
        """
        m = PERIOD_ISO_PATTERN.match(s)
        if not m or s.endswith("T") or s.lstrip("+-") == "P":
            raise DateTimeFormatError("Period string must be in format "
                                      "PnYnMnWnDTnHnMn.nS, got %r" % s)
        sign, frac = m.group(1), m.group(9)
        years, months, weeks, days, hours, minutes, seconds = (
            int(g or 0) for g in m.group(2, 3, 4, 5, 6, 7, 8)
        )
        factor = -1 if sign == "-" else 1
        return cls(
            years=factor * years,
            months=factor * months,
            days=factor * (7 * weeks + days),
            hours=factor * hours,
            minutes=factor * minutes,
            seconds=factor * seconds,
            nanoseconds=factor * int((frac or "").ljust(9, "0")),
        )

    @property
    def total_months(self) -> int:
        return self[0]

    @property
    def years(self) -> int:
        return symmetric_divmod(self[0], 12)[0]

    @property
    def months(self) -> int:
        """The months not covered by :attr:`years`."""
        return symmetric_divmod(self[0], 12)[1]

    @property
    def days(self) -> int:
        return self[1]

    @property
    def total_nanoseconds(self) -> int:
        return self[2]

    @property
    def hours(self) -> int:
        return symmetric_divmod(self[2], _NANOS_PER_HOUR)[0]

    @property
    def minutes(self) -> int:
        rest = symmetric_divmod(self[2], _NANOS_PER_HOUR)[1]
        return symmetric_divmod(rest, _NANOS_PER_MINUTE)[0]

    @property
    def seconds(self) -> int:
        rest = symmetric_divmod(self[2], _NANOS_PER_MINUTE)[1]
        return symmetric_divmod(rest, NANO_SECONDS)[0]

    @property
    def nanoseconds(self) -> int:
        return symmetric_divmod(self[2], NANO_SECONDS)[1]

    def __reduce__(self):
        return DateTimePeriod._build, tuple(self)

    def __bool__(self):
        return any(self)

    def __neg__(self):
        return DateTimePeriod._build(-self[0], -self[1], -self[2])

    def __pos__(self):
        return self

    def __add__(self, other):
        if isinstance(other, DateTimePeriod):
            try:
                months = safe_add(self[0], other[0], bits=32)
                days = safe_add(self[1], other[1], bits=32)
                nanoseconds = safe_add(self[2], other[2])
            except OverflowError as e:
                raise ValueError("Sum of %s and %s overflows"
                                 % (self, other)) from e
            return DateTimePeriod._build(months, days, nanoseconds)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, DateTimePeriod):
            return self + -other
        return NotImplemented

    def __repr__(self):
        return (
            "civiltime.DateTimePeriod(years=%r, months=%r, days=%r, "
            "hours=%r, minutes=%r, seconds=%r, nanoseconds=%r)"
            % (self.years, self.months, self.days, self.hours, self.minutes,
               self.seconds, self.nanoseconds)
        )

    def iso_format(self) -> str:
        """Return the period formatted as ISO string, e.g. ``P1Y2M3DT4H``.

        A negative period is prefixed with a minus sign and all of its
        components are written as positive numbers.
        """
        if not self:
            return "P0D"
        sign = "-" if min(self) < 0 else ""
        period = -self if sign else self
        parts = [sign, "P"]
        if period.years:
            parts.append("%dY" % period.years)
        if period.months:
            parts.append("%dM" % period.months)
        if period.days:
            parts.append("%dD" % period.days)
        if period.total_nanoseconds:
            parts.append("T")
            if period.hours:
                parts.append("%dH" % period.hours)
            if period.minutes:
                parts.append("%dM" % period.minutes)
            if period.seconds or period.nanoseconds:
                if period.nanoseconds:
                    fraction = ("%09d" % period.nanoseconds).rstrip("0")
                    parts.append("%d.%sS" % (period.seconds, fraction))
                else:
                    parts.append("%dS" % period.seconds)
        return "".join(parts)

    def __str__(self):
        return self.iso_format()


class DatePeriod(DateTimePeriod):
    """A :class:`.DateTimePeriod` without a time component.

    :param years: number of years
    :param months: number of months
    :param days: number of days

    :raises ValueError: if the components are of mixed signs or overflow
    """

    def __new__(  # type: ignore[override]
        cls, years: int = 0, months: int = 0, days: int = 0
    ) -> DatePeriod:
        return t.cast(DatePeriod, super().__new__(
            cls, years=years, months=months, days=days
        ))

    @classmethod
    def from_iso_format(cls, s: str) -> DatePeriod:
        """Parse an ISO formatted period string without time component.

        :raises DateTimeFormatError: if the string could not be parsed or
            contains a time component
        """
        period = DateTimePeriod.from_iso_format(s)
        if not isinstance(period, DatePeriod):
            raise DateTimeFormatError("Period %r has a time component" % s)
        return period

    def __repr__(self):
        return ("civiltime.DatePeriod(years=%r, months=%r, days=%r)"
                % (self.years, self.months, self.days))
