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
from functools import total_ordering

from ._arithmetic import (
    NANO_SECONDS,
    SECONDS_PER_DAY,
    symmetric_divmod,
)
from ._date import (
    DayOfWeek,
    LocalDate,
    Month,
)
from ._time import LocalTime
from ._units import (
    DateBased,
    DayBased,
    MonthBased,
)
from .exceptions import DateTimeFormatError


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._instant import Instant
    from ._offset import UtcOffset
    from ._zone import TimeZone


__all__ = [
    "LocalDateTime",
]


@total_ordering
class LocalDateTime:
    """A date and a time of day, without a time zone.

    A :class:`.LocalDateTime` is what a calendar and a wall clock show
    together. It can only be mapped to an :class:`.Instant` with the help of
    a :class:`.TimeZone`, see :meth:`.to_instant`.

    :param year: the year.
    :param month: the month (1 to 12).
    :param day: the day of the month.
    :param hour: the hour (0 to 23).
    :param minute: the minute (0 to 59).
    :param second: the second (0 to 59).
    :param nanosecond: the nanosecond (0 to 999,999,999).

    :raises ValueError: if any of the fields is out of range
    """

    min: te.Final[LocalDateTime]  # type: ignore[name-defined]
    max: te.Final[LocalDateTime]  # type: ignore[name-defined]

    def __new__(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = 0,
        nanosecond: int = 0,
    ) -> LocalDateTime:
        return cls.combine(LocalDate(year, month, day),
                           LocalTime(hour, minute, second, nanosecond))

    @classmethod
    def combine(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a :class:`.LocalDate` and a :class:`.LocalTime`."""
        if not isinstance(date, LocalDate):
            raise TypeError("Expected a LocalDate, got %r" % (date,))
        if not isinstance(time, LocalTime):
            raise TypeError("Expected a LocalTime, got %r" % (time,))
        instance = object.__new__(cls)
        instance.__date = date
        instance.__time = time
        return instance

    @classmethod
    def from_iso_format(cls, s: str) -> LocalDateTime:
        """Parse an ISO formatted date-time string.

        Accepted formats:
            'YYYY-MM-DDTHH:MM', 'YYYY-MM-DDTHH:MM:SS[.fffffffff]'

        :raises DateTimeFormatError: if the string could not be parsed.
        :raises ValueError: if a field is out of range.
        """
        date_str, sep, time_str = s.partition("T")
        if not sep:
            raise DateTimeFormatError("Date-time string must be in format "
                                      "YYYY-MM-DDTHH:MM:SS, got %r" % s)
        return cls.combine(LocalDate.from_iso_format(date_str),
                           LocalTime.from_iso_format(time_str))

    @classmethod
    def _from_epoch_seconds(
        cls, epoch_seconds: int, nanosecond: int, offset_seconds: int = 0
    ) -> LocalDateTime:
        # floor semantics: -1 second is 1969-12-31T23:59:59
        local_seconds = epoch_seconds + offset_seconds
        epoch_day, second_of_day = divmod(local_seconds, SECONDS_PER_DAY)
        date = LocalDate.from_epoch_days(epoch_day)
        time = LocalTime.from_nanosecond_of_day(
            second_of_day * NANO_SECONDS + nanosecond
        )
        return cls.combine(date, time)

    # PROPERTIES #

    def date(self) -> LocalDate:
        return self.__date

    def time(self) -> LocalTime:
        return self.__time

    @property
    def year(self) -> int:
        return self.__date.year

    @property
    def month_number(self) -> int:
        return self.__date.month_number

    @property
    def month(self) -> Month:
        return self.__date.month

    @property
    def day(self) -> int:
        return self.__date.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return self.__date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self.__date.day_of_year

    @property
    def hour(self) -> int:
        return self.__time.hour

    @property
    def minute(self) -> int:
        return self.__time.minute

    @property
    def second(self) -> int:
        return self.__time.second

    @property
    def nanosecond(self) -> int:
        return self.__time.nanosecond

    # OPERATIONS #

    def to_instant(
        self, zone: TimeZone, preferred_offset: t.Optional[UtcOffset] = None
    ) -> Instant:
        """The instant this date-time denotes in `zone`.

        See :meth:`.TimeZone.local_date_time_to_instant` for how readings
        that do not exist (gaps) or repeat (overlaps) are resolved.
        """
        return zone.local_date_time_to_instant(self, preferred_offset)

    def _to_epoch_seconds(self, offset_seconds: int = 0) -> int:
        return (self.__date.to_epoch_days() * SECONDS_PER_DAY
                + self.__time.to_second_of_day() - offset_seconds)

    def _plus_seconds(self, seconds: int) -> LocalDateTime:
        """:raises ValueError: if the result is out of range"""
        if not seconds:
            return self
        return LocalDateTime._from_epoch_seconds(
            self._to_epoch_seconds() + seconds, self.__time.nanosecond
        )

    def _end_date_towards(self, other: LocalDateTime) -> LocalDate:
        # A day only counts once the end's wall clock has reached the start's.
        end = other.__date
        if end > self.__date and other.__time < self.__time:
            return LocalDate.from_epoch_days(end.to_epoch_days() - 1)
        if end < self.__date and other.__time > self.__time:
            return LocalDate.from_epoch_days(end.to_epoch_days() + 1)
        return end

    def months_until(self, other: LocalDateTime) -> int:
        """The number of whole months between the two readings."""
        return self.__date.months_until(self._end_date_towards(other))

    def days_until(self, other: LocalDateTime) -> int:
        """The number of whole days between the two readings."""
        return self.__date.days_until(self._end_date_towards(other))

    def until(self, other: LocalDateTime, unit: DateBased) -> int:
        """The number of whole `unit` between the two readings, rounded
        towards zero.

        :raises TypeError: if `unit` is not a date-based unit
        """
        if isinstance(unit, MonthBased):
            return symmetric_divmod(self.months_until(other), unit.months)[0]
        if isinstance(unit, DayBased):
            return symmetric_divmod(self.days_until(other), unit.days)[0]
        raise TypeError("Only date based units are supported, got %r"
                        % (unit,))

    # COMPARISON #

    def __key(self):
        return self.__date, self.__time

    def __hash__(self):
        return hash(self.__key())

    def __eq__(self, other):
        if isinstance(other, LocalDateTime):
            return self.__key() == other.__key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, LocalDateTime):
            return self.__key() < other.__key()
        return NotImplemented

    def __reduce__(self):
        return type(self).combine, self.__key()

    # FORMATTING #

    def __repr__(self):
        fields = [self.year, self.month_number, self.day,
                  self.hour, self.minute, self.second]
        if self.nanosecond:
            fields.append(self.nanosecond)
        return "civiltime.LocalDateTime(%s)" % ", ".join(map(repr, fields))

    def iso_format(self) -> str:
        return "%sT%s" % (self.__date.iso_format(), self.__time.iso_format())

    def __str__(self):
        return self.iso_format()


LocalDateTime.min = LocalDateTime.combine(LocalDate.min, LocalTime.min)
LocalDateTime.max = LocalDateTime.combine(LocalDate.max, LocalTime.max)
