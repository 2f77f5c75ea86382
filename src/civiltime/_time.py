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
from re import compile as re_compile

from ._arithmetic import (
    NANO_SECONDS,
    NANOS_PER_DAY,
    NANOS_PER_MILLI,
    SECONDS_PER_DAY,
)
from .exceptions import DateTimeFormatError


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._date import LocalDate
    from ._datetime import LocalDateTime


__all__ = [
    "LocalTime",
]


TIME_ISO_PATTERN = re_compile(
    r"^(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?$"
)


def _format_fraction(nanosecond):
    # groups of three digits, as many as needed
    if nanosecond == 0:
        return ""
    if nanosecond % 1000000 == 0:
        return ".%03d" % (nanosecond // 1000000)
    if nanosecond % 1000 == 0:
        return ".%06d" % (nanosecond // 1000)
    return ".%09d" % nanosecond


@total_ordering
class LocalTime:
    """A time of day, without a date or time zone.

    :param hour: the hour. Minimum 0, maximum 23.
    :param minute: the minute. Minimum 0, maximum 59.
    :param second: the second. Minimum 0, maximum 59. Leap seconds are not
        supported.
    :param nanosecond: the nanosecond. Minimum 0, maximum 999,999,999.

    :raises ValueError: if any of the fields is out of range
    """

    min: te.Final[LocalTime]  # type: ignore[name-defined]
    max: te.Final[LocalTime]  # type: ignore[name-defined]

    def __new__(
        cls, hour: int, minute: int, second: int = 0, nanosecond: int = 0
    ) -> LocalTime:
        hour, minute = int(hour), int(minute)
        second, nanosecond = int(second), int(nanosecond)
        if not 0 <= hour < 24:
            raise ValueError("Hour out of range (0..23), got %d" % hour)
        if not 0 <= minute < 60:
            raise ValueError("Minute out of range (0..59), got %d" % minute)
        if not 0 <= second < 60:
            raise ValueError("Second out of range (0..59), got %d" % second)
        if not 0 <= nanosecond < NANO_SECONDS:
            raise ValueError("Nanosecond out of range (0..999999999), got %d"
                             % nanosecond)
        return cls._unchecked_new(hour, minute, second, nanosecond)

    @classmethod
    def _unchecked_new(
        cls, hour: int, minute: int, second: int, nanosecond: int
    ) -> LocalTime:
        instance = object.__new__(cls)
        instance.__hour = hour
        instance.__minute = minute
        instance.__second = second
        instance.__nanosecond = nanosecond
        return instance

    @classmethod
    def from_second_of_day(cls, second_of_day: int) -> LocalTime:
        """:raises ValueError: if not within 0 and 86,399"""
        if not 0 <= second_of_day < SECONDS_PER_DAY:
            raise ValueError("Second of day out of range (0..86399), got %d"
                             % second_of_day)
        return cls.from_nanosecond_of_day(second_of_day * NANO_SECONDS)

    @classmethod
    def from_millisecond_of_day(cls, millisecond_of_day: int) -> LocalTime:
        """:raises ValueError: if not within 0 and 86,399,999"""
        if not 0 <= millisecond_of_day < SECONDS_PER_DAY * 1000:
            raise ValueError("Millisecond of day out of range "
                             "(0..86399999), got %d" % millisecond_of_day)
        return cls.from_nanosecond_of_day(millisecond_of_day * NANOS_PER_MILLI)

    @classmethod
    def from_nanosecond_of_day(cls, nanosecond_of_day: int) -> LocalTime:
        """:raises ValueError: if not within 0 and 86,399,999,999,999"""
        if not 0 <= nanosecond_of_day < NANOS_PER_DAY:
            raise ValueError("Nanosecond of day out of range "
                             "(0..86399999999999), got %d" % nanosecond_of_day)
        seconds, nanosecond = divmod(int(nanosecond_of_day), NANO_SECONDS)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return cls._unchecked_new(hour, minute, second, nanosecond)

    @classmethod
    def from_iso_format(cls, s: str) -> LocalTime:
        """Parse an ISO formatted time string.

        Accepted formats:
            'HH:MM', 'HH:MM:SS', 'HH:MM:SS.fffffffff'

        :raises DateTimeFormatError: if the string could not be parsed.
        :raises ValueError: if a field is out of range.
        """
        m = TIME_ISO_PATTERN.match(s)
        if not m:
            raise DateTimeFormatError("Time string must be in format "
                                      "HH:MM[:SS[.fffffffff]], got %r" % s)
        hour, minute, second, fraction = m.groups()
        return cls(int(hour), int(minute), int(second or 0),
                   int((fraction or "").ljust(9, "0")))

    @property
    def hour(self) -> int:
        return self.__hour

    @property
    def minute(self) -> int:
        return self.__minute

    @property
    def second(self) -> int:
        return self.__second

    @property
    def nanosecond(self) -> int:
        return self.__nanosecond

    def to_second_of_day(self) -> int:
        return self.__hour * 3600 + self.__minute * 60 + self.__second

    def to_millisecond_of_day(self) -> int:
        return (self.to_second_of_day() * 1000
                + self.__nanosecond // NANOS_PER_MILLI)

    def to_nanosecond_of_day(self) -> int:
        return self.to_second_of_day() * NANO_SECONDS + self.__nanosecond

    def at_date(self, date: LocalDate) -> LocalDateTime:
        from ._datetime import LocalDateTime
        return LocalDateTime.combine(date, self)

    def __hash__(self):
        return hash(self.to_nanosecond_of_day())

    def __eq__(self, other):
        if isinstance(other, LocalTime):
            return self.to_nanosecond_of_day() == other.to_nanosecond_of_day()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, LocalTime):
            return self.to_nanosecond_of_day() < other.to_nanosecond_of_day()
        return NotImplemented

    def __reduce__(self):
        return type(self)._unchecked_new, (self.__hour, self.__minute,
                                           self.__second, self.__nanosecond)

    def __repr__(self):
        if self.__nanosecond:
            return "civiltime.LocalTime(%r, %r, %r, %r)" % (
                self.__hour, self.__minute, self.__second, self.__nanosecond
            )
        return "civiltime.LocalTime(%r, %r, %r)" % (
            self.__hour, self.__minute, self.__second
        )

    def iso_format(self) -> str:
        """Return the time formatted as ISO string.

        Seconds are left out when they and the nanoseconds are zero. The
        fraction is written with 3, 6 or 9 digits.
        """
        s = "%02d:%02d" % (self.__hour, self.__minute)
        if self.__second or self.__nanosecond:
            s += ":%02d" % self.__second + _format_fraction(self.__nanosecond)
        return s

    def __str__(self):
        return self.iso_format()


LocalTime.min = LocalTime._unchecked_new(0, 0, 0, 0)
LocalTime.max = LocalTime._unchecked_new(23, 59, 59, NANO_SECONDS - 1)
