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

from ._arithmetic import symmetric_divmod
from .exceptions import DateTimeFormatError


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._zone import FixedOffsetTimeZone


__all__ = [
    "UtcOffset",
]


MAX_OFFSET_SECONDS = 18 * 3600

OFFSET_ISO_PATTERN = re_compile(
    r"^([+-])(?:(\d)|(\d{2})(?:(:?)(\d{2})(?:\4(\d{2}))?)?)$"
)


def _check_components(hours: int, minutes: int, seconds: int) -> None:
    if not -18 <= hours <= 18:
        raise ValueError("Zone offset hours not in valid range: value %d is "
                         "not in the range -18 to 18" % hours)
    if hours > 0 and (minutes < 0 or seconds < 0):
        raise ValueError("Zone offset minutes and seconds must be positive "
                         "because hours is positive")
    if hours < 0 and (minutes > 0 or seconds > 0):
        raise ValueError("Zone offset minutes and seconds must be negative "
                         "because hours is negative")
    if (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
        raise ValueError("Zone offset minutes and seconds must have the same "
                         "sign")
    if not -59 <= minutes <= 59:
        raise ValueError("Zone offset minutes not in valid range: value %d "
                         "is not in the range -59 to 59" % minutes)
    if not -59 <= seconds <= 59:
        raise ValueError("Zone offset seconds not in valid range: value %d "
                         "is not in the range -59 to 59" % seconds)
    if abs(hours) == 18 and (minutes or seconds):
        raise ValueError("Zone offset not in valid range: -18:00 to +18:00")


@total_ordering
class UtcOffset:
    """An offset from UTC, as used by a time zone at some instant.

    Any subset of `hours`, `minutes` and `seconds` can be given.

    * If `hours` is given, the offset is ``hours:minutes:seconds``
      (missing components default to 0).
    * Otherwise, if `minutes` is given, the minutes may exceed 59 and are
      split into hours and minutes, `seconds` are added.
    * Otherwise, the offset is `seconds` total seconds.

    All given components must have the same sign.

        >>> UtcOffset(hours=-3, minutes=-30).total_seconds
        -12600
        >>> UtcOffset(minutes=90)
        civiltime.UtcOffset(seconds=5400)

    :raises ValueError: if the components have mixed signs, are out of range,
        or the offset exceeds 18 hours in either direction
    """

    zero: te.Final[UtcOffset]  # type: ignore[name-defined]
    min: te.Final[UtcOffset]  # type: ignore[name-defined]
    max: te.Final[UtcOffset]  # type: ignore[name-defined]

    def __new__(
        cls,
        *,
        hours: t.Optional[int] = None,
        minutes: t.Optional[int] = None,
        seconds: t.Optional[int] = None,
    ) -> UtcOffset:
        if hours is not None:
            h, m, s = hours, minutes or 0, seconds or 0
        elif minutes is not None:
            h, m = symmetric_divmod(minutes, 60)
            s = seconds or 0
        else:
            return cls.of_seconds(seconds or 0)
        _check_components(h, m, s)
        return cls._unchecked_new(h * 3600 + m * 60 + s)

    @classmethod
    def _unchecked_new(cls, total_seconds: int) -> UtcOffset:
        instance = object.__new__(cls)
        instance.__total_seconds = int(total_seconds)
        return instance

    @classmethod
    def of_seconds(cls, total_seconds: int) -> UtcOffset:
        """Create an offset from its total number of seconds.

        :raises ValueError: if the offset exceeds 18 hours in either
            direction
        """
        if not -MAX_OFFSET_SECONDS <= total_seconds <= MAX_OFFSET_SECONDS:
            raise ValueError("Zone offset not in valid range: -18:00 to "
                             "+18:00, got %d seconds" % total_seconds)
        return cls._unchecked_new(total_seconds)

    @classmethod
    def from_iso_format(cls, s: str) -> UtcOffset:
        """Parse an ISO formatted offset string.

        Accepted formats:
            'Z', '+h', '+hh', '+hh:mm', '+hhmm', '+hh:mm:ss', '+hhmmss'

        :raises DateTimeFormatError: if the string could not be parsed
        :raises ValueError: if the offset is out of range
        """
        if s == "Z":
            return cls.zero
        m = OFFSET_ISO_PATTERN.match(s)
        if not m:
            raise DateTimeFormatError("Invalid UTC offset string %r" % s)
        sign = -1 if m.group(1) == "-" else 1
        hours = int(m.group(2) or m.group(3))
        minutes = int(m.group(5) or 0)
        seconds = int(m.group(6) or 0)
        return cls(hours=sign * hours, minutes=sign * minutes,
                   seconds=sign * seconds)

    @property
    def total_seconds(self) -> int:
        return self.__total_seconds

    def as_time_zone(self) -> FixedOffsetTimeZone:
        """The time zone that always has this offset."""
        from ._zone import FixedOffsetTimeZone
        return FixedOffsetTimeZone(self)

    def __hash__(self):
        return hash(self.__total_seconds)

    def __eq__(self, other):
        if isinstance(other, UtcOffset):
            return self.__total_seconds == other.__total_seconds
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, UtcOffset):
            return self.__total_seconds < other.__total_seconds
        return NotImplemented

    def __reduce__(self):
        return type(self)._unchecked_new, (self.__total_seconds,)

    def __repr__(self):
        return "civiltime.UtcOffset(seconds=%r)" % self.__total_seconds

    def iso_format(self) -> str:
        """Return the offset as ``Z`` or ``+hh:mm``, seconds are only
        included when non-zero."""
        if self.__total_seconds == 0:
            return "Z"
        sign = "-" if self.__total_seconds < 0 else "+"
        minutes, seconds = divmod(abs(self.__total_seconds), 60)
        hours, minutes = divmod(minutes, 60)
        s = "%s%02d:%02d" % (sign, hours, minutes)
        if seconds:
            s += ":%02d" % seconds
        return s

    def __str__(self):
        return self.iso_format()


UtcOffset.zero = UtcOffset._unchecked_new(0)
UtcOffset.min = UtcOffset._unchecked_new(-MAX_OFFSET_SECONDS)
UtcOffset.max = UtcOffset._unchecked_new(MAX_OFFSET_SECONDS)
