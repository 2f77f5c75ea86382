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
    SECONDS_PER_DAY,
    symmetric_divmod,
)
from .exceptions import DateTimeFormatError


if t.TYPE_CHECKING:
    import typing_extensions as te


__all__ = [
    "Duration",
]


DURATION_ISO_PATTERN = re_compile(
    r"^([+-])?P(?:(\d+)D)?"
    r"(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)(?:\.(\d{1,9}))?S)?)?$"
)


class Duration(t.Tuple[int, int]):  # type: ignore[misc]
    """An exact amount of time.

    Unlike a :class:`.DateTimePeriod`, a :class:`.Duration` does not depend on
    the calendar: one day is always 86,400 seconds. This is the type produced
    by subtracting two :class:`.Instant` objects.

    Internally the amount is stored as a number of `seconds` and a number of
    `nanoseconds` between 0 and 999,999,999 (inclusive), so
    ``Duration(nanoseconds=-1)`` is stored as ``(-1, 999999999)``.

    :param days: number of days (exactly 86,400 seconds each)
    :param hours: number of hours
    :param minutes: number of minutes
    :param seconds: number of seconds
    :param milliseconds: number of milliseconds
    :param microseconds: number of microseconds
    :param nanoseconds: number of nanoseconds

    :raises ValueError: if the total number of seconds does not fit into a
        signed 64-bit integer
    """

    zero: te.Final[Duration]  # type: ignore[name-defined]

    def __new__(
        cls,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        total = (
            NANO_SECONDS * (SECONDS_PER_DAY * int(days)
                            + 3600 * int(hours)
                            + 60 * int(minutes)
                            + int(seconds))
            + 1000000 * int(milliseconds)
            + 1000 * int(microseconds)
            + int(nanoseconds)
        )
        return cls.from_nanoseconds(total)

    @classmethod
    def from_nanoseconds(cls, total: int) -> Duration:
        """Build a :class:`.Duration` from a total number of nanoseconds.

        :raises ValueError: if the duration is out of range
        """
        s, ns = divmod(total, NANO_SECONDS)
        if not fits(s):
            raise ValueError("Duration of %d seconds is out of range" % s)
        return cls._unchecked_new(s, ns)

    @classmethod
    def _unchecked_new(cls, seconds: int, nanoseconds: int) -> Duration:
        return tuple.__new__(cls, (seconds, nanoseconds))

    @classmethod
    def from_iso_format(cls, s: str) -> Duration:
        """Parse an ISO formatted duration string.

        Accepted formats (all components optional):
            '[-]PnDTnHnMn.nS'

        :raises DateTimeFormatError: if the string could not be parsed
        """
        m = DURATION_ISO_PATTERN.match(s)
        if not m or s.endswith("T") or s in ("P", "-P", "+P"):
            raise DateTimeFormatError("Duration string must be in format "
                                      "PnDTnHnMn.nS, got %r" % s)
        sign, days, hours, minutes, seconds, fraction = m.groups()
        total = cls(
            days=int(days or 0),
            hours=int(hours or 0),
            minutes=int(minutes or 0),
            seconds=int(seconds or 0),
            nanoseconds=int((fraction or "").ljust(9, "0")),
        )
        return -total if sign == "-" else total

    @property
    def seconds(self) -> int:
        """The whole seconds of this duration, rounded down."""
        return self[0]

    @property
    def nanoseconds(self) -> int:
        """The nanoseconds on top of :attr:`seconds`, always non-negative."""
        return self[1]

    @property
    def total_nanoseconds(self) -> int:
        return self[0] * NANO_SECONDS + self[1]

    def in_whole_seconds(self) -> int:
        """The number of whole seconds, rounded towards zero."""
        return symmetric_divmod(self.total_nanoseconds, NANO_SECONDS)[0]

    def in_whole_milliseconds(self) -> int:
        """The number of whole milliseconds, rounded towards zero."""
        return symmetric_divmod(self.total_nanoseconds, 1000000)[0]

    def __reduce__(self):
        return type(self)._unchecked_new, tuple(self)

    def __bool__(self):
        return self[0] != 0 or self[1] != 0

    def __add__(self, other):
        if isinstance(other, Duration):
            return Duration.from_nanoseconds(
                self.total_nanoseconds + other.total_nanoseconds
            )
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Duration):
            return Duration.from_nanoseconds(
                self.total_nanoseconds - other.total_nanoseconds
            )
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, int):
            return Duration.from_nanoseconds(self.total_nanoseconds * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return Duration.from_nanoseconds(-self.total_nanoseconds)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self[0] < 0 else self

    def __repr__(self):
        return "civiltime.Duration(seconds=%r, nanoseconds=%r)" % self

    def iso_format(self) -> str:
        """Return the duration formatted as ISO string.

        Days are never used, so one day formats as ``PT24H``.
        """
        if not self:
            return "PT0S"
        negative = self[0] < 0
        total = abs(self.total_nanoseconds)
        s, ns = divmod(total, NANO_SECONDS)
        h, s = divmod(s, 3600)
        m, s = divmod(s, 60)
        parts = ["-PT" if negative else "PT"]
        if h:
            parts.append("%dH" % h)
        if m:
            parts.append("%dM" % m)
        if s or ns:
            if ns:
                parts.append("%d.%sS" % (s, ("%09d" % ns).rstrip("0")))
            else:
                parts.append("%dS" % s)
        return "".join(parts)

    def __str__(self):
        return self.iso_format()


Duration.zero = Duration._unchecked_new(0, 0)
