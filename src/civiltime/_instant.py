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
    clamp,
    MAX_INT64,
    MILLIS_PER_SECOND,
    MIN_INT64,
    NANO_SECONDS,
    NANOS_PER_MILLI,
    SECONDS_PER_DAY,
)
from ._date import (
    _ordinal_to_ymd,
    _UNIX_EPOCH_ORDINAL,
)
from ._datetime import LocalDateTime
from ._duration import Duration
from ._offset import UtcOffset
from ._time import _format_fraction
from .exceptions import DateTimeFormatError


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._clock import Clock
    from ._period import DateTimePeriod
    from ._units import DateTimeUnit
    from ._zone import TimeZone


__all__ = [
    "Instant",
]


#: Epoch second of -1000000000-01-01T00:00:00Z.
MIN_SECOND: te.Final[int] = -31557014167219200

#: Epoch second of +1000000000-12-31T23:59:59Z.
MAX_SECOND: te.Final[int] = 31556889864403199

INSTANT_ISO_PATTERN = re_compile(
    r"^([+-]?\d{4,10}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d{1,9})?)?)"
    r"([Zz]|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)$"
)


@total_ordering
class Instant:
    """A point on the UTC time-line, with nanosecond precision.

    An instant is stored as the number of seconds since the epoch
    (1970-01-01T00:00:00Z) and the nanoseconds within that second, which are
    always between 0 and 999,999,999.

    Instants range from :attr:`Instant.min` (year -1,000,000,000) to
    :attr:`Instant.max` (year 1,000,000,000). The range is chosen such that
    the difference between any two instants fits into a :class:`.Duration`.

    :param epoch_seconds: seconds since the epoch
    :param nanosecond_adjustment: nanoseconds to add, any value is allowed

    :raises ValueError: if the instant is out of range. Use
        :meth:`.from_epoch_seconds` for a saturating alternative.
    """

    min: te.Final[Instant]  # type: ignore[name-defined]
    max: te.Final[Instant]  # type: ignore[name-defined]
    distant_past: te.Final[Instant]  # type: ignore[name-defined]
    distant_future: te.Final[Instant]  # type: ignore[name-defined]

    def __new__(
        cls, epoch_seconds: int = 0, nanosecond_adjustment: int = 0
    ) -> Instant:
        seconds, nanoseconds = cls.__normalize(epoch_seconds,
                                               nanosecond_adjustment)
        if not MIN_SECOND <= seconds <= MAX_SECOND:
            raise ValueError("Instant exceeds minimum or maximum instant, "
                             "got %d seconds" % seconds)
        return cls._unchecked_new(seconds, nanoseconds)

    @classmethod
    def _unchecked_new(cls, epoch_seconds: int, nanosecond: int) -> Instant:
        instance = object.__new__(cls)
        instance.__seconds = epoch_seconds
        instance.__nanosecond = nanosecond
        return instance

    @staticmethod
    def __normalize(seconds, nanoseconds):
        carry, nanosecond = divmod(int(nanoseconds), NANO_SECONDS)
        return int(seconds) + carry, nanosecond

    @classmethod
    def _saturating_new(cls, seconds: int, nanoseconds: int) -> Instant:
        seconds, nanosecond = cls.__normalize(seconds, nanoseconds)
        if seconds < MIN_SECOND:
            return Instant.min
        if seconds > MAX_SECOND:
            return Instant.max
        return cls._unchecked_new(seconds, nanosecond)

    # CLASS METHODS #

    @classmethod
    def now(cls, clock: t.Optional[Clock] = None) -> Instant:
        """The current instant, read from `clock`.

        :param clock: the clock to read. If :data:`None`, the most precise
            clock available on this platform is used.
        """
        if clock is None:
            from ._clock import Clock
            clock = Clock()
        return clock.utc_time()

    @classmethod
    def from_epoch_seconds(
        cls, epoch_seconds: int, nanosecond_adjustment: int = 0
    ) -> Instant:
        """The instant `epoch_seconds` seconds and `nanosecond_adjustment`
        nanoseconds after the epoch.

        Results before :attr:`Instant.min` or after :attr:`Instant.max` are
        clamped to these bounds.
        """
        return cls._saturating_new(epoch_seconds, nanosecond_adjustment)

    @classmethod
    def from_epoch_milliseconds(cls, epoch_milliseconds: int) -> Instant:
        """The instant `epoch_milliseconds` milliseconds after the epoch.

        Results out of range are clamped to :attr:`Instant.min` or
        :attr:`Instant.max`.
        """
        seconds, millis = divmod(int(epoch_milliseconds), MILLIS_PER_SECOND)
        return cls._saturating_new(seconds, millis * NANOS_PER_MILLI)

    @classmethod
    def from_iso_format(cls, s: str) -> Instant:
        """Parse an ISO formatted instant, e.g. ``2021-03-15T02:30:00Z`` or
        ``2021-03-15T02:30:00+01:00``.

        :raises DateTimeFormatError: if the string could not be parsed or
            denotes an instant out of range.
        """
        m = INSTANT_ISO_PATTERN.match(s)
        if not m:
            raise DateTimeFormatError("Instant string must be in format "
                                      "YYYY-MM-DDTHH:MM:SS[.f]Z, got %r" % s)
        try:
            date_time = LocalDateTime.from_iso_format(m.group(1))
            offset = UtcOffset.from_iso_format(m.group(2).upper())
            return cls(date_time._to_epoch_seconds(offset.total_seconds),
                       date_time.nanosecond)
        except ValueError as e:
            raise DateTimeFormatError("Invalid instant %r: %s" % (s, e)) from e

    # PROPERTIES #

    @property
    def epoch_seconds(self) -> int:
        return self.__seconds

    @property
    def nanosecond_of_second(self) -> int:
        return self.__nanosecond

    @property
    def is_distant_past(self) -> bool:
        return self <= Instant.distant_past

    @property
    def is_distant_future(self) -> bool:
        return self >= Instant.distant_future

    def to_epoch_milliseconds(self) -> int:
        """Milliseconds since the epoch, clamped to the 64-bit range."""
        millis = (self.__seconds * MILLIS_PER_SECOND
                  + self.__nanosecond // NANOS_PER_MILLI)
        return clamp(millis, MIN_INT64, MAX_INT64)

    # ARITHMETIC #

    def __add__(self, other):
        if isinstance(other, Duration):
            return Instant._saturating_new(
                self.__seconds + other.seconds,
                self.__nanosecond + other.nanoseconds
            )
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Duration):
            return Instant._saturating_new(
                self.__seconds - other.seconds,
                self.__nanosecond - other.nanoseconds
            )
        if isinstance(other, Instant):
            return Duration._unchecked_new(*divmod(
                (self.__seconds - other.__seconds) * NANO_SECONDS
                + self.__nanosecond - other.__nanosecond,
                NANO_SECONDS
            ))
        return NotImplemented

    def plus(
        self,
        value: int,
        unit: DateTimeUnit,
        zone: t.Optional[TimeZone] = None,
    ) -> Instant:
        """Add `value` times `unit` to this instant.

        Time based units are added exactly and the result is clamped to
        :attr:`Instant.min` and :attr:`Instant.max`; `zone` is not needed.
        Date based units are added to the civil date in `zone`, keeping the
        time of day where possible.

        :raises ValueError: if `unit` is date based and no `zone` is given
        :raises DateTimeArithmeticError: if a date based result cannot be
            represented
        """
        from ._calendar import plus_units
        return plus_units(self, value, unit, zone)

    def minus(
        self,
        value: int,
        unit: DateTimeUnit,
        zone: t.Optional[TimeZone] = None,
    ) -> Instant:
        """Subtract `value` times `unit`, see :meth:`.plus`."""
        from ._calendar import plus_units
        return plus_units(self, -value, unit, zone)

    def plus_period(self, period: DateTimePeriod, zone: TimeZone) -> Instant:
        """Add the months, then the days, then the time part of `period`.

        :raises DateTimeArithmeticError: if the result cannot be represented
        """
        from ._calendar import plus_period
        return plus_period(self, period, zone)

    def minus_period(self, period: DateTimePeriod, zone: TimeZone) -> Instant:
        from ._calendar import plus_period
        return plus_period(self, -period, zone)

    def until(
        self,
        other: Instant,
        unit: DateTimeUnit,
        zone: t.Optional[TimeZone] = None,
    ) -> int:
        """The number of whole `unit` from this instant to `other`, rounded
        towards zero. Negative if `other` is earlier.

        :raises ValueError: if `unit` is date based and no `zone` is given
        :raises DateTimeArithmeticError: if the result does not fit into a
            64-bit integer
        """
        from ._calendar import until
        return until(self, other, unit, zone)

    def days_until(self, other: Instant, zone: TimeZone) -> int:
        from ._units import DAY
        return self.until(other, DAY, zone)

    def months_until(self, other: Instant, zone: TimeZone) -> int:
        from ._units import MONTH
        return self.until(other, MONTH, zone)

    def years_until(self, other: Instant, zone: TimeZone) -> int:
        from ._units import YEAR
        return self.until(other, YEAR, zone)

    def period_until(self, other: Instant, zone: TimeZone) -> DateTimePeriod:
        """The period between this instant and `other` as seen in `zone`.

        Whole months are counted first, then whole days, the rest is the
        time part. Adding the result to this instant with
        :meth:`.plus_period` gives `other` again.

        :raises DateTimeArithmeticError: if the number of months does not
            fit into a 32-bit integer
        """
        from ._calendar import period_until
        return period_until(self, other, zone)

    def minus_instant(
        self, other: Instant, zone: TimeZone
    ) -> DateTimePeriod:
        """The period from `other` to this instant as seen in `zone`, i.e.
        `other.period_until(self, zone)`.

        Use the `-` operator for the exact :class:`.Duration` instead.
        """
        return other.period_until(self, zone)

    # ZONES #

    def to_local_date_time(self, zone: TimeZone) -> LocalDateTime:
        """The civil reading of this instant in `zone`.

        :raises DateTimeArithmeticError: if the reading is out of the range
            of :class:`.LocalDateTime`
        """
        return zone.instant_to_local_date_time(self)

    def offset_in(self, zone: TimeZone) -> UtcOffset:
        return zone.offset_at(self)

    # COMPARISON #

    def __key(self):
        return self.__seconds, self.__nanosecond

    def __hash__(self):
        return hash(self.__key())

    def __eq__(self, other):
        if isinstance(other, Instant):
            return self.__key() == other.__key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Instant):
            return self.__key() < other.__key()
        return NotImplemented

    def __reduce__(self):
        return type(self)._unchecked_new, self.__key()

    # FORMATTING #

    def __repr__(self):
        return "civiltime.Instant(%r, %r)" % self.__key()

    def iso_format(self) -> str:
        """Return the instant formatted as ISO string in UTC, e.g.
        ``2021-03-15T02:30:00Z``."""
        epoch_day, second_of_day = divmod(self.__seconds, SECONDS_PER_DAY)
        year, month, day = _ordinal_to_ymd(epoch_day + _UNIX_EPOCH_ORDINAL)
        if year > 9999:
            year_text = "+%04d" % year
        elif year < 0:
            year_text = "-%04d" % -year
        else:
            year_text = "%04d" % year
        minutes, second = divmod(second_of_day, 60)
        hour, minute = divmod(minutes, 60)
        return "%s-%02d-%02dT%02d:%02d:%02d%sZ" % (
            year_text, month, day, hour, minute, second,
            _format_fraction(self.__nanosecond)
        )

    def __str__(self):
        return self.iso_format()


Instant.min = Instant._unchecked_new(MIN_SECOND, 0)
Instant.max = Instant._unchecked_new(MAX_SECOND, NANO_SECONDS - 1)
Instant.distant_past = Instant._unchecked_new(-3217862419201, NANO_SECONDS - 1)
Instant.distant_future = Instant._unchecked_new(3093527980800, 0)
