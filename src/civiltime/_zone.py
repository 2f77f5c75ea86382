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
Time zones map instants to civil date-times and back.

There are exactly two kinds of time zones: :class:`.FixedOffsetTimeZone`
always uses the same :class:`.UtcOffset`, :class:`.RegionTimeZone` looks
the offset up in a :class:`.TimeZoneDatabase`. Both are created with
:meth:`.TimeZone.of`.
"""


from __future__ import annotations

import typing as t
from logging import getLogger

from ._conf import get_config
from ._datetime import LocalDateTime
from ._instant import Instant
from ._meta import deprecated_property
from ._offset import (
    MAX_OFFSET_SECONDS,
    UtcOffset,
)
from ._time import LocalTime
from .exceptions import (
    DateTimeArithmeticError,
    IllegalTimeZoneError,
    TimeZoneTransitionError,
)


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._date import LocalDate
    from ._tzdb import TimeZoneDatabase


__all__ = [
    "FixedOffsetTimeZone",
    "RegionTimeZone",
    "TimeZone",
]


log = getLogger("civiltime.zone")


_FIXED_PREFIXES = ("UTC", "GMT", "UT")


class TimeZone:
    """A time zone: the rules that tell which :class:`.UtcOffset` is in
    force at a given :class:`.Instant`.

    Time zones are created with :meth:`.of`, :meth:`.current_system_default`
    or :attr:`.TimeZone.utc`. Two zones are equal if their ids are equal.

    :class:`TimeZone` can't be subclassed: every zone is either a
    :class:`.FixedOffsetTimeZone` or a :class:`.RegionTimeZone`.
    """

    utc: te.Final[FixedOffsetTimeZone]  # type: ignore[name-defined]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("TimeZone can only be a FixedOffsetTimeZone or a "
                            "RegionTimeZone, %s is not allowed"
                            % cls.__qualname__)

    def __new__(cls, *args, **kwargs):
        if cls is TimeZone:
            raise TypeError("Use TimeZone.of() to obtain a time zone")
        return super().__new__(cls)

    # FACTORIES #

    @staticmethod
    def of(zone_id: str) -> TimeZone:
        """Obtain the time zone with the given id.

        Accepted ids:

        * ``Z`` and offsets like ``+01:00``, ``-0530`` or ``+3``,
        * ``UTC``, ``GMT`` and ``UT``, optionally followed by an offset,
          e.g. ``UTC+01:00``,
        * any region id known to the configured
          :class:`.TimeZoneDatabase`, e.g. ``Europe/Berlin``.

        :raises IllegalTimeZoneError: if the id is malformed or unknown
        """
        if not isinstance(zone_id, str) or not zone_id:
            raise IllegalTimeZoneError("Invalid time zone id %r" % (zone_id,))
        if zone_id == "Z" or zone_id[0] in "+-":
            return FixedOffsetTimeZone(_parse_offset(zone_id, zone_id))
        for prefix in _FIXED_PREFIXES:
            if zone_id == prefix:
                return FixedOffsetTimeZone(UtcOffset.zero, zone_id)
            if zone_id.startswith(prefix) and zone_id[len(prefix)] in "+-":
                offset = _parse_offset(zone_id[len(prefix):], zone_id)
                if offset == UtcOffset.zero:
                    return FixedOffsetTimeZone(offset, prefix)
                return FixedOffsetTimeZone(offset, prefix + str(offset))
        return RegionTimeZone(zone_id)

    @staticmethod
    def current_system_default() -> TimeZone:
        """The time zone the host is currently configured to use.

        The host is asked on every call, so changes of its configuration
        are picked up immediately.
        """
        database = get_config().time_zone_database
        return TimeZone.of(database.current_system_zone_id())

    @staticmethod
    def available_zone_ids() -> t.Set[str]:
        """All ids accepted by :meth:`.of` besides fixed offsets."""
        return get_config().time_zone_database.available_zone_ids()

    # PROPERTIES #

    @property
    def id(self) -> str:
        raise NotImplementedError

    # CONVERSIONS #

    def offset_at(self, instant: Instant) -> UtcOffset:
        """The offset in force at `instant`."""
        raise NotImplementedError

    def instant_to_local_date_time(self, instant: Instant) -> LocalDateTime:
        """The civil reading of `instant` in this zone.

        :raises DateTimeArithmeticError: if the reading is out of the range
            of :class:`.LocalDateTime`
        """
        return self._zoned(instant)[0]

    def local_date_time_to_instant(
        self,
        date_time: LocalDateTime,
        preferred_offset: t.Optional[UtcOffset] = None,
    ) -> Instant:
        """The instant at which a clock in this zone shows `date_time`.

        If the clocks are turned back, a reading occurs twice (overlap). The
        instant using `preferred_offset` is returned if it is one of the
        two. Otherwise the earlier of the two instants is returned.

        If the clocks are turned forward, some readings are skipped (gap).
        Such a reading is moved forward by the length of the gap, so
        02:30 in a gap from 02:00 to 03:00 resolves to 03:30.

        :raises DateTimeArithmeticError: if moving a reading out of a gap
            leaves the range of :class:`.LocalDateTime`
        :raises TimeZoneTransitionError: if the database reports a gap that
            is not positive or longer than ``max_transition_seconds``
        """
        return _instant_of(*self._at_zone(date_time, preferred_offset))

    def at_start_of_day(self, date: LocalDate) -> Instant:
        """The first instant of `date` in this zone.

        That is midnight unless midnight falls into a gap, then it is the
        end of the gap.
        """
        return self.local_date_time_to_instant(
            LocalDateTime.combine(date, LocalTime.min)
        )

    def _zoned(self, instant: Instant) -> t.Tuple[LocalDateTime, UtcOffset]:
        offset = self.offset_at(instant)
        try:
            date_time = LocalDateTime._from_epoch_seconds(
                instant.epoch_seconds, instant.nanosecond_of_second,
                offset.total_seconds
            )
        except ValueError as e:
            raise DateTimeArithmeticError(
                "Instant %s is out of LocalDateTime range in %s"
                % (instant, self)
            ) from e
        return date_time, offset

    def _at_zone(
        self,
        date_time: LocalDateTime,
        preferred_offset: t.Optional[UtcOffset],
    ) -> t.Tuple[LocalDateTime, UtcOffset]:
        raise NotImplementedError

    # COMPARISON #

    def __eq__(self, other):
        if isinstance(other, TimeZone):
            return self.id == other.id
        return NotImplemented

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return self.id


def _parse_offset(text: str, zone_id: str) -> UtcOffset:
    try:
        return UtcOffset.from_iso_format(text)
    except ValueError as e:
        raise IllegalTimeZoneError("Invalid time zone id %r: %s"
                                   % (zone_id, e)) from e


def _instant_of(date_time: LocalDateTime, offset: UtcOffset) -> Instant:
    try:
        return Instant(date_time._to_epoch_seconds(offset.total_seconds),
                       date_time.nanosecond)
    except ValueError as e:
        raise DateTimeArithmeticError(
            "%s at offset %s is out of Instant range" % (date_time, offset)
        ) from e


class FixedOffsetTimeZone(TimeZone):
    """A time zone that always has the same offset.

    :param offset: the offset
    :param zone_id: the id of the zone, defaults to the ISO representation
        of `offset`
    """

    def __init__(
        self, offset: UtcOffset, zone_id: t.Optional[str] = None
    ) -> None:
        if not isinstance(offset, UtcOffset):
            raise TypeError("Expected a UtcOffset, got %r" % (offset,))
        self.__offset = offset
        self.__id = zone_id or offset.iso_format()

    @property
    def id(self) -> str:
        return self.__id

    @property
    def offset(self) -> UtcOffset:
        return self.__offset

    @deprecated_property("FixedOffsetTimeZone.total_seconds is deprecated, "
                         "use offset.total_seconds instead.")
    def total_seconds(self) -> int:
        return self.__offset.total_seconds

    def offset_at(self, instant: Instant) -> UtcOffset:
        return self.__offset

    def _at_zone(self, date_time, preferred_offset):
        return date_time, self.__offset

    def __repr__(self):
        return "civiltime.FixedOffsetTimeZone(%r, %r)" % (self.__offset,
                                                          self.__id)


class RegionTimeZone(TimeZone):
    """A time zone whose offsets are looked up in a
    :class:`.TimeZoneDatabase`.

    Prefer :meth:`.TimeZone.of` over creating instances directly.

    :param zone_id: the id of the zone, e.g. ``Europe/Berlin``
    :param database: the database to look the offsets up in. Defaults to the
        ``time_zone_database`` of the active configuration.

    :raises IllegalTimeZoneError: if the database does not know the zone
    """

    def __init__(
        self,
        zone_id: str,
        database: t.Optional[TimeZoneDatabase] = None,
    ) -> None:
        if database is None:
            database = get_config().time_zone_database
        if not database.has_zone(zone_id):
            raise IllegalTimeZoneError("Unknown time zone id %r" % zone_id)
        self.__id = zone_id
        self.__database = database

    @property
    def id(self) -> str:
        return self.__id

    @property
    def database(self) -> TimeZoneDatabase:
        return self.__database

    def offset_at(self, instant: Instant) -> UtcOffset:
        return UtcOffset.of_seconds(
            self.__database.offset_seconds_at(self.__id, instant)
        )

    def __offset_seconds_at(self, epoch_seconds: int) -> int:
        return self.__database.offset_seconds_at(
            self.__id, Instant.from_epoch_seconds(epoch_seconds)
        )

    def _at_zone(self, date_time, preferred_offset):
        local_seconds = date_time._to_epoch_seconds()
        early = self.__offset_seconds_at(local_seconds - MAX_OFFSET_SECONDS)
        late = self.__offset_seconds_at(local_seconds + MAX_OFFSET_SECONDS)
        candidates = {
            early, late,
            self.__offset_seconds_at(local_seconds - early),
            self.__offset_seconds_at(local_seconds - late),
        }
        # earlier instants first
        valid = sorted(
            (offset for offset in candidates
             if self.__offset_seconds_at(local_seconds - offset) == offset),
            reverse=True
        )

        if len(valid) == 1:
            return date_time, UtcOffset.of_seconds(valid[0])

        if valid:
            offsets = [UtcOffset.of_seconds(offset) for offset in valid]
            if preferred_offset in offsets:
                offset = preferred_offset
            else:
                offset = offsets[0]
            log.debug("<ZONE> %s: %s occurs at offsets %s, using %s",
                      self.__id, date_time,
                      ", ".join(map(str, offsets)), offset)
            return date_time, offset

        offset_seconds = self.__offset_seconds_at(local_seconds - early)
        transition = offset_seconds - early
        max_transition = get_config().max_transition_seconds
        if transition <= 0 or transition > max_transition:
            raise TimeZoneTransitionError(
                "Anomalous transition of %d seconds reported for %s in %s"
                % (transition, date_time, self.__id)
            )
        try:
            corrected = date_time._plus_seconds(transition)
        except ValueError as e:
            raise DateTimeArithmeticError(
                "Overflow when moving %s out of the transition gap in %s"
                % (date_time, self.__id)
            ) from e
        log.debug("<ZONE> %s: %s falls into a gap of %d seconds, using %s",
                  self.__id, date_time, transition, corrected)
        return corrected, UtcOffset.of_seconds(offset_seconds)

    def __repr__(self):
        return "civiltime.RegionTimeZone(%r)" % self.__id


TimeZone.utc = FixedOffsetTimeZone(UtcOffset.zero)
