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

import os
import typing as t
from abc import (
    ABCMeta,
    abstractmethod,
)
from datetime import (
    datetime,
    timedelta,
)
from logging import getLogger
from threading import Lock

import pytz

from ._arithmetic import clamp


if t.TYPE_CHECKING:
    from ._instant import Instant


__all__ = [
    "PytzTimeZoneDatabase",
    "TimeZoneDatabase",
]


log = getLogger("civiltime.tzdb")


class TimeZoneDatabase(metaclass=ABCMeta):
    """ Source of the rules of region based time zones.

    Implementations must be safe to call from multiple threads at once.
    Any cache they keep must be populated atomically per zone id.
    """

    @abstractmethod
    def offset_seconds_at(self, zone_id: str, instant: Instant) -> int:
        """ The UTC offset in seconds in force in `zone_id` at `instant`.

        Must be defined for every instant between :attr:`.Instant.min` and
        :attr:`.Instant.max`. Instants beyond the range the database has
        rules for are treated like the closest instant it knows about.

        :raises KeyError: if `zone_id` is unknown
        """

    @abstractmethod
    def current_system_zone_id(self) -> str:
        """ The id of the zone the host is currently configured to use.

        This must not be cached: a change of the host's configuration is
        reflected by the next call.
        """

    @abstractmethod
    def available_zone_ids(self) -> t.Set[str]:
        """ All zone ids this database knows about, including aliases.
        Always contains ``"UTC"``.
        """

    def has_zone(self, zone_id: str) -> bool:
        return zone_id in self.available_zone_ids()


_EPOCH = datetime(1970, 1, 1)
# leave one day of slack on both ends so shifting by an offset never
# leaves the range of datetime
_MIN_NATIVE_SECONDS = int((datetime(1, 1, 2) - _EPOCH).total_seconds())
_MAX_NATIVE_SECONDS = int((datetime(9999, 12, 30) - _EPOCH).total_seconds())

_ZONEINFO_MARKER = "zoneinfo" + os.sep


class PytzTimeZoneDatabase(TimeZoneDatabase):
    """ :class:`.TimeZoneDatabase` backed by the IANA database shipped with
    `pytz <https://pypi.org/project/pytz/>`_.

    Instants outside the range of :class:`datetime.datetime` (years 1 to
    9999) get the offset of the closest instant within it.

    :param localtime_path: path of the symlink naming the host's zone,
        consulted when the ``TZ`` environment variable is not set
    :param timezone_path: path of the file naming the host's zone, used as
        last resort
    """

    def __init__(
        self,
        localtime_path: str = "/etc/localtime",
        timezone_path: str = "/etc/timezone",
    ) -> None:
        self._localtime_path = localtime_path
        self._timezone_path = timezone_path
        self._zones: t.Dict[str, t.Any] = {}
        self._lock = Lock()

    def _zone(self, zone_id: str):
        try:
            return self._zones[zone_id]
        except KeyError:
            pass
        with self._lock:
            if zone_id not in self._zones:
                if zone_id not in pytz.all_timezones_set:
                    raise KeyError(zone_id)
                log.debug("<TZDB> loading zone %r", zone_id)
                self._zones[zone_id] = pytz.timezone(zone_id)
            return self._zones[zone_id]

    def offset_seconds_at(self, zone_id: str, instant: Instant) -> int:
        zone = self._zone(zone_id)
        seconds = clamp(instant.epoch_seconds,
                        _MIN_NATIVE_SECONDS, _MAX_NATIVE_SECONDS)
        utc = pytz.utc.localize(_EPOCH + timedelta(seconds=seconds))
        offset = utc.astimezone(zone).utcoffset()
        return int(offset.total_seconds())

    def has_zone(self, zone_id: str) -> bool:
        return zone_id in pytz.all_timezones_set

    def available_zone_ids(self) -> t.Set[str]:
        return set(pytz.all_timezones) | {"UTC"}

    def current_system_zone_id(self) -> str:
        zone_id = self._zone_id_from_env()
        if zone_id is None:
            zone_id = self._zone_id_from_localtime()
        if zone_id is None:
            zone_id = self._zone_id_from_timezone_file()
        if zone_id is None:
            log.debug("<TZDB> could not detect system zone, "
                      "using UTC")
            return "UTC"
        log.debug("<TZDB> detected system zone %r", zone_id)
        return zone_id

    def _known(self, candidate: t.Optional[str]) -> t.Optional[str]:
        if candidate and self.has_zone(candidate):
            return candidate
        return None

    def _zone_id_from_env(self) -> t.Optional[str]:
        value = os.environ.get("TZ")
        if not value:
            return None
        value = value.lstrip(":")
        if _ZONEINFO_MARKER in value:
            value = value.rsplit(_ZONEINFO_MARKER, 1)[1]
        return self._known(value)

    def _zone_id_from_localtime(self) -> t.Optional[str]:
        if not os.path.islink(self._localtime_path):
            return None
        target = os.path.realpath(self._localtime_path)
        if _ZONEINFO_MARKER not in target:
            return None
        return self._known(target.rsplit(_ZONEINFO_MARKER, 1)[1])

    def _zone_id_from_timezone_file(self) -> t.Optional[str]:
        try:
            with open(self._timezone_path, encoding="utf-8") as f:
                return self._known(f.readline().strip())
        except OSError:
            return None
