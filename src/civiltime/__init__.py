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
Civil date, time and time zone arithmetic.

Example::

    from civiltime import DAY, Instant, TimeZone

    berlin = TimeZone.of("Europe/Berlin")
    tomorrow = Instant.now().plus(1, DAY, berlin)
    print(tomorrow.to_local_date_time(berlin))
"""


from ._clock import Clock
from ._conf import (
    configure,
    get_config,
    TimeZoneConfig,
)
from ._date import (
    DayOfWeek,
    LocalDate,
    Month,
)
from ._datetime import LocalDateTime
from ._duration import Duration
from ._instant import Instant
from ._meta import version as __version__
from ._offset import UtcOffset
from ._period import (
    DatePeriod,
    DateTimePeriod,
)
from ._time import LocalTime
from ._tzdb import (
    PytzTimeZoneDatabase,
    TimeZoneDatabase,
)
from ._units import (
    CENTURY,
    DateBased,
    DateTimeUnit,
    DAY,
    DayBased,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    MonthBased,
    NANOSECOND,
    QUARTER,
    SECOND,
    TimeBased,
    WEEK,
    YEAR,
)
from ._zone import (
    FixedOffsetTimeZone,
    RegionTimeZone,
    TimeZone,
)
from .exceptions import (
    ConfigurationError,
    DateTimeArithmeticError,
    DateTimeError,
    DateTimeFormatError,
    IllegalTimeZoneError,
    TimeZoneTransitionError,
)


__all__ = [
    "CENTURY",
    "DAY",
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "MONTH",
    "NANOSECOND",
    "QUARTER",
    "SECOND",
    "WEEK",
    "YEAR",
    "Clock",
    "ConfigurationError",
    "DateBased",
    "DatePeriod",
    "DateTimeArithmeticError",
    "DateTimeError",
    "DateTimeFormatError",
    "DateTimePeriod",
    "DateTimeUnit",
    "DayBased",
    "DayOfWeek",
    "Duration",
    "FixedOffsetTimeZone",
    "IllegalTimeZoneError",
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "Month",
    "MonthBased",
    "PytzTimeZoneDatabase",
    "RegionTimeZone",
    "TimeBased",
    "TimeZone",
    "TimeZoneConfig",
    "TimeZoneDatabase",
    "TimeZoneTransitionError",
    "UtcOffset",
    "__version__",
    "configure",
    "get_config",
]
