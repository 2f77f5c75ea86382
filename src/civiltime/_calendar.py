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
Calendar arithmetic on instants.

Date based units and periods are applied to the civil reading of an
instant in a time zone and the result is mapped back to an instant,
preferring the offset the instant had before.
"""


from __future__ import annotations

import typing as t

from ._arithmetic import (
    fits,
    multiply_and_divide,
    NANO_SECONDS,
    symmetric_divmod,
)
from ._datetime import LocalDateTime
from ._instant import Instant
from ._offset import UtcOffset
from ._period import DateTimePeriod
from ._units import (
    DateBased,
    DateTimeUnit,
    DAY,
    MONTH,
    TimeBased,
)
from .exceptions import DateTimeArithmeticError


if t.TYPE_CHECKING:
    from ._zone import TimeZone


__all__ = [
    "period_until",
    "plus_period",
    "plus_units",
    "until",
]


_Zoned = t.Tuple[LocalDateTime, UtcOffset]


def _require_zone(zone: t.Optional[TimeZone], unit: DateTimeUnit) -> None:
    if zone is None:
        raise ValueError("A time zone is required for date based unit %s"
                         % unit)


def _advance(
    zone: TimeZone, zoned: _Zoned, value: int, unit: DateBased
) -> _Zoned:
    date_time, offset = zoned
    date = date_time.date().plus(value, unit)
    return zone._at_zone(LocalDateTime.combine(date, date_time.time()),
                         offset)


def _to_instant(zoned: _Zoned) -> Instant:
    date_time, offset = zoned
    return Instant(date_time._to_epoch_seconds(offset.total_seconds),
                   date_time.nanosecond)


def plus_units(
    instant: Instant,
    value: int,
    unit: DateTimeUnit,
    zone: t.Optional[TimeZone],
) -> Instant:
    if isinstance(unit, TimeBased):
        try:
            seconds, nanoseconds = multiply_and_divide(
                value, unit.nanoseconds, NANO_SECONDS
            )
        except OverflowError:
            return Instant.max if value > 0 else Instant.min
        return Instant._saturating_new(
            instant.epoch_seconds + seconds,
            instant.nanosecond_of_second + nanoseconds
        )
    if not isinstance(unit, DateBased):
        raise TypeError("Expected a DateTimeUnit, got %r" % (unit,))
    _require_zone(zone, unit)
    assert zone is not None
    try:
        return _to_instant(_advance(zone, zone._zoned(instant), value, unit))
    except (DateTimeArithmeticError, ValueError) as e:
        raise DateTimeArithmeticError(
            "Instant %s cannot be represented as local date when adding "
            "%d %s to it" % (instant, value, unit)
        ) from e


def plus_period(
    instant: Instant, period: DateTimePeriod, zone: TimeZone
) -> Instant:
    try:
        zoned = zone._zoned(instant)
        if period.total_months:
            zoned = _advance(zone, zoned, period.total_months, MONTH)
        if period.days:
            zoned = _advance(zone, zoned, period.days, DAY)
        result = _to_instant(zoned)
        if period.total_nanoseconds:
            result = Instant(
                result.epoch_seconds,
                result.nanosecond_of_second + period.total_nanoseconds
            )
        return result
    except (DateTimeArithmeticError, ValueError) as e:
        raise DateTimeArithmeticError(
            "Boundaries of Instant exceeded when adding %s to %s in %s"
            % (period, instant, zone)
        ) from e


def until(
    instant: Instant,
    other: Instant,
    unit: DateTimeUnit,
    zone: t.Optional[TimeZone],
) -> int:
    if isinstance(unit, TimeBased):
        nanoseconds = (other - instant).total_nanoseconds
        result = symmetric_divmod(nanoseconds, unit.nanoseconds)[0]
    elif isinstance(unit, DateBased):
        _require_zone(zone, unit)
        assert zone is not None
        start = zone.instant_to_local_date_time(instant)
        end = zone.instant_to_local_date_time(other)
        result = start.until(end, unit)
    else:
        raise TypeError("Expected a DateTimeUnit, got %r" % (unit,))
    if not fits(result):
        raise DateTimeArithmeticError(
            "The number of %s between %s and %s does not fit into a 64-bit "
            "integer" % (unit, instant, other)
        )
    return result


def _step(
    zone: TimeZone,
    zoned: _Zoned,
    count: int,
    unit: DateBased,
    end: Instant,
    direction: int,
) -> t.Tuple[int, _Zoned]:
    # Transitions may push the advanced reading past the end; step back
    # until it doesn't so every component keeps the same sign.
    while count:
        advanced = _advance(zone, zoned, count, unit)
        remaining = end - _to_instant(advanced)
        if remaining.total_nanoseconds * direction >= 0:
            return count, advanced
        count -= direction
    return 0, zoned


def period_until(
    instant: Instant, other: Instant, zone: TimeZone
) -> DateTimePeriod:
    direction = -1 if other < instant else 1
    start = zone._zoned(instant)
    end = zone.instant_to_local_date_time(other)

    months = start[0].months_until(end)
    if not fits(months, 32):
        raise DateTimeArithmeticError(
            "The number of months between %s and %s does not fit into a "
            "32-bit integer" % (instant, other)
        )
    try:
        months, start = _step(zone, start, months, MONTH, other, direction)
        days = start[0].days_until(end)
        days, start = _step(zone, start, days, DAY, other, direction)
    except ValueError as e:
        raise DateTimeArithmeticError(
            "Cannot compute the period between %s and %s in %s"
            % (instant, other, zone)
        ) from e
    nanoseconds = (other - _to_instant(start)).total_nanoseconds
    return DateTimePeriod._build(months, days, nanoseconds)
