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



import pickle

import pytest

from civiltime import (
    DateTimeFormatError,
    DAY,
    DayOfWeek,
    HOUR,
    LocalDate,
    LocalDateTime,
    LocalTime,
    Month,
    MONTH,
    WEEK,
    YEAR,
)


class TestLocalDateTime:

    def test_fields(self) -> None:
        dt = LocalDateTime(2021, 3, 15, 12, 30, 45, 123)
        assert dt.year == 2021
        assert dt.month_number == 3
        assert dt.month is Month.MARCH
        assert dt.day == 15
        assert dt.day_of_week is DayOfWeek.MONDAY
        assert dt.day_of_year == 74
        assert dt.hour == 12
        assert dt.minute == 30
        assert dt.second == 45
        assert dt.nanosecond == 123
        assert dt.date() == LocalDate(2021, 3, 15)
        assert dt.time() == LocalTime(12, 30, 45, 123)

    def test_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            LocalDateTime(2021, 2, 29, 0, 0)
        with pytest.raises(ValueError):
            LocalDateTime(2021, 2, 28, 24, 0)

    def test_combine_checks_types(self) -> None:
        with pytest.raises(TypeError):
            LocalDateTime.combine(LocalTime(1, 2),  # type: ignore[arg-type]
                                  LocalDate(2021, 1, 1))

    @pytest.mark.parametrize(("start", "end", "months"), (
        ((2021, 1, 15, 12, 0), (2021, 2, 15, 11, 0), 0),
        ((2021, 1, 15, 12, 0), (2021, 2, 15, 12, 0), 1),
        ((2021, 2, 15, 12, 0), (2021, 1, 15, 13, 0), 0),
        ((2021, 2, 15, 12, 0), (2021, 1, 15, 12, 0), -1),
        ((2021, 1, 31, 0, 0), (2021, 2, 28, 23, 59), 0),
    ))
    def test_months_until(self, start, end, months) -> None:
        start, end = LocalDateTime(*start), LocalDateTime(*end)
        assert start.months_until(end) == months
        assert start.until(end, MONTH) == months

    @pytest.mark.parametrize(("start", "end", "days"), (
        ((2021, 3, 13, 2, 30), (2021, 3, 14, 2, 29), 0),
        ((2021, 3, 13, 2, 30), (2021, 3, 14, 2, 30), 1),
        ((2021, 3, 14, 2, 30), (2021, 3, 13, 2, 31), 0),
        ((2021, 3, 14, 2, 30), (2021, 3, 13, 2, 30), -1),
        ((2021, 3, 13, 2, 30), (2021, 3, 13, 1, 0), 0),
    ))
    def test_days_until(self, start, end, days) -> None:
        start, end = LocalDateTime(*start), LocalDateTime(*end)
        assert start.days_until(end) == days
        assert start.until(end, DAY) == days

    def test_until(self) -> None:
        start = LocalDateTime(2020, 2, 29, 12, 0)
        assert start.until(LocalDateTime(2021, 3, 1, 11, 0), YEAR) == 0
        assert start.until(LocalDateTime(2021, 3, 1, 12, 0), YEAR) == 1
        assert start.until(LocalDateTime(2020, 3, 14, 12, 0), WEEK) == 2
        with pytest.raises(TypeError):
            start.until(start, HOUR)  # type: ignore[arg-type]

    @pytest.mark.parametrize(("date_time", "text"), (
        (LocalDateTime(2021, 3, 15, 12, 30), "2021-03-15T12:30"),
        (LocalDateTime(2021, 3, 15, 12, 30, 1), "2021-03-15T12:30:01"),
        (LocalDateTime(2021, 3, 15, 0, 0, 0, 500000000),
         "2021-03-15T00:00:00.500"),
        (LocalDateTime(-1, 1, 1, 0, 0), "-0001-01-01T00:00"),
    ))
    def test_iso_format_round_trip(self, date_time, text) -> None:
        assert date_time.iso_format() == text
        assert str(date_time) == text
        assert LocalDateTime.from_iso_format(text) == date_time

    @pytest.mark.parametrize("text", (
        "2021-03-15", "2021-03-15 12:30", "2021-03-15T", "T12:30",
        "2021-03-15T12:30Z",
    ))
    def test_from_iso_format_invalid(self, text) -> None:
        with pytest.raises(DateTimeFormatError):
            LocalDateTime.from_iso_format(text)

    def test_bounds(self) -> None:
        assert LocalDateTime.min.date() == LocalDate.min
        assert LocalDateTime.min.time() == LocalTime.min
        assert LocalDateTime.max.date() == LocalDate.max
        assert LocalDateTime.max.time() == LocalTime.max

    def test_ordering_and_hash(self) -> None:
        a = LocalDateTime(2021, 3, 15, 12, 30)
        b = LocalDateTime(2021, 3, 15, 12, 30, 0, 1)
        assert a < b
        assert LocalDateTime(2021, 3, 14, 23, 59) < a
        assert a == LocalDateTime.combine(LocalDate(2021, 3, 15),
                                          LocalTime(12, 30))
        assert hash(a) == hash(LocalDateTime(2021, 3, 15, 12, 30))

    def test_repr(self) -> None:
        assert repr(LocalDateTime(2021, 3, 15, 12, 30)) \
            == "civiltime.LocalDateTime(2021, 3, 15, 12, 30, 0)"
        assert repr(LocalDateTime(2021, 3, 15, 12, 30, 1, 2)) \
            == "civiltime.LocalDateTime(2021, 3, 15, 12, 30, 1, 2)"

    def test_pickle(self) -> None:
        dt = LocalDateTime(2021, 3, 15, 12, 30, 1, 2)
        assert pickle.loads(pickle.dumps(dt)) == dt
