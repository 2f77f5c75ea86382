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
    FixedOffsetTimeZone,
    UtcOffset,
)


class TestUtcOffset:

    @pytest.mark.parametrize(("kwargs", "expected"), (
        ({}, 0),
        ({"hours": 1}, 3600),
        ({"hours": -3, "minutes": -30}, -12600),
        ({"hours": 5, "minutes": 30, "seconds": 15}, 19815),
        ({"minutes": 90}, 5400),
        ({"minutes": -90, "seconds": -1}, -5401),
        ({"seconds": -3600}, -3600),
        ({"hours": 18}, 64800),
        ({"hours": -18}, -64800),
    ))
    def test_components(self, kwargs, expected) -> None:
        assert UtcOffset(**kwargs).total_seconds == expected

    @pytest.mark.parametrize("kwargs", (
        {"hours": 19},
        {"hours": -19},
        {"hours": 1, "minutes": -1},
        {"hours": -1, "seconds": 1},
        {"hours": 0, "minutes": 1, "seconds": -1},
        {"hours": 0, "minutes": 60},
        {"hours": 0, "seconds": 60},
        {"hours": 18, "minutes": 1},
        {"seconds": 18 * 3600 + 1},
        {"minutes": 18 * 60 + 1},
    ))
    def test_out_of_range(self, kwargs) -> None:
        with pytest.raises(ValueError):
            UtcOffset(**kwargs)

    def test_positional_arguments_are_rejected(self) -> None:
        with pytest.raises(TypeError):
            UtcOffset(1)  # type: ignore[misc]

    @pytest.mark.parametrize(("text", "expected"), (
        ("Z", 0),
        ("+1", 3600),
        ("-9", -32400),
        ("+01", 3600),
        ("+0130", 5400),
        ("+01:30", 5400),
        ("-01:30:15", -5415),
        ("-013015", -5415),
        ("+18:00", 64800),
    ))
    def test_from_iso_format(self, text, expected) -> None:
        assert UtcOffset.from_iso_format(text).total_seconds == expected

    @pytest.mark.parametrize("text", (
        "", "01:00", "+1:00", "+01:3015", "+0130:15", "+01:30:1", "UTC", "z",
    ))
    def test_from_iso_format_invalid(self, text) -> None:
        with pytest.raises(DateTimeFormatError):
            UtcOffset.from_iso_format(text)

    def test_from_iso_format_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            UtcOffset.from_iso_format("+19:00")

    @pytest.mark.parametrize(("offset", "expected"), (
        (UtcOffset.zero, "Z"),
        (UtcOffset(hours=5, minutes=30), "+05:30"),
        (UtcOffset(hours=-8), "-08:00"),
        (UtcOffset(seconds=-3661), "-01:01:01"),
    ))
    def test_iso_format(self, offset, expected) -> None:
        assert offset.iso_format() == expected
        assert str(offset) == expected

    def test_constants(self) -> None:
        assert UtcOffset.min == UtcOffset(hours=-18)
        assert UtcOffset.max == UtcOffset(hours=18)
        assert UtcOffset.zero == UtcOffset()

    def test_ordering_and_hash(self) -> None:
        assert UtcOffset(hours=1) < UtcOffset(hours=2)
        assert UtcOffset(hours=-1) < UtcOffset.zero
        assert UtcOffset(minutes=60) == UtcOffset(hours=1)
        assert hash(UtcOffset(minutes=60)) == hash(UtcOffset(hours=1))
        assert UtcOffset.zero != 0

    def test_as_time_zone(self) -> None:
        zone = UtcOffset(hours=2).as_time_zone()
        assert isinstance(zone, FixedOffsetTimeZone)
        assert zone.id == "+02:00"
        assert zone.offset == UtcOffset(hours=2)

    def test_repr(self) -> None:
        assert repr(UtcOffset(hours=-1)) == "civiltime.UtcOffset(seconds=-3600)"

    def test_pickle(self) -> None:
        offset = UtcOffset(hours=3, minutes=30)
        assert pickle.loads(pickle.dumps(offset)) == offset
