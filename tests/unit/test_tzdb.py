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



import logging
import os
from concurrent.futures import ThreadPoolExecutor

import pytest

from civiltime import (
    Instant,
    PytzTimeZoneDatabase,
    TimeZoneDatabase,
)


# 2021-03-28T01:00:00Z, start of daylight saving time in Europe
BERLIN_SPRING = 1616893200
# 2021-11-07T06:00:00Z, end of daylight saving time in New York
NEW_YORK_FALL = 1636264800


@pytest.fixture
def database(tmp_path) -> PytzTimeZoneDatabase:
    return PytzTimeZoneDatabase(
        localtime_path=str(tmp_path / "localtime"),
        timezone_path=str(tmp_path / "timezone"),
    )


@pytest.fixture
def no_tz_env(monkeypatch):
    monkeypatch.delenv("TZ", raising=False)


class TestPytzTimeZoneDatabase:

    def test_is_a_time_zone_database(self, database) -> None:
        assert isinstance(database, TimeZoneDatabase)

    @pytest.mark.parametrize(("zone_id", "epoch_seconds", "offset"), (
        ("Europe/Berlin", BERLIN_SPRING - 1, 3600),
        ("Europe/Berlin", BERLIN_SPRING, 7200),
        ("America/New_York", NEW_YORK_FALL - 1, -14400),
        ("America/New_York", NEW_YORK_FALL, -18000),
        ("Asia/Kolkata", 0, 19800),
        ("UTC", BERLIN_SPRING, 0),
    ))
    def test_offset_seconds_at(
        self, database, zone_id, epoch_seconds, offset
    ) -> None:
        assert database.offset_seconds_at(
            zone_id, Instant(epoch_seconds)
        ) == offset

    @pytest.mark.parametrize("instant", (
        Instant.min, Instant.distant_past, Instant.distant_future, Instant.max
    ))
    def test_offset_far_from_now(self, database, instant) -> None:
        offset = database.offset_seconds_at("Europe/Berlin", instant)
        assert isinstance(offset, int)
        assert -18 * 3600 <= offset <= 18 * 3600

    def test_unknown_zone(self, database) -> None:
        with pytest.raises(KeyError):
            database.offset_seconds_at("Mars/Olympus_Mons", Instant(0))

    def test_zone_ids(self, database) -> None:
        ids = database.available_zone_ids()
        assert "Europe/Berlin" in ids
        assert "UTC" in ids
        assert database.has_zone("America/New_York")
        assert not database.has_zone("Mars/Olympus_Mons")

    def test_concurrent_lookups(self, database) -> None:
        zone_ids = ["Europe/Berlin", "America/New_York", "Asia/Tokyo"] * 20

        def lookup(zone_id):
            return database.offset_seconds_at(zone_id, Instant(BERLIN_SPRING))

        with ThreadPoolExecutor(max_workers=8) as executor:
            offsets = list(executor.map(lookup, zone_ids))
        assert offsets == [7200, -14400, 32400] * 20

    @pytest.mark.parametrize(("value", "zone_id"), (
        ("Europe/Berlin", "Europe/Berlin"),
        (":Europe/Berlin", "Europe/Berlin"),
        ("/usr/share/zoneinfo/America/New_York", "America/New_York"),
        (":/usr/share/zoneinfo/Asia/Tokyo", "Asia/Tokyo"),
    ))
    def test_system_zone_from_env(
        self, database, monkeypatch, value, zone_id
    ) -> None:
        monkeypatch.setenv("TZ", value)
        assert database.current_system_zone_id() == zone_id

    @pytest.mark.skipif(not hasattr(os, "symlink") or os.sep != "/",
                        reason="needs POSIX symlinks")
    def test_system_zone_from_localtime(
        self, database, tmp_path, no_tz_env
    ) -> None:
        target = tmp_path / "zoneinfo" / "Asia" / "Tokyo"
        target.parent.mkdir(parents=True)
        target.write_bytes(b"")
        os.symlink(target, tmp_path / "localtime")
        assert database.current_system_zone_id() == "Asia/Tokyo"

    def test_system_zone_from_timezone_file(
        self, database, tmp_path, no_tz_env
    ) -> None:
        (tmp_path / "timezone").write_text("Europe/Paris\n")
        assert database.current_system_zone_id() == "Europe/Paris"

    def test_system_zone_is_not_cached(
        self, database, monkeypatch
    ) -> None:
        monkeypatch.setenv("TZ", "Europe/Berlin")
        assert database.current_system_zone_id() == "Europe/Berlin"
        monkeypatch.setenv("TZ", "Asia/Tokyo")
        assert database.current_system_zone_id() == "Asia/Tokyo"

    def test_unknown_system_zone_falls_back_to_utc(
        self, database, monkeypatch, tmp_path, caplog
    ) -> None:
        monkeypatch.setenv("TZ", "Mars/Olympus_Mons")
        (tmp_path / "timezone").write_text("Mars/Olympus_Mons\n")
        with caplog.at_level(logging.DEBUG, logger="civiltime.tzdb"):
            assert database.current_system_zone_id() == "UTC"
        assert "using UTC" in caplog.text
