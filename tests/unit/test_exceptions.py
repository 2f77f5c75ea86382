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



import pytest

from civiltime import (
    ConfigurationError,
    DateTimeArithmeticError,
    DateTimeError,
    DateTimeFormatError,
    DAY,
    IllegalTimeZoneError,
    LocalDate,
    LocalDateTime,
    TimeZone,
    TimeZoneTransitionError,
)


@pytest.mark.parametrize(("error", "bases"), (
    (DateTimeArithmeticError, (DateTimeError, ArithmeticError)),
    (TimeZoneTransitionError, (DateTimeArithmeticError, DateTimeError)),
    (IllegalTimeZoneError, (DateTimeError, ValueError)),
    (DateTimeFormatError, (DateTimeError, ValueError)),
))
def test_hierarchy(error, bases) -> None:
    for base in bases:
        assert issubclass(error, base)


def test_configuration_error_is_not_a_date_time_error() -> None:
    assert not issubclass(ConfigurationError, DateTimeError)


def test_arithmetic_error_keeps_cause() -> None:
    with pytest.raises(DateTimeArithmeticError) as exc_info:
        LocalDate.max.plus(1, DAY)
    assert isinstance(exc_info.value.__cause__, (ValueError, OverflowError))


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        LocalDateTime.from_iso_format("2021-13-01T00:00")


def test_illegal_time_zone_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        TimeZone.of("Mars/Olympus_Mons")
