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

from civiltime._arithmetic import (
    clamp,
    fits,
    MAX_INT32,
    MAX_INT64,
    MIN_INT32,
    MIN_INT64,
    multiply_and_divide,
    safe_add,
    safe_multiply,
    symmetric_divmod,
)


@pytest.mark.parametrize(("value", "bits", "expected"), (
    (MAX_INT32, 32, True),
    (MAX_INT32 + 1, 32, False),
    (MIN_INT32, 32, True),
    (MIN_INT32 - 1, 32, False),
    (MAX_INT64, 64, True),
    (MAX_INT64 + 1, 64, False),
    (MIN_INT64, 64, True),
    (MIN_INT64 - 1, 64, False),
))
def test_fits(value, bits, expected) -> None:
    assert fits(value, bits) is expected


def test_fits_rejects_other_widths() -> None:
    with pytest.raises(ValueError):
        fits(1, 16)


def test_safe_add() -> None:
    assert safe_add(MAX_INT64 - 1, 1) == MAX_INT64
    with pytest.raises(OverflowError):
        safe_add(MAX_INT64, 1)
    with pytest.raises(OverflowError):
        safe_add(MIN_INT32, -1, bits=32)


def test_safe_multiply() -> None:
    assert safe_multiply(2 ** 31, 2 ** 31) == 2 ** 62
    with pytest.raises(OverflowError):
        safe_multiply(2 ** 32, 2 ** 31)
    with pytest.raises(OverflowError):
        safe_multiply(2 ** 16, 2 ** 15, bits=32)


@pytest.mark.parametrize(("dividend", "divisor", "expected"), (
    (7, 2, (3, 1)),
    (-7, 2, (-3, -1)),
    (6, 3, (2, 0)),
    (-6, 3, (-2, 0)),
    (0, 5, (0, 0)),
))
def test_symmetric_divmod(dividend, divisor, expected) -> None:
    assert symmetric_divmod(dividend, divisor) == expected


def test_multiply_and_divide_keeps_precision() -> None:
    # the intermediate product does not fit into 64 bits
    assert multiply_and_divide(MAX_INT64, 3600, 3600) == (MAX_INT64, 0)
    assert multiply_and_divide(-7, 3, 2) == (-10, -1)


def test_multiply_and_divide_overflow() -> None:
    with pytest.raises(OverflowError):
        multiply_and_divide(MAX_INT64, 2, 1)


def test_clamp() -> None:
    assert clamp(5, 0, 3) == 3
    assert clamp(-5, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
