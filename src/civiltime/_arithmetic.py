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


__all__ = [
    "MIN_INT32",
    "MAX_INT32",
    "MIN_INT64",
    "MAX_INT64",
    "NANO_SECONDS",
    "clamp",
    "fits",
    "multiply_and_divide",
    "safe_add",
    "safe_multiply",
    "symmetric_divmod",
]


MIN_INT32 = -(2 ** 31)
MAX_INT32 = (2 ** 31) - 1
MIN_INT64 = -(2 ** 63)
MAX_INT64 = (2 ** 63) - 1

NANO_SECONDS = 1000000000
NANOS_PER_MILLI = 1000000
MILLIS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
NANOS_PER_DAY = SECONDS_PER_DAY * NANO_SECONDS


def _bounds(bits: int) -> t.Tuple[int, int]:
    if bits == 32:
        return MIN_INT32, MAX_INT32
    if bits == 64:
        return MIN_INT64, MAX_INT64
    raise ValueError("Unsupported integer width %r (32 or 64)" % bits)


def fits(value: int, bits: int = 64) -> bool:
    """ Check whether `value` can be represented as a signed integer of
    the given width.

        >>> fits(2 ** 31 - 1, bits=32)
        True
        >>> fits(2 ** 31, bits=32)
        False
    """
    low, high = _bounds(bits)
    return low <= value <= high


def _checked(value: int, bits: int, operation: str) -> int:
    if not fits(value, bits):
        raise OverflowError("%s overflows a %d-bit signed integer"
                            % (operation, bits))
    return value


def safe_add(x: int, y: int, bits: int = 64) -> int:
    """ Add two integers, failing instead of wrapping around.

        >>> safe_add(MAX_INT64, 0)
        9223372036854775807
        >>> safe_add(MAX_INT64, 1)
        Traceback (most recent call last):
        ...
        OverflowError: Addition 9223372036854775807 + 1 overflows a 64-bit signed integer

    :param x: first operand
    :param y: second operand
    :param bits: width of the signed integer the result must fit into

    :raises OverflowError: if the sum is out of range
    """
    return _checked(x + y, bits, "Addition %d + %d" % (x, y))


def safe_multiply(x: int, y: int, bits: int = 64) -> int:
    """ Multiply two integers, failing instead of wrapping around.

    :param x: first operand
    :param y: second operand
    :param bits: width of the signed integer the result must fit into

    :raises OverflowError: if the product is out of range
    """
    return _checked(x * y, bits, "Multiplication %d * %d" % (x, y))


_T_dividend = t.TypeVar("_T_dividend", int, float)


def symmetric_divmod(
    dividend: _T_dividend, divisor: int
) -> t.Tuple[int, _T_dividend]:
    """ Division rounding the quotient towards zero. The remainder carries
    the sign of the dividend.

        >>> divmod(-7, 2)
        (-4, 1)
        >>> symmetric_divmod(-7, 2)
        (-3, -1)
    """
    number = type(dividend)
    if dividend >= 0:
        quotient, remainder = divmod(dividend, divisor)
        return int(quotient), number(remainder)
    else:
        quotient, remainder = divmod(-dividend, divisor)
        return -int(quotient), -number(remainder)


def multiply_and_divide(
    a: int, b: int, c: int, bits: int = 64
) -> t.Tuple[int, int]:
    """ Compute ``a * b / c`` without losing precision.

    :returns: quotient (rounded towards zero) and remainder

    :raises OverflowError: if the quotient does not fit into `bits`
    """
    quotient, remainder = symmetric_divmod(a * b, c)
    _checked(quotient, bits, "Result of %d * %d / %d" % (a, b, c))
    return quotient, remainder


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
