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
Module containing the exceptions raised by civiltime.

Invalid arguments passed to constructors are reported with the builtin
:exc:`ValueError` (or one of the subclasses below).

Errors
======
+ DateTimeError
  + DateTimeArithmeticError
    + TimeZoneTransitionError
  + IllegalTimeZoneError
  + DateTimeFormatError

+ ConfigurationError
"""


from __future__ import annotations


__all__ = [
    "ConfigurationError",
    "DateTimeArithmeticError",
    "DateTimeError",
    "DateTimeFormatError",
    "IllegalTimeZoneError",
    "TimeZoneTransitionError",
]


class DateTimeError(Exception):
    """ Base class for all errors raised by civiltime operations.
    """


class DateTimeArithmeticError(DateTimeError, ArithmeticError):
    """ Raised when the result of a well-formed operation cannot be
    represented, for example because it falls outside the supported range
    of :class:`.LocalDate`.

    Operations that saturate (:class:`.Instant` plus or minus a
    :class:`.Duration`) never raise this error.
    """


class TimeZoneTransitionError(DateTimeArithmeticError):
    """ Raised when the time zone database reports a transition that cannot
    be resolved, e.g. one that is longer than the configured
    ``max_transition_seconds``.
    """


class IllegalTimeZoneError(DateTimeError, ValueError):
    """ Raised when a time zone identifier is not recognized.
    """


class DateTimeFormatError(DateTimeError, ValueError):
    """ Raised when a string cannot be parsed into a temporal value.
    """


class ConfigurationError(Exception):
    """ Raised when there is an error concerning a configuration.
    """
