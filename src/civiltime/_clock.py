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
from time import time

from ._arithmetic import NANO_SECONDS
from ._instant import Instant


__all__ = [
    "Clock",
    "PEP564Clock",
    "SafeClock",
]


class Clock:
    """ Accessor for the current time. This class is fulfilled by
    implementations that subclass :class:`.Clock`.

    Creating a new :class:`.Clock` instance will produce the highest
    precision clock implementation available.

        >>> clock = Clock()
        >>> type(clock)                                         # doctest: +SKIP
        civiltime._clock.PEP564Clock
        >>> clock.utc_time()                                    # doctest: +SKIP
        civiltime.Instant(1525265942, 506844026)

    Instantiating a subclass directly always gives that implementation.
    """

    __implementations: t.Optional[t.List[t.Type[Clock]]] = None

    def __new__(cls):
        if cls is not Clock:
            return object.__new__(cls)
        if Clock.__implementations is None:
            # Find an available clock with the best precision
            Clock.__implementations = sorted(
                (clock for clock in _all_subclasses(Clock)
                 if clock.available()),
                key=lambda clock: clock.precision(), reverse=True
            )
        if not Clock.__implementations:
            raise RuntimeError("No clock implementations available")
        return object.__new__(Clock.__implementations[0])

    @classmethod
    def precision(cls) -> int:
        """ The precision of this clock implementation, represented as a
        number of decimal places. Therefore, for a nanosecond precision
        clock, this function returns `9`.
        """
        raise NotImplementedError("No clock implementation selected")

    @classmethod
    def available(cls) -> bool:
        """ A boolean flag to indicate whether or not this clock
        implementation is available on this platform.
        """
        raise NotImplementedError("No clock implementation selected")

    def utc_time(self) -> Instant:
        """ Read and return the current instant from this clock.
        """
        raise NotImplementedError("No clock implementation selected")


def _all_subclasses(cls):
    for subclass in cls.__subclasses__():
        yield subclass
        yield from _all_subclasses(subclass)


class SafeClock(Clock):
    """ Clock implementation that should work for any variant of Python.
    This clock is guaranteed microsecond precision.
    """

    @classmethod
    def precision(cls):
        return 6

    @classmethod
    def available(cls):
        return True

    def utc_time(self):
        seconds, microseconds = divmod(int(time() * 1000000), 1000000)
        return Instant.from_epoch_seconds(seconds, microseconds * 1000)


class PEP564Clock(Clock):
    """ Clock implementation based on the PEP564 additions to Python 3.7.
    This clock is guaranteed nanosecond precision.
    """

    @classmethod
    def precision(cls):
        return 9

    @classmethod
    def available(cls):
        try:
            from time import time_ns
        except ImportError:
            return False
        else:
            return True

    def utc_time(self):
        from time import time_ns
        seconds, nanoseconds = divmod(time_ns(), NANO_SECONDS)
        return Instant.from_epoch_seconds(seconds, nanoseconds)
