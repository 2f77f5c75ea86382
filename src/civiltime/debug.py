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
Helpers to look at what civiltime logs.

civiltime logs to the ``civiltime`` logger hierarchy:

* ``civiltime.zone``: gaps and overlaps met while resolving local
  date-times,
* ``civiltime.tzdb``: zone loading and system zone detection,
* ``civiltime.conf``: configuration changes.

Nothing is printed unless the application configures logging or uses
:func:`watch`.
"""


from __future__ import annotations

import typing as t
from contextlib import suppress as _suppress
from logging import (
    CRITICAL,
    DEBUG,
    ERROR,
    Formatter,
    getLogger,
    INFO,
    StreamHandler,
    WARNING,
)
from sys import stderr


__all__ = [
    "Watcher",
    "watch",
]


_LEVEL_COLOURS = {
    CRITICAL: "\x1b[31;1m",  # bright red
    ERROR: "\x1b[33;1m",  # bright yellow
    WARNING: "\x1b[33m",  # yellow
    INFO: "\x1b[37m",  # white
    DEBUG: "\x1b[36m",  # cyan
}


class ColourFormatter(Formatter):
    """Formatter that colours each line by its log level."""

    def format(self, record):
        s = super().format(record)
        colour = _LEVEL_COLOURS.get(record.levelno)
        if colour is None:
            return s
        return f"{colour}{s}\x1b[0m"


class Watcher:
    """
    Send civiltime's log output to a stream while watching.

    Example::

        from civiltime.debug import Watcher

        with Watcher("civiltime.zone"):
            # gaps and overlaps are logged to stderr within this block
            ...

    .. note::
        The log messages are meant for humans. Their wording may change
        without notice.

    :param logger_names: Names of the loggers to watch. Defaults to
        ``"civiltime"``, i.e. all of civiltime's loggers.
    :param default_level: Minimum level shown unless :meth:`.watch` is given
        another one.
    :param default_out: Stream written to unless :meth:`.watch` is given
        another one.
    :param colour: Indicate the level with ANSI colour codes instead of the
        level name.
    :param thread_info: Prefix each line with the id of the logging thread.
    """

    def __init__(
        self,
        *logger_names: str,
        default_level: int = DEBUG,
        default_out: t.TextIO = stderr,
        colour: bool = False,
        thread_info: bool = True,
    ) -> None:
        self.logger_names = logger_names or ("civiltime",)
        self._loggers = [getLogger(name) for name in self.logger_names]
        self.default_level = default_level
        self.default_out = default_out
        self._handlers: t.Dict[str, StreamHandler] = {}

        format_ = "%(asctime)s  %(name)s  %(message)s"
        if thread_info:
            format_ = "[Thread %(thread)d] " + format_
        if colour:
            self.formatter: Formatter = ColourFormatter(format_)
        else:
            self.formatter = Formatter("[%(levelname)-8s] " + format_)

    def __enter__(self) -> Watcher:
        self.watch()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def watch(
        self,
        level: t.Optional[int] = None,
        out: t.Optional[t.TextIO] = None,
    ) -> None:
        """Start writing the watched loggers' records to `out`.

        Calling this again replaces the previous handler.

        :param level: minimum level, defaults to ``default_level``
        :param out: stream to write to, defaults to ``default_out``
        """
        if level is None:
            level = self.default_level
        if out is None:
            out = self.default_out
        self.stop()
        handler = StreamHandler(out)
        handler.setFormatter(self.formatter)
        handler.setLevel(level)
        for logger in self._loggers:
            self._handlers[logger.name] = handler
            logger.addHandler(handler)
            if logger.getEffectiveLevel() > level:
                logger.setLevel(level)

    def stop(self) -> None:
        """Stop writing the watched loggers' records."""
        for logger in self._loggers:
            with _suppress(KeyError):
                logger.removeHandler(self._handlers.pop(logger.name))


def watch(
    *logger_names: str,
    level: int = DEBUG,
    out: t.TextIO = stderr,
    colour: bool = False,
    thread_info: bool = True,
) -> Watcher:
    """Create a :class:`.Watcher`, start it and return it.

    Example::

        from civiltime.debug import watch

        watch()
        # civiltime now logs everything to stderr

    The parameters are passed on to :class:`.Watcher`.
    """
    watcher = Watcher(
        *logger_names,
        default_level=level,
        default_out=out,
        colour=colour,
        thread_info=thread_info,
    )
    watcher.watch()
    return watcher
