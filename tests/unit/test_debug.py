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



import io
import logging
import sys

import pytest

from civiltime import debug as civiltime_debug


@pytest.fixture
def logger_mocker(mocker):
    original_levels = {}

    def setup_mock(*logger_names):
        nonlocal original_levels

        loggers = [logging.getLogger(name) for name in logger_names]
        for logger in loggers:
            original_levels[logger] = logger.level
            mocker.patch.object(logger, "addHandler")
            mocker.patch.object(logger, "removeHandler")
            mocker.spy(logger, "setLevel")
        return loggers

    yield setup_mock

    for logger, level in original_levels.items():
        logger.setLevel(level)


def test_watch_returns_watcher(logger_mocker):
    logger_name = "civiltime"
    logger_mocker(logger_name)
    watcher = civiltime_debug.watch(logger_name)
    assert isinstance(watcher, civiltime_debug.Watcher)


def test_watch_defaults_to_civiltime_logger(logger_mocker):
    logger = logger_mocker("civiltime")[0]
    watcher = civiltime_debug.watch()
    assert watcher.logger_names == ("civiltime",)
    logger.addHandler.assert_called_once()


@pytest.mark.parametrize("logger_names",
                         (("civiltime",), ("foobar",),
                          ("civiltime.zone", "civiltime.tzdb")))
def test_watch_enables_logging(logger_names, logger_mocker):
    loggers = logger_mocker(*logger_names)
    civiltime_debug.watch(*logger_names)
    for logger in loggers:
        logger.addHandler.assert_called_once()


def test_watcher_watch_adds_logger(logger_mocker):
    logger_name = "civiltime"
    logger = logger_mocker(logger_name)[0]
    watcher = civiltime_debug.Watcher(logger_name)

    logger.addHandler.assert_not_called()
    watcher.watch()
    logger.addHandler.assert_called_once()


def test_watcher_stop_removes_logger(logger_mocker):
    logger_name = "civiltime"
    logger = logger_mocker(logger_name)[0]
    watcher = civiltime_debug.Watcher(logger_name)

    watcher.watch()
    (handler,), _ = logger.addHandler.call_args

    logger.removeHandler.assert_not_called()
    watcher.stop()
    logger.removeHandler.assert_called_once_with(handler)


def test_watcher_watch_twice_replaces_handler(logger_mocker):
    logger_name = "civiltime"
    logger = logger_mocker(logger_name)[0]
    watcher = civiltime_debug.Watcher(logger_name)

    watcher.watch()
    (handler1,), _ = logger.addHandler.call_args
    watcher.watch()
    (handler2,), _ = logger.addHandler.call_args

    assert handler1 is not handler2
    logger.removeHandler.assert_called_once_with(handler1)


def test_watcher_context_manager(mocker):
    logger_name = "civiltime"
    watcher = civiltime_debug.Watcher(logger_name)
    watcher.watch = mocker.Mock()
    watcher.stop = mocker.Mock()

    with watcher:
        watcher.watch.assert_called_once()
        watcher.stop.assert_not_called()
    watcher.stop.assert_called_once()


WATCH_ARGS = (
    # level, expected_level
    (None, logging.DEBUG),
    (logging.DEBUG, logging.DEBUG),
    (logging.WARNING, logging.WARNING),
    (1, 1),
)


def _setup_watch(logger_name, level):
    watcher = civiltime_debug.Watcher(logger_name)
    kwargs = {}
    if level is not None:
        kwargs["level"] = level
    watcher.watch(**kwargs)


@pytest.mark.parametrize(("level", "expected_level"), WATCH_ARGS)
@pytest.mark.parametrize(
    "effective_level",
    (logging.DEBUG, logging.WARNING, logging.INFO, logging.ERROR)
)
def test_watcher_level(
    logger_mocker, level, expected_level, effective_level,
):
    logger_name = "civiltime"
    logger = logger_mocker(logger_name)[0]
    logger.setLevel(effective_level)
    logger.setLevel.reset_mock()
    _setup_watch(logger_name, level)

    (handler,), _ = logger.addHandler.call_args
    assert handler.level == expected_level
    if effective_level <= expected_level:
        logger.setLevel.assert_not_called()
    else:
        logger.setLevel.assert_called_once_with(expected_level)


custom_log_out = io.StringIO()


@pytest.mark.parametrize(
    ("out", "expected_out"),
    (
        (None, None),
        (sys.stdout, sys.stdout),
        (custom_log_out, custom_log_out),
    )
)
def test_watcher_out(logger_mocker, out, expected_out):
    if expected_out is None:
        expected_out = civiltime_debug.stderr
    logger_name = "civiltime"
    logger = logger_mocker(logger_name)[0]
    watcher = civiltime_debug.Watcher(logger_name)
    kwargs = {}
    if out is not None:
        kwargs["out"] = out
    watcher.watch(**kwargs)

    (handler,), _ = logger.addHandler.call_args
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream == expected_out


@pytest.mark.parametrize("colour", (True, False))
@pytest.mark.parametrize("thread_info", (True, False))
def test_watcher_format(colour, thread_info):
    out = io.StringIO()
    logger = logging.getLogger("civiltime.test_debug")
    with civiltime_debug.Watcher("civiltime.test_debug", default_out=out,
                                 colour=colour, thread_info=thread_info):
        logger.warning("<ZONE> hello %s", "world")
    logger.warning("<ZONE> not watched")

    line = out.getvalue()
    assert line.count("\n") == 1
    assert "civiltime.test_debug  <ZONE> hello world" in line
    assert ("[Thread " in line) == thread_info
    assert ("[WARNING ]" in line) == (not colour)
    assert line.startswith("\x1b[33m") == colour
