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

import sys

import pytest

from civiltime import (
    configure,
    TimeZone,
)
from civiltime.debug import watch


# from civiltime.debug import watch
#
# watch("civiltime")


@pytest.fixture(autouse=True)
def _default_config():
    configure()
    yield
    configure()


@pytest.fixture(scope="session")
def berlin():
    return TimeZone.of("Europe/Berlin")


@pytest.fixture(scope="session")
def new_york():
    return TimeZone.of("America/New_York")


@pytest.fixture
def watcher():
    with watch("civiltime", out=sys.stdout, colour=True):
        yield
