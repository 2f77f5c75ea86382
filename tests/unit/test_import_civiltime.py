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



import importlib

import pytest

import civiltime


# python -m pytest tests/unit/test_import_civiltime.py -s -v


def test_import_dunder_version():
    from civiltime import __version__
    from civiltime._meta import version

    assert __version__ == version


def test_import_instant():
    from civiltime import Instant


def test_import_time_zone():
    from civiltime import TimeZone


def test_import_configure():
    from civiltime import configure


def test_import_debug():
    from civiltime.debug import watch


@pytest.mark.parametrize("name", civiltime.__all__)
def test_all_names_are_importable(name):
    assert hasattr(civiltime, name)


def test_all_has_no_duplicates():
    assert len(set(civiltime.__all__)) == len(civiltime.__all__)


@pytest.mark.parametrize("module", (
    "civiltime._arithmetic",
    "civiltime._calendar",
    "civiltime._clock",
    "civiltime._conf",
    "civiltime._date",
    "civiltime._datetime",
    "civiltime._duration",
    "civiltime._instant",
    "civiltime._meta",
    "civiltime._offset",
    "civiltime._period",
    "civiltime._time",
    "civiltime._tzdb",
    "civiltime._units",
    "civiltime._zone",
    "civiltime.debug",
    "civiltime.exceptions",
))
def test_module_all_names_exist(module):
    mod = importlib.import_module(module)
    for name in getattr(mod, "__all__", ()):
        assert hasattr(mod, name), name
