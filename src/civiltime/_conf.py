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
from abc import ABCMeta
from collections.abc import Mapping
from logging import getLogger
from threading import Lock

from ._tzdb import (
    PytzTimeZoneDatabase,
    TimeZoneDatabase,
)
from .exceptions import ConfigurationError


__all__ = [
    "Config",
    "TimeZoneConfig",
    "configure",
    "get_config",
]


log = getLogger("civiltime.conf")


def iter_items(iterable):
    """ Iterate through all items (key-value pairs) within an iterable
    dictionary-like object. If the object has a `keys` method, this is
    used along with `__getitem__` to yield each pair in turn. If no
    `keys` method exists, each iterable element is assumed to be a
    2-tuple of key and value.
    """
    if hasattr(iterable, "keys"):
        for key in iterable.keys():
            yield key, iterable[key]
    else:
        for key, value in iterable:
            yield key, value


class ConfigType(ABCMeta):

    def __new__(mcs, name, bases, attributes):
        fields = []

        for base in bases:
            if type(base) is mcs:
                fields += base.keys()

        for k, v in attributes.items():
            if (
                k.startswith("_")
                or callable(v)
                or isinstance(v, (staticmethod, classmethod, property))
            ):
                continue
            fields.append(k)

        def keys(_):
            return set(fields)

        attributes.setdefault("keys", classmethod(keys))

        return super(ConfigType, mcs).__new__(mcs, name, bases, attributes)


class Config(Mapping, metaclass=ConfigType):
    """ Base class for all configuration containers.
    """

    @staticmethod
    def consume_chain(data, *config_classes):
        values = []
        for config_class in config_classes:
            if not issubclass(config_class, Config):
                raise TypeError("%r is not a Config subclass" % config_class)
            values.append(config_class._consume(data))
        if data:
            raise ConfigurationError("Unexpected config keys: %s"
                                     % ", ".join(sorted(data.keys())))
        return values

    @classmethod
    def consume(cls, data):
        config, = cls.consume_chain(data, cls)
        return config

    @classmethod
    def _consume(cls, data):
        config = {}
        if data:
            for key in cls.keys():
                try:
                    value = data.pop(key)
                except KeyError:
                    pass
                else:
                    config[key] = value
        return cls(config)

    def __update(self, data):
        rejected_keys = []
        for key, value in iter_items(data):
            if value is None:
                continue
            if key in self.keys():
                setattr(self, key, value)
            else:
                rejected_keys.append(key)

        if rejected_keys:
            raise ConfigurationError("Unexpected config keys: "
                                     + ", ".join(sorted(rejected_keys)))

    def __init__(self, *args, **kwargs):
        for arg in args:
            self.__update(arg)
        self.__update(kwargs)

    def __repr__(self):
        attrs = []
        for key in sorted(self):
            attrs.append(" %s=%r" % (key, getattr(self, key)))
        return "<%s%s>" % (self.__class__.__name__, "".join(attrs))

    def __len__(self):
        return len(self.keys())

    def __getitem__(self, key):
        return getattr(self, key)

    def __iter__(self):
        return iter(self.keys())


class TimeZoneConfig(Config):
    """ Configuration of time zone resolution.
    """

    #: Source of the rules of region based time zones
    time_zone_database: TimeZoneDatabase = PytzTimeZoneDatabase()

    #: Longest transition (gap) in seconds accepted from the time zone
    #: database. Longer gaps are reported as malformed data.
    max_transition_seconds = 86400  # seconds

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if not isinstance(self.time_zone_database, TimeZoneDatabase):
            raise ConfigurationError(
                "time_zone_database must be a TimeZoneDatabase, got %r"
                % (self.time_zone_database,)
            )
        if (
            not isinstance(self.max_transition_seconds, int)
            or self.max_transition_seconds <= 0
        ):
            raise ConfigurationError(
                "max_transition_seconds must be a positive integer, got %r"
                % (self.max_transition_seconds,)
            )


_config_lock = Lock()
_config: t.Optional[TimeZoneConfig] = None


def get_config() -> TimeZoneConfig:
    """ The configuration currently in use. """
    global _config
    with _config_lock:
        if _config is None:
            _config = TimeZoneConfig()
        return _config


def configure(*args, **kwargs) -> TimeZoneConfig:
    """ Replace the configuration in use.

    Options not given fall back to their defaults, so calling
    ``configure()`` without arguments restores the default configuration.
    Zones created before the call keep the database they were created with.

    Example::

        import civiltime

        civiltime.configure(max_transition_seconds=2 * 86400)

    :raises ConfigurationError: if an option is unknown or has an invalid
        value
    """
    global _config
    options = {}
    for arg in args:
        options.update(iter_items(arg))
    options.update(kwargs)
    config = TimeZoneConfig.consume(options)
    with _config_lock:
        _config = config
    log.debug("<CONF> active configuration %r", config)
    return config
