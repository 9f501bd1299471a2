# Copyright (c) "Neo4j"
# Neo4j Sweden AB [https://neo4j.com]
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

from abc import ABCMeta
from collections.abc import Mapping
from logging import getLogger

from .exceptions import ConfigurationError


log = getLogger("civiltime")


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
                or isinstance(v, (staticmethod, classmethod))
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
            raise ConfigurationError(
                "Unexpected config keys: %s" % ", ".join(data.keys())
            )
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
                                     + ", ".join(rejected_keys))

    def __init__(self, *args, **kwargs):
        for arg in args:
            self.__update(arg)
        self.__update(kwargs)
        log.debug("[#0000]  _: <CONFIG> %r", self)

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


class RegistryConfig(Config):
    """ Leap second registry configuration.
    """

    #: Leap Seconds
    leap_seconds = ()
    # Iterable of :class:`.Date` objects. Each date is registered as a day
    # from which one more leap second counts.

    #: IERS Table
    iers_table = False
    # Preload the leap seconds published by the IERS (1972 to 2017).
