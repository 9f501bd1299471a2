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

from logging import getLogger

from ._timestamp import Timestamp


__all__ = [
    "Clock",
]


log = getLogger("civiltime")


class Clock:
    """ Accessor for the host's current time. This class is fulfilled by
    implementations that subclass :class:`.Clock`. These implementations are
    contained within the ``civiltime._clock_implementations`` module, and
    are not intended to be accessed directly.

    Creating a new :class:`.Clock` instance will produce the highest
    precision clock implementation available.

        >>> clock = Clock()
        >>> type(clock)                                         # doctest: +SKIP
        civiltime._clock_implementations.PEP564Clock
        >>> clock.utc_time()                                    # doctest: +SKIP
        Timestamp(seconds=1525265942, nanoseconds=506844026)

    """

    __implementations = None

    def __new__(cls):
        if cls.__implementations is None:
            # Find an available clock with the best precision
            import civiltime._clock_implementations  # noqa: F401
            cls.__implementations = sorted(
                (clock for clock in Clock.__subclasses__()
                 if clock.available()),
                key=lambda clock: clock.precision(), reverse=True
            )
            if cls.__implementations:
                log.debug("[#0000]  _: <CLOCK> selected %s",
                          cls.__implementations[0].__name__)
        if not cls.__implementations:
            raise RuntimeError("No clock implementations available")
        instance = object.__new__(cls.__implementations[0])
        return instance

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

    def utc_time(self) -> Timestamp:
        """ Read and return the current UTC time from this clock, measured
        relative to the Unix Epoch.
        """
        raise NotImplementedError("No clock implementation selected")
