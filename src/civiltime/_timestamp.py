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

import typing as t

from ._arithmetic import (
    NANO_SECONDS,
    overflowing_add,
)


__all__ = [
    "Timestamp",
]


class Timestamp(t.Tuple[int, int]):
    """ A count of `seconds` and `nanoseconds`. This class marks a point in
    time relative to the Unix epoch (1970-01-01T00:00:00).

    The `seconds` and `nanoseconds` values provided to the constructor can
    have any sign but will be normalized internally into a positive or
    negative `seconds` value along with a positive `nanoseconds` value
    between `0` and `999,999,999`. Therefore ``Timestamp(-1, -1)`` is
    normalized to ``Timestamp(-2, 999999999)``.

    The ``add_*_overflowing`` methods treat `seconds` as a 64-bit signed
    integer: on overflow the value wraps and the returned flag is set.

    Note that the structure of a :class:`.Timestamp` object is similar to
    the ``timespec`` struct in C.
    """

    def __new__(cls, seconds: int = 0, nanoseconds: int = 0) -> Timestamp:
        seconds, nanoseconds = divmod(
            NANO_SECONDS * int(seconds) + int(nanoseconds), NANO_SECONDS
        )
        return tuple.__new__(cls, (seconds, nanoseconds))

    def __add__(self, other):
        if isinstance(other, int):
            other = Timestamp(other)
        if isinstance(other, Timestamp):
            return Timestamp(self.seconds + other.seconds,
                             self.nanoseconds + other.nanoseconds)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, int):
            other = Timestamp(other)
        if isinstance(other, Timestamp):
            return Timestamp(self.seconds - other.seconds,
                             self.nanoseconds - other.nanoseconds)
        return NotImplemented

    def __repr__(self):
        return "Timestamp(seconds=%r, nanoseconds=%r)" % self

    @property
    def seconds(self) -> int:
        return self[0]

    @property
    def nanoseconds(self) -> int:
        return self[1]

    def total_seconds(self) -> int:
        """Whole seconds since the epoch, floored."""
        return self[0]

    def nanosecond(self) -> int:
        """Nanoseconds within the current second, in range 0..999999999."""
        return self[1]

    def total_nanoseconds(self) -> int:
        return self[0] * NANO_SECONDS + self[1]

    def add_days_overflowing(self, days: int) -> t.Tuple[Timestamp, bool]:
        return self.add_seconds_overflowing(int(days) * 86400)

    def add_hours_overflowing(self, hours: int) -> t.Tuple[Timestamp, bool]:
        return self.add_seconds_overflowing(int(hours) * 3600)

    def add_minutes_overflowing(
        self, minutes: int
    ) -> t.Tuple[Timestamp, bool]:
        return self.add_seconds_overflowing(int(minutes) * 60)

    def add_seconds_overflowing(
        self, seconds: int
    ) -> t.Tuple[Timestamp, bool]:
        seconds, overflow = overflowing_add(self.seconds, int(seconds), 64)
        return Timestamp(seconds, self.nanoseconds), overflow

    def add_nanoseconds_overflowing(
        self, nanoseconds: int
    ) -> t.Tuple[Timestamp, bool]:
        carry, nanoseconds = divmod(self.nanoseconds + int(nanoseconds),
                                    NANO_SECONDS)
        seconds, overflow = overflowing_add(self.seconds, carry, 64)
        return Timestamp(seconds, nanoseconds), overflow
