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


"""
International Atomic Time.

TAI never inserts leap seconds. Its offset from UTC is a fixed base of
10 seconds (the difference in 1972) plus one second for every leap second
UTC has inserted since. Which leap seconds exist is not known in advance,
so they are kept in a :class:`.LeapSecondRegistry` that the embedding
application fills, e.g. from :data:`.IERS_LEAP_SECONDS`.

TAI runs ahead of UTC, so UTC's offset as seen from TAI is negative and
``utc = tai + offset``:

    >>> registry = LeapSecondRegistry()
    >>> local = NaiveDateTime(Date(2000, 1, 1), Time.MIDNIGHT)
    >>> Tai(registry).offset_from_local(local)
    civiltime.UtcOffset(-10)
    >>> print(DateTime.from_local(local, Tai(registry)).naive_utc)
    1999-12-31T23:59:50

A TAI date time that falls within a leap second maps to 23:59:60 UTC, so
every UTC instant, leap seconds included, has exactly one TAI value.
"""


from __future__ import annotations

import typing as t
from bisect import (
    bisect_left,
    bisect_right,
)
from logging import getLogger

from ._concurrency import ReadWriteLock
from ._conf import RegistryConfig
from ._date import Date
from ._datetime import (
    DateTime,
    NaiveDateTime,
)
from ._time import Time
from .exceptions import UnexpectedLeapSecondError
from .timezone import (
    TimeZone,
    UTC,
    Utc,
    UtcOffset,
)


if t.TYPE_CHECKING:
    import typing_extensions as te


__all__ = [
    "add_leap_second",
    "default_registry",
    "IERS_LEAP_SECONDS",
    "LeapSecondRegistry",
    "Tai",
    "TAI",
]


log = getLogger("civiltime")


#: TAI - UTC before the first leap second
BASE_OFFSET_SECONDS = 10


#: The days from which each leap second published by the IERS counts,
#: 1972 to 2017.
IERS_LEAP_SECONDS: te.Final[t.Tuple[Date, ...]] = tuple(
    Date(year, month, 1) for year, month in (
        (1972, 7), (1973, 1), (1974, 1), (1975, 1), (1976, 1), (1977, 1),
        (1978, 1), (1979, 1), (1980, 1), (1981, 7), (1982, 7), (1983, 7),
        (1985, 7), (1988, 1), (1990, 1), (1991, 1), (1992, 7), (1993, 7),
        (1994, 7), (1996, 1), (1997, 7), (1999, 1), (2006, 1), (2009, 1),
        (2012, 7), (2015, 7), (2017, 1),
    )
)


class LeapSecondRegistry:
    """Ordered set of the leap seconds UTC has inserted.

    Each leap second is registered by the day from which it counts and
    stored as the UTC instant of that day's midnight. The registry only
    grows. Lookups from any number of threads run concurrently, an
    insertion waits for them and excludes them while it runs.

    :param config: see :class:`civiltime._conf.RegistryConfig`

    :raises ConfigurationError: on unknown configuration keys.
    """

    def __init__(self, **config):
        self._config = RegistryConfig.consume(config)
        self._lock = ReadWriteLock()
        self._leap_seconds: t.List[DateTime[Utc]] = []
        if self._config.iers_table:
            self.add_leap_seconds(IERS_LEAP_SECONDS)
        self.add_leap_seconds(self._config.leap_seconds)

    def __repr__(self):
        return "<%s leap_seconds=%d>" % (type(self).__name__, len(self))

    def __len__(self):
        with self._lock.read():
            return len(self._leap_seconds)

    def add_leap_second(self, day: Date) -> bool:
        """Register a leap second counting from midnight UTC of `day`.

        :returns: :data:`False` if it was registered already.
        """
        if not isinstance(day, Date):
            raise TypeError("day must be a civiltime.Date")
        instant = DateTime(NaiveDateTime(day, Time.MIDNIGHT), UTC)
        with self._lock.write():
            i = bisect_left(self._leap_seconds, instant)
            if (i < len(self._leap_seconds)
                    and self._leap_seconds[i] == instant):
                return False
            self._leap_seconds.insert(i, instant)
        log.debug("[#0000]  _: <LEAP SECONDS> added %s", day)
        return True

    def add_leap_seconds(self, days: t.Iterable[Date]) -> int:
        """Register several leap seconds.

        :returns: the number of leap seconds that were new.
        """
        return sum(1 for day in days if self.add_leap_second(day))

    def leap_seconds(self) -> t.List[DateTime[Utc]]:
        """A snapshot of the registered leap seconds in ascending order."""
        with self._lock.read():
            return list(self._leap_seconds)

    def leap_seconds_before_inclusive(
        self, instant: t.Union[DateTime, NaiveDateTime]
    ) -> int:
        """The number of leap seconds counting at `instant`.

        :param instant: a date time, or a naive date time on the UTC scale
        """
        instant = self.__as_utc(instant)
        with self._lock.read():
            return bisect_right(self._leap_seconds, instant)

    def utc_offset(self, utc: NaiveDateTime) -> UtcOffset:
        """The offset of UTC seen from TAI at the UTC instant `utc`."""
        return self.__offset(self.leap_seconds_before_inclusive(utc))

    def resolve_local(self, local: NaiveDateTime) -> UtcOffset:
        """The offset in effect at the UTC instant the TAI date time
        `local` denotes, so that ``utc = local + offset``.

        :raises UnexpectedLeapSecondError: if `local` is a leap second.
        """
        count, _ = self.__resolve(local)
        return self.__offset(count)

    def resolve_utc_overflowing(
        self, local: NaiveDateTime
    ) -> t.Tuple[NaiveDateTime, bool]:
        """The UTC instant the TAI date time `local` denotes.

        A TAI value within a leap second maps to 23:59:60 UTC.

        :returns: the UTC value and whether its year wrapped around the
            bounds of :class:`.Year`.

        :raises UnexpectedLeapSecondError: if `local` is a leap second.
        """
        count, in_leap_second = self.__resolve(local)
        if not in_leap_second:
            return local.add_seconds_overflowing(
                -(BASE_OFFSET_SECONDS + count)
            )
        # 23:59:59 UTC of the day the leap second is appended to
        before, overflow = local.add_seconds_overflowing(
            -(BASE_OFFSET_SECONDS + count + 1)
        )
        leap = Time(23, 59, 60, before.nanosecond)
        return NaiveDateTime(before.date, leap), overflow

    def __resolve(self, local: NaiveDateTime) -> t.Tuple[int, bool]:
        # The number of leap seconds depends on the UTC instant, which in
        # turn depends on that number. Starting from the count at `local`
        # read as UTC, the UTC estimate is moved until the count settles.
        # Within a leap second no count fits, and the count alternates
        # between the one before and the one after it.
        if local.second == 60:
            raise UnexpectedLeapSecondError(local)
        with self._lock.read():
            count = self.__count(local)
            previous = None
            while True:
                estimate, _ = local.add_seconds_overflowing(
                    -(BASE_OFFSET_SECONDS + count)
                )
                following = self.__count(estimate)
                if following == count:
                    return count, False
                if following == previous:
                    return min(count, following), True
                previous, count = count, following

    def __count(self, utc: NaiveDateTime) -> int:
        # caller holds the read lock
        return bisect_right(self._leap_seconds, DateTime(utc, UTC))

    @staticmethod
    def __offset(count: int) -> UtcOffset:
        return UtcOffset(-(BASE_OFFSET_SECONDS + count))

    @staticmethod
    def __as_utc(instant: t.Union[DateTime, NaiveDateTime]) -> DateTime:
        if isinstance(instant, NaiveDateTime):
            return DateTime(instant, UTC)
        if isinstance(instant, DateTime):
            return instant
        raise TypeError("instant must be a civiltime.DateTime "
                        "or civiltime.NaiveDateTime")


_default_registry = LeapSecondRegistry()


def default_registry() -> LeapSecondRegistry:
    """The process-wide registry used by :class:`.Tai` unless another one
    is given. It starts out empty."""
    return _default_registry


def add_leap_second(day: Date) -> bool:
    """Register a leap second in the default registry.

    See :meth:`.LeapSecondRegistry.add_leap_second`.
    """
    return _default_registry.add_leap_second(day)


class Tai(TimeZone):
    """The TAI time zone.

    :param registry: the leap seconds to account for, by default the
        :func:`.default_registry`.
    """

    def __init__(self, registry: t.Optional[LeapSecondRegistry] = None):
        self.__registry = registry

    @property
    def registry(self) -> LeapSecondRegistry:
        if self.__registry is None:
            return _default_registry
        return self.__registry

    def utc_offset(self, utc: NaiveDateTime) -> UtcOffset:
        return self.registry.utc_offset(utc)

    def offset_from_local(self, local: NaiveDateTime) -> UtcOffset:
        """:raises UnexpectedLeapSecondError: if `local` is a leap
        second."""
        return self.registry.resolve_local(local)

    def local_offset(self, utc: NaiveDateTime) -> UtcOffset:
        """TAI is ahead of UTC by the negated :meth:`.utc_offset`."""
        return UtcOffset(-self.utc_offset(utc).seconds_ahead())

    def to_utc_overflowing(
        self, local: NaiveDateTime
    ) -> t.Tuple[NaiveDateTime, bool]:
        return self.registry.resolve_utc_overflowing(local)

    def __hash__(self):
        # the registry of Tai() is only looked up on use
        return hash(Tai)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return isinstance(other, Tai) and self.registry is other.registry

    def __repr__(self) -> str:
        if self.__registry is None:
            return "civiltime.Tai()"
        return "civiltime.Tai(%r)" % self.__registry

    def __str__(self) -> str:
        return "TAI"


#: The TAI time zone backed by the default registry
TAI: te.Final[Tai] = Tai()
