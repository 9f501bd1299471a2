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
from datetime import time
from functools import total_ordering


if t.TYPE_CHECKING:
    import typing_extensions as te

from ._arithmetic import NANO_SECONDS
from .exceptions import (
    ComponentRangeError,
    MisplacedLeapSecondError,
)


__all__ = [
    "Time",
]


NANOS_PER_MILLISECOND = 1000000
NANOS_PER_MICROSECOND = 1000
NANOS_PER_MINUTE = 60 * NANO_SECONDS
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR


@total_ordering
class Time:
    """Time of day without any time zone.

    A :class:`.Time` holds an hour, a minute, a second and a nanosecond.
    The second may be 60, but only at 23:59, to represent a leap second.

    :class:`.Time` objects introduce the concept of ``ticks``. This is
    simply a count of the number of nanoseconds since midnight. `ticks`
    values are integers, with a minimum value of `0` and a maximum of
    `86_399_999_999_999` (or `86_400_999_999_999` for a leap second).

    Adding hours, minutes, seconds or nanoseconds carries into the next
    larger unit and wraps around midnight. Each such operation comes in four
    flavours:

    * ``add_<unit>_overflowing`` returns the wrapped time along with a flag
      telling whether midnight was crossed (in either direction).
    * ``add_<unit>_checked`` returns :data:`None` if midnight was crossed.
    * ``add_<unit>_wrapping`` returns the wrapped time only.
    * ``add_<unit>`` raises :exc:`OverflowError` if midnight was crossed.
      Only use it where the addition is known to stay within the day.

    The unit arithmetic assumes every minute has exactly 60 seconds. Leap
    seconds are the business of the :class:`.Tai` time zone.

    :param hour: the hour of the time. Must be in range 0 <= hour < 24.
    :param minute: the minute of the time. Must be in range 0 <= minute < 60.
    :param second: the second of the time. Must be in range
        0 <= second <= 60, where 60 is only allowed at 23:59.
    :param nanosecond: the nanosecond of the time.
        Must be in range 0 <= nanosecond < 1000000000.

    :raises ComponentRangeError: if one of the parameters is out of range.
    :raises MisplacedLeapSecondError: if second is 60 but the time is not
        23:59.
    """

    # CONSTRUCTOR #

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0
    ) -> None:
        hour, minute, second, nanosecond = self.__normalize_nanosecond(
            hour, minute, second, nanosecond
        )
        self.__unchecked_init(hour, minute, second, nanosecond)

    @classmethod
    def __unchecked_new(
        cls,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int
    ) -> Time:
        instance = object.__new__(cls)
        instance.__unchecked_init(hour, minute, second, nanosecond)
        return instance

    def __unchecked_init(
        self,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int
    ) -> None:
        self.__hour = hour
        self.__minute = minute
        self.__second = second
        self.__nanosecond = nanosecond

    # CLASS METHODS #

    @classmethod
    def from_hms(cls, hour: int, minute: int, second: int) -> Time:
        return cls(hour, minute, second)

    @classmethod
    def from_hms_milli(
        cls, hour: int, minute: int, second: int, millisecond: int
    ) -> Time:
        if not 0 <= millisecond < 1000:
            raise ComponentRangeError("millisecond", millisecond, 0, 999)
        return cls(hour, minute, second, millisecond * NANOS_PER_MILLISECOND)

    @classmethod
    def from_hms_micro(
        cls, hour: int, minute: int, second: int, microsecond: int
    ) -> Time:
        if not 0 <= microsecond < 1000000:
            raise ComponentRangeError("microsecond", microsecond, 0, 999999)
        return cls(hour, minute, second, microsecond * NANOS_PER_MICROSECOND)

    @classmethod
    def from_hms_nano(
        cls, hour: int, minute: int, second: int, nanosecond: int
    ) -> Time:
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_hms_unchecked(cls, hour: int, minute: int, second: int) -> Time:
        """Create a time without validating it.

        The caller must guarantee ``hour < 24``, ``minute < 60`` and
        ``second <= 60`` (60 only at 23:59). Nothing is raised if this
        contract is broken; the resulting :class:`.Time` is simply invalid.
        """
        return cls.__unchecked_new(hour, minute, second, 0)

    @classmethod
    def from_hms_milli_unchecked(
        cls, hour: int, minute: int, second: int, millisecond: int
    ) -> Time:
        """See :meth:`.from_hms_unchecked`. Also requires
        ``millisecond < 1000``."""
        return cls.__unchecked_new(hour, minute, second,
                                   millisecond * NANOS_PER_MILLISECOND)

    @classmethod
    def from_hms_micro_unchecked(
        cls, hour: int, minute: int, second: int, microsecond: int
    ) -> Time:
        """See :meth:`.from_hms_unchecked`. Also requires
        ``microsecond < 1000000``."""
        return cls.__unchecked_new(hour, minute, second,
                                   microsecond * NANOS_PER_MICROSECOND)

    @classmethod
    def from_hms_nano_unchecked(
        cls, hour: int, minute: int, second: int, nanosecond: int
    ) -> Time:
        """See :meth:`.from_hms_unchecked`. Also requires
        ``nanosecond < 1000000000``."""
        return cls.__unchecked_new(hour, minute, second, nanosecond)

    @classmethod
    def from_ticks(cls, ticks: int) -> Time:
        """Create a time from ticks (nanoseconds since midnight).

        :param ticks: nanoseconds since midnight

        :raises ValueError: if ticks is out of bounds
            (0 <= ticks < 86400000000000)
        """
        if not isinstance(ticks, int):
            raise TypeError("Ticks must be int")
        if 0 <= ticks < NANOS_PER_DAY:
            return cls.__from_ticks_unchecked(ticks)
        raise ValueError("Ticks out of range (0..86400000000000)")

    @classmethod
    def __from_ticks_unchecked(cls, ticks: int) -> Time:
        second, nanosecond = divmod(ticks, NANO_SECONDS)
        minute, second = divmod(second, 60)
        hour, minute = divmod(minute, 60)
        return cls.__unchecked_new(hour, minute, second, nanosecond)

    @classmethod
    def from_seconds_from_midnight(
        cls, seconds: int, nanosecond: int = 0
    ) -> Time:
        """Create a time from whole seconds since midnight plus a
        nanosecond remainder.

        :raises ValueError: if `seconds` is not in 0..86399 or `nanosecond`
            is not in 0..999999999.
        """
        if not 0 <= seconds < 86400:
            raise ValueError("Seconds out of range (0..86399)")
        if not 0 <= nanosecond < NANO_SECONDS:
            raise ComponentRangeError("nanosecond", nanosecond, 0,
                                      NANO_SECONDS - 1)
        return cls.__from_ticks_unchecked(seconds * NANO_SECONDS + nanosecond)

    @classmethod
    def from_native(cls, t: time) -> Time:
        """Convert from a native Python :class:`datetime.time` value.

        :raises ValueError: if `t` carries a tzinfo.
        """
        if t.tzinfo is not None:
            raise ValueError("Only naive times can be converted")
        return cls(t.hour, t.minute, t.second, t.microsecond * 1000)

    @classmethod
    def __normalize_hour(cls, hour):
        hour = int(hour)
        if 0 <= hour < 24:
            return hour
        raise ComponentRangeError("hour", hour, 0, 23)

    @classmethod
    def __normalize_minute(cls, hour, minute):
        hour = cls.__normalize_hour(hour)
        minute = int(minute)
        if 0 <= minute < 60:
            return hour, minute
        raise ComponentRangeError("minute", minute, 0, 59)

    @classmethod
    def __normalize_second(cls, hour, minute, second):
        hour, minute = cls.__normalize_minute(hour, minute)
        second = int(second)
        if 0 <= second < 60:
            return hour, minute, second
        if second == 60:
            if hour == 23 and minute == 59:
                return hour, minute, second
            raise MisplacedLeapSecondError(hour, minute)
        raise ComponentRangeError("second", second, 0, 60)

    @classmethod
    def __normalize_nanosecond(cls, hour, minute, second, nanosecond):
        hour, minute, second = cls.__normalize_second(hour, minute, second)
        nanosecond = int(nanosecond)
        if 0 <= nanosecond < NANO_SECONDS:
            return hour, minute, second, nanosecond
        raise ComponentRangeError("nanosecond", nanosecond, 0,
                                  NANO_SECONDS - 1)

    # CLASS ATTRIBUTES #

    MIDNIGHT: te.Final[Time] = None  # type: ignore
    """00:00:00."""

    MIN: te.Final[Time] = None  # type: ignore
    """The earliest time value possible."""

    MAX: te.Final[Time] = None  # type: ignore
    """The latest time value possible (the end of a leap second)."""

    # INSTANCE ATTRIBUTES #

    __hour = 0

    __minute = 0

    __second = 0

    __nanosecond = 0

    @property
    def hour(self) -> int:
        """The hours of the time, in range 0..23."""
        return self.__hour

    @property
    def minute(self) -> int:
        """The minutes of the time, in range 0..59."""
        return self.__minute

    @property
    def second(self) -> int:
        """The seconds of the time, in range 0..60."""
        return self.__second

    @property
    def millisecond(self) -> int:
        return self.__nanosecond // NANOS_PER_MILLISECOND

    @property
    def microsecond(self) -> int:
        return self.__nanosecond // NANOS_PER_MICROSECOND

    @property
    def nanosecond(self) -> int:
        """The nanoseconds of the time, in range 0..999999999."""
        return self.__nanosecond

    @property
    def hour_minute_second_nanosecond(self) -> t.Tuple[int, int, int, int]:
        """The time as a tuple of (hour, minute, second, nanosecond)."""
        return self.__hour, self.__minute, self.__second, self.__nanosecond

    @property
    def is_leap_second(self) -> bool:
        return self.__second == 60

    @property
    def ticks(self) -> int:
        """The total number of nanoseconds since midnight."""
        return (NANOS_PER_HOUR * self.__hour
                + NANOS_PER_MINUTE * self.__minute
                + NANO_SECONDS * self.__second
                + self.__nanosecond)

    def seconds_from_midnight(self) -> int:
        """The number of whole seconds since midnight.

        A leap second yields 86400.
        """
        return 3600 * self.__hour + 60 * self.__minute + self.__second

    def to_native(self) -> time:
        """Convert to a native Python :class:`datetime.time` value.

        Sub-microsecond precision is truncated.

        :raises ValueError: for a leap second, which
            :class:`datetime.time` can't represent.
        """
        if self.is_leap_second:
            raise ValueError("datetime.time can't represent a leap second")
        return time(self.__hour, self.__minute, self.__second,
                    self.__nanosecond // NANOS_PER_MICROSECOND)

    # ARITHMETIC #

    def _add_ticks_overflowing(self, delta: int) -> t.Tuple[Time, bool]:
        days, ticks = divmod(self.ticks + delta, NANOS_PER_DAY)
        return self.__from_ticks_unchecked(ticks), days != 0

    def _add_ticks(self, delta: int) -> Time:
        result, overflow = self._add_ticks_overflowing(delta)
        if overflow:
            raise OverflowError("Time addition crossed midnight")
        return result

    def add_hours_overflowing(self, hours: int) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(int(hours) * NANOS_PER_HOUR)

    def add_hours_checked(self, hours: int) -> t.Optional[Time]:
        result, overflow = self.add_hours_overflowing(hours)
        return None if overflow else result

    def add_hours_wrapping(self, hours: int) -> Time:
        return self.add_hours_overflowing(hours)[0]

    def add_hours(self, hours: int) -> Time:
        return self._add_ticks(int(hours) * NANOS_PER_HOUR)

    def add_minutes_overflowing(self, minutes: int) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(int(minutes) * NANOS_PER_MINUTE)

    def add_minutes_checked(self, minutes: int) -> t.Optional[Time]:
        result, overflow = self.add_minutes_overflowing(minutes)
        return None if overflow else result

    def add_minutes_wrapping(self, minutes: int) -> Time:
        return self.add_minutes_overflowing(minutes)[0]

    def add_minutes(self, minutes: int) -> Time:
        return self._add_ticks(int(minutes) * NANOS_PER_MINUTE)

    def add_seconds_overflowing(self, seconds: int) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(int(seconds) * NANO_SECONDS)

    def add_seconds_checked(self, seconds: int) -> t.Optional[Time]:
        result, overflow = self.add_seconds_overflowing(seconds)
        return None if overflow else result

    def add_seconds_wrapping(self, seconds: int) -> Time:
        return self.add_seconds_overflowing(seconds)[0]

    def add_seconds(self, seconds: int) -> Time:
        return self._add_ticks(int(seconds) * NANO_SECONDS)

    def add_milliseconds_overflowing(
        self, milliseconds: int
    ) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(
            int(milliseconds) * NANOS_PER_MILLISECOND
        )

    def add_milliseconds_checked(self, milliseconds: int) -> t.Optional[Time]:
        result, overflow = self.add_milliseconds_overflowing(milliseconds)
        return None if overflow else result

    def add_milliseconds_wrapping(self, milliseconds: int) -> Time:
        return self.add_milliseconds_overflowing(milliseconds)[0]

    def add_milliseconds(self, milliseconds: int) -> Time:
        return self._add_ticks(int(milliseconds) * NANOS_PER_MILLISECOND)

    def add_microseconds_overflowing(
        self, microseconds: int
    ) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(
            int(microseconds) * NANOS_PER_MICROSECOND
        )

    def add_microseconds_checked(self, microseconds: int) -> t.Optional[Time]:
        result, overflow = self.add_microseconds_overflowing(microseconds)
        return None if overflow else result

    def add_microseconds_wrapping(self, microseconds: int) -> Time:
        return self.add_microseconds_overflowing(microseconds)[0]

    def add_microseconds(self, microseconds: int) -> Time:
        return self._add_ticks(int(microseconds) * NANOS_PER_MICROSECOND)

    def add_nanoseconds_overflowing(
        self, nanoseconds: int
    ) -> t.Tuple[Time, bool]:
        return self._add_ticks_overflowing(int(nanoseconds))

    def add_nanoseconds_checked(self, nanoseconds: int) -> t.Optional[Time]:
        result, overflow = self.add_nanoseconds_overflowing(nanoseconds)
        return None if overflow else result

    def add_nanoseconds_wrapping(self, nanoseconds: int) -> Time:
        return self.add_nanoseconds_overflowing(nanoseconds)[0]

    def add_nanoseconds(self, nanoseconds: int) -> Time:
        return self._add_ticks(int(nanoseconds))

    # OPERATIONS #

    def __hash__(self):
        return hash(self.hour_minute_second_nanosecond)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self.hour_minute_second_nanosecond
                == other.hour_minute_second_nanosecond)

    def __lt__(self, other: Time) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self.hour_minute_second_nanosecond
                < other.hour_minute_second_nanosecond)

    def __reduce__(self):
        return type(self), self.hour_minute_second_nanosecond

    # FORMATTING #

    def iso_format(self) -> str:
        s = "%02d:%02d:%02d" % (self.__hour, self.__minute, self.__second)
        if self.__nanosecond:
            s += ".%09d" % self.__nanosecond
        return s

    def __repr__(self) -> str:
        if self.__nanosecond:
            return ("civiltime.Time(%r, %r, %r, %r)" %
                    self.hour_minute_second_nanosecond)
        return ("civiltime.Time(%r, %r, %r)" %
                self.hour_minute_second_nanosecond[:3])

    def __str__(self) -> str:
        return self.iso_format()


Time.MIDNIGHT = Time()  # type: ignore
Time.MIN = Time.MIDNIGHT  # type: ignore
Time.MAX = Time(23, 59, 60, NANO_SECONDS - 1)  # type: ignore
