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
Time zone policies.

A time zone here is a pure function of time: given a UTC instant it yields
the :class:`.UtcOffset` in effect, and given a local (zone-less) date time
it yields the offset that produced it, or raises a :class:`.ZoneError` if
no instant maps to that local value.

The set of policies is closed: :class:`.Utc`, :class:`.UtcOffset` (a fixed
offset) and :class:`civiltime.tai.Tai`.
"""


from __future__ import annotations

import abc
import typing as t
from datetime import (
    timedelta,
    timezone as _timezone,
    tzinfo as _tzinfo,
)

import pytz


if t.TYPE_CHECKING:
    import typing_extensions as te

    from ._datetime import NaiveDateTime


__all__ = [
    "TimeZone",
    "Utc",
    "UTC",
    "UtcOffset",
]


class TimeZone(abc.ABC):
    """Interface of all time zone policies."""

    @abc.abstractmethod
    def utc_offset(self, utc: NaiveDateTime) -> UtcOffset:
        """The offset in effect at the UTC instant `utc`.

        :param utc: the instant, as a naive date time on the UTC scale
        """

    @abc.abstractmethod
    def offset_from_local(self, local: NaiveDateTime) -> UtcOffset:
        """The offset that maps the local date time `local` to UTC.

        :param local: the local date time in this zone

        :raises ZoneError: if `local` can't be expressed in this zone.
        """

    def local_offset(self, utc: NaiveDateTime) -> UtcOffset:
        """The offset to add to the UTC instant `utc` to get local time.

        Equal to :meth:`.utc_offset` except for TAI, whose offsets are those
        of UTC relative to TAI.
        """
        return self.utc_offset(utc)

    def to_utc_overflowing(
        self, local: NaiveDateTime
    ) -> t.Tuple[NaiveDateTime, bool]:
        """The UTC instant the local date time `local` denotes.

        :returns: the UTC value and whether its year wrapped around the
            bounds of :class:`.Year`.

        :raises ZoneError: if `local` can't be expressed in this zone.
        """
        offset = self.offset_from_local(local)
        return local.add_seconds_overflowing(-offset.seconds_ahead())


class UtcOffset(TimeZone):
    """A time zone with a fixed offset from UTC.

    A positive number of seconds is the Eastern hemisphere, a negative
    number the Western hemisphere.

    :param seconds: the number of seconds this zone is ahead of UTC.

    :raises ValueError: if the absolute value of `seconds` is 86400 or more.
    """

    UTC: te.Final[UtcOffset] = None  # type: ignore
    """An offset of zero."""

    def __init__(self, seconds: int = 0) -> None:
        seconds = int(seconds)
        if not -86400 < seconds < 86400:
            raise ValueError("UTC offset out of range (-86399..86399)")
        self.__seconds = seconds

    @classmethod
    def from_seconds(cls, seconds: int) -> UtcOffset:
        return cls(seconds)

    @classmethod
    def from_seconds_unchecked(cls, seconds: int) -> UtcOffset:
        """Create an offset without validating it.

        The caller must guarantee ``-86400 < seconds < 86400``. A value
        outside this range is not detected and makes every conversion
        through this offset meaningless.
        """
        instance = object.__new__(cls)
        instance.__seconds = int(seconds)
        return instance

    @classmethod
    def from_hours(cls, hours: int) -> UtcOffset:
        """:raises ValueError: if the absolute value of `hours` is 24 or
        more."""
        return cls(int(hours) * 3600)

    @classmethod
    def from_hms(
        cls, hours: int, minutes: int = 0, seconds: int = 0
    ) -> UtcOffset:
        """Create an offset from hours, minutes and seconds.

        All three parts are added up, so a negative offset needs all its
        parts to be negative: ``UtcOffset.from_hms(-3, -30)``.
        """
        return cls(int(hours) * 3600 + int(minutes) * 60 + int(seconds))

    def seconds_ahead(self) -> int:
        """The number of seconds this zone is ahead of UTC."""
        return self.__seconds

    def hours_ahead(self) -> float:
        """The number of hours this zone is ahead of UTC."""
        return self.__seconds / 3600

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.__seconds)

    def to_tzinfo(self) -> _tzinfo:
        """A :class:`datetime.tzinfo` with the same fixed offset.

        Offsets of whole minutes map to :func:`pytz.FixedOffset` (which is
        :data:`pytz.utc` for zero). Other offsets map to
        :class:`datetime.timezone`, as pytz only supports minute resolution.
        """
        minutes, seconds = divmod(self.__seconds, 60)
        if seconds == 0:
            return pytz.FixedOffset(minutes)
        return _timezone(self.to_timedelta())

    def utc_offset(self, utc: NaiveDateTime) -> UtcOffset:
        return self

    def offset_from_local(self, local: NaiveDateTime) -> UtcOffset:
        return self

    def __neg__(self) -> UtcOffset:
        return UtcOffset.from_seconds_unchecked(-self.__seconds)

    def __hash__(self):
        return hash(self.__seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self.__seconds == other.__seconds

    def __repr__(self) -> str:
        return "civiltime.UtcOffset(%r)" % self.__seconds

    def __str__(self) -> str:
        sign = "-" if self.__seconds < 0 else "+"
        minutes, seconds = divmod(abs(self.__seconds), 60)
        hours, minutes = divmod(minutes, 60)
        if seconds:
            return "%s%02d:%02d:%02d" % (sign, hours, minutes, seconds)
        return "%s%02d:%02d" % (sign, hours, minutes)


UtcOffset.UTC = UtcOffset(0)  # type: ignore


class Utc(TimeZone):
    """The UTC time zone.

    UTC has leap seconds, so any local value (including 23:59:60) maps to
    itself.
    """

    def utc_offset(self, utc: NaiveDateTime) -> UtcOffset:
        return UtcOffset.UTC

    def offset_from_local(self, local: NaiveDateTime) -> UtcOffset:
        return UtcOffset.UTC

    def to_tzinfo(self) -> _tzinfo:
        return pytz.utc

    def __hash__(self):
        return hash(Utc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeZone):
            return NotImplemented
        return isinstance(other, Utc)

    def __repr__(self) -> str:
        return "civiltime.Utc()"

    def __str__(self) -> str:
        return "UTC"


#: The UTC time zone
UTC: te.Final[Utc] = Utc()
