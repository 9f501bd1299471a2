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
from datetime import datetime
from functools import total_ordering


if t.TYPE_CHECKING:
    import typing_extensions as te

    from .tai import Tai

from ._arithmetic import NANO_SECONDS
from ._clock import Clock
from ._date import Date
from ._month import Month
from ._time import Time
from ._timestamp import Timestamp
from ._weekday import Weekday
from ._year import Year
from .timezone import (
    TimeZone,
    UTC,
    Utc,
    UtcOffset,
)


__all__ = [
    "DateTime",
    "NaiveDateTime",
]


_Z = t.TypeVar("_Z", bound=TimeZone)
_Z2 = t.TypeVar("_Z2", bound=TimeZone)

_SECONDS_PER_DAY = 86400
_NANOS_PER_DAY = _SECONDS_PER_DAY * NANO_SECONDS


@total_ordering
class NaiveDateTime:
    """A date and a time of day, without any time zone.

    Besides its calendar fields, every :class:`.NaiveDateTime` has a linear
    representation, :meth:`.timestamp`: the number of seconds since
    1970-01-01T00:00:00 plus a nanosecond remainder, with every day counted
    as 86400 seconds.

        >>> NaiveDateTime(Date(1970, 1, 2), Time(0, 0, 1)).timestamp()
        Timestamp(seconds=86401, nanoseconds=0)

    :param date: the date part
    :param time: the time of day part
    """

    __date: Date
    __time: Time

    # CONSTRUCTOR #

    def __init__(self, date: Date, time: Time) -> None:
        if not isinstance(date, Date):
            raise TypeError("date must be a civiltime.Date")
        if not isinstance(time, Time):
            raise TypeError("time must be a civiltime.Time")
        self.__date = date
        self.__time = time

    # CLASS METHODS #

    @classmethod
    def combine(cls, date: Date, time: Time) -> NaiveDateTime:
        return cls(date, time)

    @classmethod
    def from_timestamp(
        cls,
        timestamp: t.Union[Timestamp, t.Tuple[int, int]]
    ) -> NaiveDateTime:
        """The inverse of :meth:`.timestamp`.

        Negative seconds are floor-divided, so instants before the epoch get
        an earlier day and a non-negative time of day.

        :param timestamp: seconds and nanoseconds since the Unix epoch as
            :class:`.Timestamp` or as a tuple of (seconds, nanoseconds)

        :raises ValueError: if the date is out of the range of
            :class:`.Date`.
        """
        timestamp = Timestamp(*timestamp)
        days, seconds = divmod(timestamp.seconds, _SECONDS_PER_DAY)
        date = Date.from_day_count(days + _UNIX_EPOCH_DAY_COUNT)
        time = Time.from_seconds_from_midnight(seconds, timestamp.nanoseconds)
        return cls(date, time)

    @classmethod
    def _from_nanoseconds_overflowing(
        cls, nanoseconds: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        days, ticks = divmod(nanoseconds, _NANOS_PER_DAY)
        date, overflow = Date.from_day_count_overflowing(
            days + _UNIX_EPOCH_DAY_COUNT
        )
        return cls(date, Time.from_ticks(ticks)), overflow

    @classmethod
    def utc_now(cls, clock: t.Optional[Clock] = None) -> NaiveDateTime:
        """Get the current date and time on the UTC scale.

        :param clock: the clock to read, by default the most precise
            :class:`.Clock` available.
        """
        if clock is None:
            clock = Clock()
        return cls.from_timestamp(clock.utc_time())

    @classmethod
    def from_native(cls, dt: datetime) -> NaiveDateTime:
        """Convert from a naive Python :class:`datetime.datetime` value.

        :raises ValueError: if `dt` carries a tzinfo.
        """
        if dt.tzinfo is not None:
            raise ValueError("Only naive datetimes can be converted, "
                             "use DateTime.from_native instead")
        return cls(Date.from_native(dt.date()), Time.from_native(dt.time()))

    # CLASS ATTRIBUTES #

    MIN: te.Final[NaiveDateTime] = None  # type: ignore
    """The earliest date time value possible."""

    MAX: te.Final[NaiveDateTime] = None  # type: ignore
    """The latest date time value possible."""

    UNIX_EPOCH: te.Final[NaiveDateTime] = None  # type: ignore
    """1970-01-01T00:00:00."""

    # PROPERTIES #

    @property
    def date(self) -> Date:
        return self.__date

    @property
    def time(self) -> Time:
        return self.__time

    @property
    def year(self) -> Year:
        return self.__date.year

    @property
    def month(self) -> Month:
        return self.__date.month

    @property
    def day(self) -> int:
        return self.__date.day

    @property
    def weekday(self) -> Weekday:
        return self.__date.weekday

    @property
    def hour(self) -> int:
        return self.__time.hour

    @property
    def minute(self) -> int:
        return self.__time.minute

    @property
    def second(self) -> int:
        return self.__time.second

    @property
    def millisecond(self) -> int:
        return self.__time.millisecond

    @property
    def microsecond(self) -> int:
        return self.__time.microsecond

    @property
    def nanosecond(self) -> int:
        return self.__time.nanosecond

    # CONVERSION #

    def timestamp(self) -> Timestamp:
        """Seconds since 1970-01-01T00:00:00, every day counting 86400
        seconds, plus the nanoseconds of the current second.

        A leap second (23:59:60) yields the same timestamp as midnight of
        the following day.
        """
        days = self.__date.to_day_count() - _UNIX_EPOCH_DAY_COUNT
        seconds = days * _SECONDS_PER_DAY + self.__time.seconds_from_midnight()
        return Timestamp(seconds, self.__time.nanosecond)

    def to_native(self) -> datetime:
        """Convert to a naive Python :class:`datetime.datetime` value.

        Sub-microsecond precision is truncated.

        :raises ValueError: if the year is outside 1..9999 or the time is a
            leap second.
        """
        return datetime.combine(self.__date.to_native(),
                                self.__time.to_native())

    # ARITHMETIC #

    def add_years_overflowing(
        self, years: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        """See :meth:`.Date.add_years_overflowing`."""
        date, overflow = self.__date.add_years_overflowing(years)
        return NaiveDateTime(date, self.__time), overflow

    def add_years(self, years: int) -> NaiveDateTime:
        return NaiveDateTime(self.__date.add_years(years), self.__time)

    def add_months_overflowing(
        self, months: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        """See :meth:`.Date.add_months_overflowing`."""
        date, overflow = self.__date.add_months_overflowing(months)
        return NaiveDateTime(date, self.__time), overflow

    def add_months(self, months: int) -> NaiveDateTime:
        return NaiveDateTime(self.__date.add_months(months), self.__time)

    def add_days_overflowing(self, days: int) -> t.Tuple[NaiveDateTime, bool]:
        date, overflow = self.__date.add_days_overflowing(days)
        return NaiveDateTime(date, self.__time), overflow

    def add_days(self, days: int) -> NaiveDateTime:
        return NaiveDateTime(self.__date.add_days(days), self.__time)

    def add_hours_overflowing(
        self, hours: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        return self.add_nanoseconds_overflowing(
            int(hours) * 3600 * NANO_SECONDS
        )

    def add_minutes_overflowing(
        self, minutes: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        return self.add_nanoseconds_overflowing(
            int(minutes) * 60 * NANO_SECONDS
        )

    def add_seconds_overflowing(
        self, seconds: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        return self.add_nanoseconds_overflowing(int(seconds) * NANO_SECONDS)

    def add_nanoseconds_overflowing(
        self, nanoseconds: int
    ) -> t.Tuple[NaiveDateTime, bool]:
        """Move the date time along the timestamp scale.

        :returns: the new date time and whether its year wrapped around the
            bounds of :class:`.Year`.
        """
        total = self.timestamp().total_nanoseconds() + int(nanoseconds)
        return self._from_nanoseconds_overflowing(total)

    def add_hours(self, hours: int) -> NaiveDateTime:
        return self.__raise_on_overflow(self.add_hours_overflowing(hours))

    def add_minutes(self, minutes: int) -> NaiveDateTime:
        return self.__raise_on_overflow(self.add_minutes_overflowing(minutes))

    def add_seconds(self, seconds: int) -> NaiveDateTime:
        return self.__raise_on_overflow(self.add_seconds_overflowing(seconds))

    def add_nanoseconds(self, nanoseconds: int) -> NaiveDateTime:
        return self.__raise_on_overflow(
            self.add_nanoseconds_overflowing(nanoseconds)
        )

    @staticmethod
    def __raise_on_overflow(
        result: t.Tuple[NaiveDateTime, bool]
    ) -> NaiveDateTime:
        value, overflow = result
        if overflow:
            raise OverflowError("Date time addition overflowed")
        return value

    # OPERATIONS #

    def __hash__(self):
        return hash((self.__date, self.__time))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return self.__date == other.__date and self.__time == other.__time

    def __lt__(self, other: NaiveDateTime) -> bool:
        if not isinstance(other, NaiveDateTime):
            return NotImplemented
        return (self.__date, self.__time) < (other.__date, other.__time)

    def __reduce__(self):
        return type(self), (self.__date, self.__time)

    # FORMATTING #

    def iso_format(self, sep: str = "T") -> str:
        return "%s%s%s" % (self.__date.iso_format(), sep,
                           self.__time.iso_format())

    def __repr__(self) -> str:
        return "civiltime.NaiveDateTime(%r, %r)" % (self.__date, self.__time)

    def __str__(self) -> str:
        return self.iso_format()


_UNIX_EPOCH_DAY_COUNT = Date.UNIX_EPOCH.to_day_count()

NaiveDateTime.MIN = NaiveDateTime(Date.MIN, Time.MIN)  # type: ignore
NaiveDateTime.MAX = NaiveDateTime(Date.MAX, Time.MAX)  # type: ignore
NaiveDateTime.UNIX_EPOCH = NaiveDateTime(  # type: ignore
    Date.UNIX_EPOCH, Time.MIDNIGHT
)


@total_ordering
class DateTime(t.Generic[_Z]):
    """A point in time paired with the time zone it's viewed in.

    A :class:`.DateTime` stores the instant as a :class:`.NaiveDateTime` on
    the UTC scale, along with a :class:`.TimeZone` policy. The local offset
    is derived on demand by asking the time zone.

    Equality, ordering and hashing only consider the UTC value. Two date
    times viewed in different time zones are equal if they denote the same
    instant:

        >>> utc = NaiveDateTime(Date(2000, 1, 1), Time(12, 0, 0))
        >>> DateTime(utc, UTC) == DateTime(utc, UtcOffset.from_hours(5))
        True

    :param utc: the instant on the UTC scale
    :param timezone: the time zone to view the instant in
    """

    __utc: NaiveDateTime
    __timezone: _Z

    # CONSTRUCTOR #

    def __init__(self, utc: NaiveDateTime, timezone: _Z) -> None:
        if not isinstance(utc, NaiveDateTime):
            raise TypeError("utc must be a civiltime.NaiveDateTime")
        if not isinstance(timezone, TimeZone):
            raise TypeError("timezone must be a civiltime.TimeZone")
        self.__utc = utc
        self.__timezone = timezone

    # CLASS METHODS #

    @classmethod
    def from_utc(cls, utc: NaiveDateTime, timezone: _Z2) -> DateTime[_Z2]:
        """Same as calling the constructor."""
        return DateTime(utc, timezone)

    @classmethod
    def from_local(cls, local: NaiveDateTime, timezone: _Z2) -> DateTime[_Z2]:
        """Interpret a local date time in the given time zone.

        :raises ZoneError: if `local` can't occur in `timezone`.
        :raises OverflowError: if the UTC value leaves the range of
            :class:`.NaiveDateTime`.
        """
        dt, overflow = cls.from_local_overflowing(local, timezone)
        if overflow:
            raise OverflowError("Date time out of range")
        return dt

    @classmethod
    def from_local_overflowing(
        cls, local: NaiveDateTime, timezone: _Z2
    ) -> t.Tuple[DateTime[_Z2], bool]:
        """Like :meth:`.from_local` but wrapping the year of the UTC value
        around the bounds of :class:`.Year` instead of raising.

        :returns: the date time and whether the year wrapped.

        :raises ZoneError: if `local` can't occur in `timezone`.
        """
        utc, overflow = timezone.to_utc_overflowing(local)
        return DateTime(utc, timezone), overflow

    @classmethod
    def now(
        cls,
        timezone: t.Optional[_Z2] = None,
        clock: t.Optional[Clock] = None
    ) -> DateTime[_Z2]:
        """Get the current instant.

        :param timezone: the time zone to view the instant in, UTC if
            :data:`None`.
        :param clock: the clock to read, by default the most precise
            :class:`.Clock` available.
        """
        utc = NaiveDateTime.utc_now(clock)
        if timezone is None:
            return DateTime(utc, t.cast(_Z2, UTC))
        return DateTime(utc, timezone)

    @classmethod
    def from_native(cls, dt: datetime) -> DateTime[UtcOffset]:
        """Convert from an aware Python :class:`datetime.datetime` value.

        The result is viewed in a fixed :class:`.UtcOffset` equal to the
        offset of `dt`.

        :raises ValueError: if `dt` is naive.
        """
        offset = dt.utcoffset()
        if offset is None:
            raise ValueError("Only aware datetimes can be converted, "
                             "use NaiveDateTime.from_native instead")
        local = NaiveDateTime.from_native(dt.replace(tzinfo=None))
        return cls.from_local(
            local, UtcOffset(int(offset.total_seconds()))
        )

    # PROPERTIES #

    @property
    def timezone(self) -> _Z:
        return self.__timezone

    @property
    def naive_utc(self) -> NaiveDateTime:
        """The instant as a naive date time on the UTC scale."""
        return self.__utc

    def offset(self) -> UtcOffset:
        """The offset of the time zone at this instant."""
        return self.__timezone.utc_offset(self.__utc)

    def local_offset(self) -> UtcOffset:
        """The offset from this instant to its local date time.

        Equal to :meth:`.offset` in every zone but TAI. This is the offset
        shown by :meth:`.iso_format` and carried by :meth:`.to_native`.
        """
        return self.__timezone.local_offset(self.__utc)

    # CONVERSION #

    def to_naive_overflowing(self) -> t.Tuple[NaiveDateTime, bool]:
        """The local date time in this time zone.

        :returns: the local value and whether its year wrapped around the
            bounds of :class:`.Year`.
        """
        return self.__utc.add_seconds_overflowing(
            self.local_offset().seconds_ahead()
        )

    def to_naive(self) -> NaiveDateTime:
        """The local date time in this time zone.

        :raises OverflowError: if the local value leaves the range of
            :class:`.NaiveDateTime`.
        """
        return self.__utc.add_seconds(self.local_offset().seconds_ahead())

    def as_timezone(self, timezone: _Z2) -> DateTime[_Z2]:
        """The same instant viewed in another time zone."""
        return DateTime(self.__utc, timezone)

    def as_utc(self) -> DateTime[Utc]:
        return self.as_timezone(UTC)

    def as_tai(self, tai: t.Optional[Tai] = None) -> DateTime[Tai]:
        """The same instant viewed on the TAI scale.

        :param tai: the TAI zone to use, by default one backed by the
            default leap second registry.
        """
        if tai is None:
            tai = self.__tai()
        return self.as_timezone(tai)

    def unix_timestamp(self) -> Timestamp:
        return self.__utc.timestamp()

    def tai_timestamp(self, tai: t.Optional[Tai] = None) -> Timestamp:
        """The timestamp of the local value on the TAI scale."""
        return self.as_tai(tai).to_naive_overflowing()[0].timestamp()

    def to_native(self) -> datetime:
        """Convert to an aware Python :class:`datetime.datetime` value.

        The tzinfo is a fixed offset equal to :meth:`.local_offset` (see
        :meth:`.UtcOffset.to_tzinfo`). Sub-microsecond precision is
        truncated.
        """
        native = self.to_naive().to_native()
        return native.replace(tzinfo=self.local_offset().to_tzinfo())

    # ARITHMETIC #

    def __tai(self) -> Tai:
        from .tai import Tai

        if isinstance(self.__timezone, Tai):
            return self.__timezone
        return Tai()

    def add_seconds_overflowing(
        self, seconds: int
    ) -> t.Tuple[DateTime[_Z], bool]:
        """Move the instant by a number of elapsed seconds.

        The addition happens on the TAI scale, so leap seconds in between
        are accounted for.
        """
        return self.add_nanoseconds_overflowing(int(seconds) * NANO_SECONDS)

    def add_nanoseconds_overflowing(
        self, nanoseconds: int
    ) -> t.Tuple[DateTime[_Z], bool]:
        """Like :meth:`.add_seconds_overflowing` with nanoseconds."""
        tai = self.__tai()
        local, overflow = self.as_tai(tai).to_naive_overflowing()
        local, wrapped = local.add_nanoseconds_overflowing(nanoseconds)
        moved, resolved = DateTime.from_local_overflowing(local, tai)
        return (moved.as_timezone(self.__timezone),
                overflow or wrapped or resolved)

    # OPERATIONS #

    def __hash__(self):
        return hash(self.__utc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.__utc == other.__utc

    def __lt__(self, other: DateTime) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.__utc < other.__utc

    def __reduce__(self):
        return type(self), (self.__utc, self.__timezone)

    # FORMATTING #

    def iso_format(self, sep: str = "T") -> str:
        return "%s%s" % (self.to_naive().iso_format(sep),
                         self.local_offset())

    def __repr__(self) -> str:
        return "civiltime.DateTime(%r, %r)" % (self.__utc, self.__timezone)

    def __str__(self) -> str:
        return "%s %s" % (self.to_naive().iso_format(" "), self.__timezone)
