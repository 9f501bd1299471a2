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
from datetime import date
from functools import total_ordering


if t.TYPE_CHECKING:
    import typing_extensions as te

from ._arithmetic import (
    I32_MAX,
    I32_MIN,
    wrap_int,
)
from ._month import Month
from ._weekday import Weekday
from ._year import Year
from .exceptions import (
    ComponentRangeError,
    DayGreaterThanMaximumForMonthError,
    LeapDayNotInLeapYearError,
)


__all__ = [
    "Date",
]


#: Number of days in a 400 year cycle of the Gregorian calendar.
DAYS_PER_ERA = 146097

# Day count of 0000-03-01, the start of the era the algorithms below shift
# every date into. Counting from March puts the leap day at the very end of
# each shifted year.
_MARCH_1ST_OF_YEAR_ZERO = -306


def _days_from_civil(year: int, month: int, day: int) -> int:
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (year_of_era * 365 + year_of_era // 4 - year_of_era // 100
                  + day_of_year)
    return era * DAYS_PER_ERA + day_of_era + _MARCH_1ST_OF_YEAR_ZERO


def _civil_from_days(days: int) -> t.Tuple[int, int, int]:
    days -= _MARCH_1ST_OF_YEAR_ZERO
    era = days // DAYS_PER_ERA
    day_of_era = days - era * DAYS_PER_ERA
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524
                   - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4
                                - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def _coerce_month(month: t.Union[Month, int]) -> Month:
    if isinstance(month, Month):
        return month
    coerced = Month.from_number(int(month))
    if coerced is None:
        raise ComponentRangeError("month", month, 1, 12)
    return coerced


def _check_day(year: Year, month: Month, day: int) -> None:
    if day < 1:
        raise ComponentRangeError("day", day, 1, 31)
    leap_year = year.is_leap_year
    if month is Month.FEBRUARY and day == 29 and not leap_year:
        raise LeapDayNotInLeapYearError(year)
    maximum = month.days(leap_year)
    if day > maximum:
        raise DayGreaterThanMaximumForMonthError(year, month, day, maximum)


@total_ordering
class Date:
    """Idealized date representation.

    A :class:`.Date` object represents a date (year, month, and day) in the
    `proleptic Gregorian Calendar
    <https://en.wikipedia.org/wiki/Proleptic_Gregorian_calendar>`_.

    Every year of :class:`.Year` is supported, including year 0 and
    negative years.

    Each date has an alternate linear representation: the number of days
    after the start of the common era. 1 Jan 0001 is `day 0`, 2 Jan 0001 is
    `day 1` and 31 Dec 0000 is `day -1`. :meth:`.to_day_count` and
    :meth:`.from_day_count` convert between both representations using the
    400 year leap cycle of the Gregorian calendar.

    :param year: the year.
    :type year: Year or int
    :param month: the month. Minimum 1, maximum 12.
    :type month: Month or int
    :param day: the day. Minimum 1, maximum
        :meth:`Month.days(leap_year) <.Month.days>`.
    :type day: int

    :raises ComponentRangeError: if `month` or `day` is out of range.
    :raises DayGreaterThanMaximumForMonthError: if the month is shorter
        than `day`.
    :raises LeapDayNotInLeapYearError: for February 29th of a common year.
    """

    # CONSTRUCTOR #

    def __new__(
        cls,
        year: t.Union[Year, int],
        month: t.Union[Month, int],
        day: int
    ) -> Date:
        if not isinstance(year, Year):
            year = Year(year)
        month = _coerce_month(month)
        day = int(day)
        _check_day(year, month, day)
        return cls.__new(year, month, day)

    @classmethod
    def __new(cls, year: Year, month: Month, day: int) -> Date:
        instance = object.__new__(cls)
        instance.__year = year
        instance.__month = month
        instance.__day = day
        return instance

    # CLASS METHODS #

    @classmethod
    def from_ymd(
        cls,
        year: t.Union[Year, int],
        month: t.Union[Month, int],
        day: int
    ) -> Date:
        """Create a date from a year, a month and a day, validating all of
        them.

        Same as calling the constructor.
        """
        return cls(year, month, day)

    @classmethod
    def from_ymd_unchecked(cls, year: Year, month: Month, day: int) -> Date:
        """Create a date without checking that it exists.

        This is a fast path for callers that already validated the values.
        The caller must guarantee that `month` is a :class:`.Month` and that
        `day` exists in that month of `year`. Violating this contract does
        not raise; it produces a :class:`.Date` whose day count, ordering and
        arithmetic are meaningless.
        """
        return cls.__new(year, month, day)

    @classmethod
    def from_day_count(cls, days: int) -> Date:
        """The :class:`.Date` that lies `days` days after 1 Jan 0001.

        The reverse transformation is :meth:`.to_day_count`.

        :raises ValueError: if the resulting year doesn't fit into
            :class:`.Year`.
        """
        year, month, day = _civil_from_days(int(days))
        if year < I32_MIN or year > I32_MAX:
            raise ValueError("Day count out of range (%d..%d)"
                             % (_MIN_DAY_COUNT, _MAX_DAY_COUNT))
        return cls.__new(Year(year), Month(month), day)

    @classmethod
    def from_day_count_overflowing(cls, days: int) -> t.Tuple[Date, bool]:
        """Like :meth:`.from_day_count` but wrapping the year around the
        bounds of :class:`.Year` instead of raising.

        :returns: the date and whether the year wrapped.
        """
        year, month, day = _civil_from_days(int(days))
        wrapped = wrap_int(year, 32)
        if (wrapped != year and month == 2 and day == 29
                and not Year(wrapped).is_leap_year):
            # the wrapped year can be a common year
            day = 28
        return cls.__new(Year(wrapped), Month(month), day), wrapped != year

    @classmethod
    def from_year_day(cls, year: t.Union[Year, int], year_day: int) -> Date:
        """Create a date from a year and the day of that year.

        :param year_day: 1 for the first of January, up to 365 or 366.

        :raises ComponentRangeError: if `year_day` does not exist in `year`.
        """
        if not isinstance(year, Year):
            year = Year(year)
        leap_year = year.is_leap_year
        if year_day < 1 or year_day > year.days:
            raise ComponentRangeError("day of year", year_day, 1, year.days)
        for month in Month:
            if year_day <= month.last_day_ordinal(leap_year):
                day = year_day - month.first_day_ordinal(leap_year) + 1
                return cls.__new(year, month, day)
        raise AssertionError("unreachable")

    @classmethod
    def from_native(cls, d: date) -> Date:
        """Convert from a native Python :class:`datetime.date` value."""
        return cls.__new(Year(d.year), Month(d.month), d.day)

    # CLASS ATTRIBUTES #

    MIN: te.Final[Date] = None  # type: ignore
    """The earliest date value possible."""

    MAX: te.Final[Date] = None  # type: ignore
    """The latest date value possible."""

    UNIX_EPOCH: te.Final[Date] = None  # type: ignore
    """1 Jan 1970."""

    # INSTANCE ATTRIBUTES #

    __year: Year

    __month: Month

    __day: int

    @property
    def year(self) -> Year:
        """The year of the date."""
        return self.__year

    @property
    def month(self) -> Month:
        """The month of the date."""
        return self.__month

    @property
    def day(self) -> int:
        """The day of the month."""
        return self.__day

    @property
    def year_month_day(self) -> t.Tuple[int, int, int]:
        """3-tuple of (year, month, day) as plain integers."""
        return int(self.__year), int(self.__month), self.__day

    @property
    def is_leap_year(self) -> bool:
        return self.__year.is_leap_year

    @property
    def year_day(self) -> int:
        """The day of the year, with `1 Jan` corresponding to `1`."""
        first = self.__month.first_day_ordinal(self.__year.is_leap_year)
        return first + self.__day - 1

    @property
    def weekday(self) -> Weekday:
        # 1 Jan 0001 is a Monday in the proleptic Gregorian calendar
        return Weekday(self.to_day_count() % 7)

    # CONVERSION #

    def to_day_count(self) -> int:
        """The number of days after 1 Jan 0001.

        Dates before that day have a negative day count.
        """
        return _days_from_civil(int(self.__year), int(self.__month),
                                self.__day)

    def days_after_common_era(self) -> int:
        """Alias of :meth:`.to_day_count`."""
        return self.to_day_count()

    @classmethod
    def from_days_after_common_era(cls, days: int) -> Date:
        """Alias of :meth:`.from_day_count`."""
        return cls.from_day_count(days)

    def to_native(self) -> date:
        """Convert to a native Python :class:`datetime.date` value.

        :raises ValueError: if the year is outside 1..9999, the range
            supported by :class:`datetime.date`.
        """
        return date(int(self.__year), int(self.__month), self.__day)

    # ARITHMETIC #

    def add_days_overflowing(self, days: int) -> t.Tuple[Date, bool]:
        """Add a number of days (possibly negative).

        :returns: the new date and whether the year wrapped around the
            bounds of :class:`.Year`.
        """
        return self.from_day_count_overflowing(self.to_day_count() + int(days))

    def add_days_checked(self, days: int) -> t.Optional[Date]:
        """Add a number of days, returning :data:`None` on overflow."""
        result, overflow = self.add_days_overflowing(days)
        if overflow:
            return None
        return result

    def add_days(self, days: int) -> Date:
        """Add a number of days.

        :raises OverflowError: if the year leaves the range of
            :class:`.Year`.
        """
        result, overflow = self.add_days_overflowing(days)
        if overflow:
            raise OverflowError("Date addition overflowed")
        return result

    def add_months_overflowing(self, months: int) -> t.Tuple[Date, bool]:
        """Move the date by a number of months, keeping the day of the
        month.

        Unlike :meth:`.add_days`, a day that does not exist in the target
        month is rejected rather than rolled over into the following month.

        :returns: the new date and whether the year wrapped around the
            bounds of :class:`.Year`.

        :raises DayGreaterThanMaximumForMonthError: if the target month is
            shorter than the day of the month.
        :raises LeapDayNotInLeapYearError: if the day is the 29th and the
            target is February of a common year.
        """
        years, month_index = divmod(int(self.__month) - 1 + int(months), 12)
        year, overflow = self.__year.overflowing_add(years)
        month = Month(month_index + 1)
        _check_day(year, month, self.__day)
        return self.__new(year, month, self.__day), overflow

    def add_months(self, months: int) -> Date:
        """Like :meth:`.add_months_overflowing`.

        :raises OverflowError: if the year leaves the range of
            :class:`.Year`.
        """
        result, overflow = self.add_months_overflowing(months)
        if overflow:
            raise OverflowError("Date addition overflowed")
        return result

    def add_years_overflowing(self, years: int) -> t.Tuple[Date, bool]:
        """Move the date by a number of years, keeping month and day.

        :returns: the new date and whether the year wrapped around the
            bounds of :class:`.Year`.

        :raises LeapDayNotInLeapYearError: if the date is February 29th and
            the target year is a common year.
        """
        year, overflow = self.__year.overflowing_add(years)
        _check_day(year, self.__month, self.__day)
        return self.__new(year, self.__month, self.__day), overflow

    def add_years(self, years: int) -> Date:
        """Like :meth:`.add_years_overflowing`.

        :raises OverflowError: if the year leaves the range of
            :class:`.Year`.
        """
        result, overflow = self.add_years_overflowing(years)
        if overflow:
            raise OverflowError("Date addition overflowed")
        return result

    # OPERATIONS #

    def __hash__(self):
        return hash(self.year_month_day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.year_month_day == other.year_month_day

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.year_month_day < other.year_month_day

    def __reduce__(self):
        return type(self), self.year_month_day

    # FORMATTING #

    def iso_format(self) -> str:
        year = int(self.__year)
        if 0 <= year <= 9999:
            year_str = "%04d" % year
        else:
            year_str = "%+05d" % year
        return "%s-%02d-%02d" % (year_str, self.__month, self.__day)

    def __repr__(self) -> str:
        return "civiltime.Date(%r, %r, %r)" % self.year_month_day

    def __str__(self) -> str:
        return self.iso_format()


Date.MIN = Date(I32_MIN, 1, 1)  # type: ignore
Date.MAX = Date(I32_MAX, 12, 31)  # type: ignore
Date.UNIX_EPOCH = Date(1970, 1, 1)  # type: ignore

_MIN_DAY_COUNT = Date.MIN.to_day_count()
_MAX_DAY_COUNT = Date.MAX.to_day_count()
