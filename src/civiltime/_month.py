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
from enum import IntEnum

from .exceptions import ParseMonthError


__all__ = [
    "Month",
]


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_LAST_DAY_ORDINAL_COMMON = (
    31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365
)
_LAST_DAY_ORDINAL_LEAP = (
    31, 60, 91, 121, 152, 182, 213, 244, 274, 305, 335, 366
)

_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)


class Month(IntEnum):
    """Months of the year, numbered from 1 (January) to 12 (December).

    Being an :class:`enum.IntEnum`, months compare equal to their number and
    sort in calendar order.
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> t.Optional[Month]:
        """Get the month with the given number.

        :returns: :data:`None` if `number` is not in 1..12
        """
        if 1 <= number <= 12:
            return cls(number)
        return None

    @classmethod
    def from_name(cls, name: str) -> t.Optional[Month]:
        """Get the month from its English name, e.g. ``"January"``.

        The lookup is case-insensitive.
        """
        return _BY_NAME.get(name.strip().lower())

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> t.Optional[Month]:
        """Get the month from its three letter abbreviation, e.g.
        ``"Jan"``.

        The lookup is case-insensitive.
        """
        return _BY_ABBREVIATION.get(abbreviation.strip().lower())

    @classmethod
    def parse(cls, text: str) -> Month:
        """Parse a month from a number, a name or an abbreviation.

        :raises ParseMonthError: if `text` names no month.
        """
        stripped = text.strip()
        if stripped.isdigit():
            month = cls.from_number(int(stripped))
        else:
            month = cls.from_name(stripped) or cls.from_abbreviation(stripped)
        if month is None:
            raise ParseMonthError(text)
        return month

    @property
    def number(self) -> int:
        return int(self)

    @property
    def long_name(self) -> str:
        """The English name of the month, e.g. ``"January"``."""
        return _NAMES[self - 1]

    @property
    def abbreviation(self) -> str:
        """The three letter abbreviation of the month, e.g. ``"Jan"``."""
        return _NAMES[self - 1][:3]

    def next(self) -> Month:
        return Month(self % 12 + 1)

    def previous(self) -> Month:
        return Month((self - 2) % 12 + 1)

    def days(self, leap_year: bool) -> int:
        """The number of days in this month.

        :param leap_year: whether the month lies in a leap year
        """
        if leap_year and self is Month.FEBRUARY:
            return 29
        return _DAYS_IN_MONTH[self - 1]

    def last_day_ordinal(self, leap_year: bool) -> int:
        """The day of the year of the last day of this month.

        December yields 365 for common years and 366 for leap years.
        """
        if leap_year:
            return _LAST_DAY_ORDINAL_LEAP[self - 1]
        return _LAST_DAY_ORDINAL_COMMON[self - 1]

    def first_day_ordinal(self, leap_year: bool) -> int:
        """The day of the year of the first day of this month."""
        return self.last_day_ordinal(leap_year) - self.days(leap_year) + 1

    def __str__(self) -> str:
        return self.long_name


_BY_NAME = {month.long_name.lower(): month for month in Month}
_BY_ABBREVIATION = {month.abbreviation.lower(): month for month in Month}
