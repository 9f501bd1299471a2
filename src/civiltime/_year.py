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
from functools import total_ordering


if t.TYPE_CHECKING:
    import typing_extensions as te

from ._arithmetic import (
    checked_add,
    I32_MAX,
    I32_MIN,
    overflowing_add,
    saturating_add,
    wrap_int,
)


__all__ = [
    "Year",
    "is_leap_year",
]


def is_leap_year(year: int) -> bool:
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


@total_ordering
class Year:
    """A year of the proleptic Gregorian calendar.

    Years are stored as 32-bit signed integers, so year 0 and negative
    years are representable. Arithmetic is offered in the same flavours as
    fixed-width integers: checked (returns :data:`None` on overflow),
    overflowing (returns the wrapped value and a flag), saturating and
    wrapping. The ``+`` and ``-`` operators raise :exc:`OverflowError`
    instead of wrapping.

        >>> Year(2021).checked_add(1)
        civiltime.Year(2022)
        >>> Year.MAX.overflowing_add(1)
        (civiltime.Year(-2147483648), True)

    :param value: the year number

    :raises ValueError: if `value` does not fit into 32 bits.
    """

    MIN: te.Final[Year] = None  # type: ignore
    """The earliest year that can be represented."""

    MAX: te.Final[Year] = None  # type: ignore
    """The latest year that can be represented."""

    def __init__(self, value: int = 0) -> None:
        value = int(value)
        if value < I32_MIN or value > I32_MAX:
            raise ValueError("Year out of range (%d..%d)" % (I32_MIN, I32_MAX))
        self.__value = value

    @classmethod
    def from_int(cls, value: int) -> Year:
        return cls(value)

    def as_int(self) -> int:
        return self.__value

    # PROPERTIES #

    @property
    def is_leap_year(self) -> bool:
        """Whether this year has a February 29th.

        A year is a leap year if it's divisible by 4, except for years that
        are divisible by 100 but not by 400.
        """
        return is_leap_year(self.__value)

    @property
    def days(self) -> int:
        """The number of days in this year (365 or 366)."""
        return 366 if self.is_leap_year else 365

    # ARITHMETIC #

    def checked_add(self, years: int) -> t.Optional[Year]:
        value = checked_add(self.__value, int(years), 32)
        if value is None:
            return None
        return Year(value)

    def overflowing_add(self, years: int) -> t.Tuple[Year, bool]:
        value, overflow = overflowing_add(self.__value, int(years), 32)
        return Year(value), overflow

    def saturating_add(self, years: int) -> Year:
        return Year(saturating_add(self.__value, int(years), 32))

    def wrapping_add(self, years: int) -> Year:
        return Year(wrap_int(self.__value + int(years), 32))

    def checked_sub(self, years: int) -> t.Optional[Year]:
        return self.checked_add(-int(years))

    def overflowing_sub(self, years: int) -> t.Tuple[Year, bool]:
        return self.overflowing_add(-int(years))

    def saturating_sub(self, years: int) -> Year:
        return self.saturating_add(-int(years))

    def wrapping_sub(self, years: int) -> Year:
        return self.wrapping_add(-int(years))

    def __add__(self, other: int) -> Year:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        year = self.checked_add(other)
        if year is None:
            raise OverflowError("Year addition overflowed")
        return year

    __radd__ = __add__

    def __sub__(self, other: int) -> Year:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        year = self.checked_sub(other)
        if year is None:
            raise OverflowError("Year subtraction overflowed")
        return year

    # CONVERSION & COMPARISON #

    def __int__(self) -> int:
        return self.__value

    def __index__(self) -> int:
        return self.__value

    def __hash__(self):
        return hash(self.__value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Year):
            return self.__value == other.__value
        if isinstance(other, int):
            return self.__value == other
        return NotImplemented

    def __lt__(self, other: t.Union[Year, int]) -> bool:
        if isinstance(other, Year):
            return self.__value < other.__value
        if isinstance(other, int):
            return self.__value < other
        return NotImplemented

    def __repr__(self) -> str:
        return "civiltime.Year(%r)" % self.__value

    def __str__(self) -> str:
        return str(self.__value)


Year.MIN = Year(I32_MIN)  # type: ignore
Year.MAX = Year(I32_MAX)  # type: ignore
