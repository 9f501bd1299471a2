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

from .exceptions import ParseWeekdayError


__all__ = [
    "Weekday",
]


_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
    "Sunday",
)


class Weekday(IntEnum):
    """Day of the week, numbered from 0 (Monday) to 6 (Sunday).

    The numbering matches :meth:`datetime.date.weekday`. One-indexed and
    Sunday-based numbers are available through the ``number_*`` methods.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_number(cls, number: int) -> t.Optional[Weekday]:
        """Get the weekday `number` days after Monday.

        :returns: :data:`None` if `number` is not in 0..6
        """
        if 0 <= number <= 6:
            return cls(number)
        return None

    @classmethod
    def from_name(cls, name: str) -> t.Optional[Weekday]:
        return _BY_NAME.get(name.strip().lower())

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> t.Optional[Weekday]:
        return _BY_ABBREVIATION.get(abbreviation.strip().lower())

    @classmethod
    def parse(cls, text: str) -> Weekday:
        """Parse a weekday from its name or its abbreviation.

        :raises ParseWeekdayError: if `text` names no weekday.
        """
        weekday = cls.from_name(text) or cls.from_abbreviation(text)
        if weekday is None:
            raise ParseWeekdayError(text)
        return weekday

    @property
    def long_name(self) -> str:
        return _NAMES[self]

    @property
    def abbreviation(self) -> str:
        return _NAMES[self][:3]

    def next(self) -> Weekday:
        return Weekday((self + 1) % 7)

    def previous(self) -> Weekday:
        return Weekday((self - 1) % 7)

    def number_days_from_monday(self) -> int:
        """Zero-indexed day of the week, starting with Monday = 0."""
        return int(self)

    def number_from_monday(self) -> int:
        """One-indexed day of the week, starting with Monday = 1."""
        return int(self) + 1

    def number_days_from_sunday(self) -> int:
        """Zero-indexed day of the week, starting with Sunday = 0."""
        return (int(self) + 1) % 7

    def number_from_sunday(self) -> int:
        """One-indexed day of the week, starting with Sunday = 1."""
        return self.number_days_from_sunday() + 1

    def __str__(self) -> str:
        return self.long_name


_BY_NAME = {weekday.long_name.lower(): weekday for weekday in Weekday}
_BY_ABBREVIATION = {
    weekday.abbreviation.lower(): weekday for weekday in Weekday
}
