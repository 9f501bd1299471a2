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
This module contains the core civiltime exception classes.

Classes:

+ CivilTimeError
  + ConfigurationError
+ ValueError
  + ComponentRangeError
  + DayGreaterThanMaximumForMonthError
  + LeapDayNotInLeapYearError
  + MisplacedLeapSecondError
  + ParseMonthError
  + ParseWeekdayError
  + ZoneError
    + UnexpectedLeapSecondError

All value errors also derive from :class:`.CivilTimeError`, so callers can
catch everything raised by this package with a single clause.
"""


from __future__ import annotations

import typing as t


if t.TYPE_CHECKING:
    from ._datetime import NaiveDateTime
    from ._month import Month
    from ._year import Year


__all__ = [
    "CivilTimeError",
    "ComponentRangeError",
    "ConfigurationError",
    "DayGreaterThanMaximumForMonthError",
    "LeapDayNotInLeapYearError",
    "MisplacedLeapSecondError",
    "ParseMonthError",
    "ParseWeekdayError",
    "UnexpectedLeapSecondError",
    "ZoneError",
]


class CivilTimeError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(CivilTimeError):
    """Raised when there is an error concerning a configuration."""


class ComponentRangeError(CivilTimeError, ValueError):
    """Raised when a single date or time field is outside its valid range.

    :param name: the name of the field, e.g. ``"hour"``
    :param value: the rejected value
    :param minimum: the smallest accepted value
    :param maximum: the largest accepted value
    """

    def __init__(self, name: str, value: int, minimum: int, maximum: int):
        super().__init__(
            f"{name.capitalize()} out of range ({minimum}..{maximum}): "
            f"{value!r}"
        )
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class DayGreaterThanMaximumForMonthError(CivilTimeError, ValueError):
    """Raised when a day does not exist in the month it was paired with.

    This is also what month addition raises when the day of the month is
    too big for the target month.
    """

    def __init__(self, year: Year, month: Month, day: int, maximum: int):
        super().__init__(
            f"Day {day} is greater than the maximum day {maximum} "
            f"of {month.long_name} {int(year)}"
        )
        self.year = year
        self.month = month
        self.day = day
        self.maximum = maximum


class LeapDayNotInLeapYearError(CivilTimeError, ValueError):
    """Raised when February 29th is requested in a common year."""

    def __init__(self, year: Year):
        super().__init__(
            f"February 29th does not exist in {int(year)}, "
            f"which is not a leap year"
        )
        self.year = year


class MisplacedLeapSecondError(CivilTimeError, ValueError):
    """Raised when second 60 is requested anywhere but at 23:59."""

    def __init__(self, hour: int, minute: int):
        super().__init__(
            f"A leap second can only occur at 23:59:60, "
            f"not at {hour:02d}:{minute:02d}:60"
        )
        self.hour = hour
        self.minute = minute


class ParseMonthError(CivilTimeError, ValueError):
    """Raised when a string can't be understood as a month."""

    def __init__(self, text: str):
        super().__init__(f"Failed to parse the month from {text!r}")
        self.text = text


class ParseWeekdayError(CivilTimeError, ValueError):
    """Raised when a string can't be understood as a day of the week."""

    def __init__(self, text: str):
        super().__init__(f"Failed to parse the weekday from {text!r}")
        self.text = text


class ZoneError(CivilTimeError, ValueError):
    """Raised when a local date time can't be mapped to a UTC instant."""


class UnexpectedLeapSecondError(ZoneError):
    """Raised when a leap second is given to a zone that can't express it.

    TAI has no leap seconds, so a local TAI value at second 60 does not
    correspond to any instant.
    """

    def __init__(self, given: NaiveDateTime):
        super().__init__(
            "TAI cannot represent leap seconds, so a leap second cannot be "
            f"converted to TAI. Received: {given}"
        )
        self.given = given
