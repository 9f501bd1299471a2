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


import pytest

from civiltime import (
    CivilTimeError,
    ComponentRangeError,
    ConfigurationError,
    Date,
    DayGreaterThanMaximumForMonthError,
    LeapDayNotInLeapYearError,
    MisplacedLeapSecondError,
    Month,
    NaiveDateTime,
    ParseMonthError,
    ParseWeekdayError,
    Time,
    UnexpectedLeapSecondError,
    Year,
    ZoneError,
)


@pytest.mark.parametrize("error_cls", (
    ComponentRangeError,
    DayGreaterThanMaximumForMonthError,
    LeapDayNotInLeapYearError,
    MisplacedLeapSecondError,
    ParseMonthError,
    ParseWeekdayError,
    ZoneError,
    UnexpectedLeapSecondError,
))
def test_value_errors(error_cls) -> None:
    assert issubclass(error_cls, CivilTimeError)
    assert issubclass(error_cls, ValueError)


def test_configuration_error() -> None:
    assert issubclass(ConfigurationError, CivilTimeError)
    assert not issubclass(ConfigurationError, ValueError)


def test_component_range_error() -> None:
    error = ComponentRangeError("hour", 24, 0, 23)
    assert (error.name, error.value, error.minimum, error.maximum) == (
        "hour", 24, 0, 23
    )
    assert str(error) == "Hour out of range (0..23): 24"


def test_day_greater_than_maximum_for_month_error() -> None:
    error = DayGreaterThanMaximumForMonthError(Year(2021), Month.FEBRUARY,
                                               31, 28)
    assert error.year == 2021
    assert error.month is Month.FEBRUARY
    assert error.day == 31
    assert error.maximum == 28
    assert str(error) == (
        "Day 31 is greater than the maximum day 28 of February 2021"
    )


def test_leap_day_not_in_leap_year_error() -> None:
    error = LeapDayNotInLeapYearError(Year(2021))
    assert error.year == 2021
    assert "2021" in str(error)


def test_misplaced_leap_second_error() -> None:
    error = MisplacedLeapSecondError(12, 0)
    assert (error.hour, error.minute) == (12, 0)


def test_parse_errors() -> None:
    assert ParseMonthError("Smarch").text == "Smarch"
    assert "Smarch" in str(ParseMonthError("Smarch"))
    assert ParseWeekdayError("Caturday").text == "Caturday"


def test_unexpected_leap_second_error() -> None:
    given = NaiveDateTime(Date(2016, 12, 31), Time(23, 59, 60))
    error = UnexpectedLeapSecondError(given)
    assert error.given == given
    assert str(error).endswith("Received: 2016-12-31T23:59:60")
