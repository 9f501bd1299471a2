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


from ._clock import Clock
from ._date import Date
from ._datetime import (
    DateTime,
    NaiveDateTime,
)
from ._meta import version as __version__
from ._month import Month
from ._time import Time
from ._timestamp import Timestamp
from ._weekday import Weekday
from ._year import (
    is_leap_year,
    Year,
)
from .exceptions import (
    CivilTimeError,
    ComponentRangeError,
    ConfigurationError,
    DayGreaterThanMaximumForMonthError,
    LeapDayNotInLeapYearError,
    MisplacedLeapSecondError,
    ParseMonthError,
    ParseWeekdayError,
    UnexpectedLeapSecondError,
    ZoneError,
)
from .tai import (
    add_leap_second,
    IERS_LEAP_SECONDS,
    LeapSecondRegistry,
    Tai,
    TAI,
)
from .timezone import (
    TimeZone,
    UTC,
    Utc,
    UtcOffset,
)


__all__ = [
    "__version__",
    "add_leap_second",
    "CivilTimeError",
    "Clock",
    "ComponentRangeError",
    "ConfigurationError",
    "Date",
    "DateTime",
    "DayGreaterThanMaximumForMonthError",
    "IERS_LEAP_SECONDS",
    "is_leap_year",
    "LeapDayNotInLeapYearError",
    "LeapSecondRegistry",
    "MisplacedLeapSecondError",
    "Month",
    "NaiveDateTime",
    "ParseMonthError",
    "ParseWeekdayError",
    "Tai",
    "TAI",
    "Time",
    "Timestamp",
    "TimeZone",
    "UnexpectedLeapSecondError",
    "UTC",
    "Utc",
    "UtcOffset",
    "Weekday",
    "Year",
    "ZoneError",
]
