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

import datetime

import pytest
import pytz

from civiltime import (
    Date,
    NaiveDateTime,
    Time,
    TimeZone,
    UTC,
    Utc,
    UtcOffset,
)


LEAP = NaiveDateTime(Date(2016, 12, 31), Time(23, 59, 60))


def test_time_zone_is_abstract() -> None:
    with pytest.raises(TypeError):
        _ = TimeZone()  # type: ignore


class TestUtcOffset:

    def test_seconds_ahead(self) -> None:
        offset = UtcOffset(5400)
        assert offset.seconds_ahead() == 5400
        assert offset.hours_ahead() == 1.5
        assert offset.to_timedelta() == datetime.timedelta(minutes=90)

    def test_default_is_zero(self) -> None:
        assert UtcOffset() == UtcOffset.UTC
        assert UtcOffset.UTC.seconds_ahead() == 0

    @pytest.mark.parametrize("seconds", (-86399, -1, 0, 1, 86399))
    def test_from_seconds(self, seconds) -> None:
        assert UtcOffset.from_seconds(seconds).seconds_ahead() == seconds

    @pytest.mark.parametrize("seconds", (-86400, 86400, 100000))
    def test_from_seconds_out_of_range(self, seconds) -> None:
        with pytest.raises(ValueError):
            UtcOffset.from_seconds(seconds)
        with pytest.raises(ValueError):
            UtcOffset(seconds)

    def test_from_seconds_unchecked(self) -> None:
        assert UtcOffset.from_seconds_unchecked(-3600) == UtcOffset(-3600)

    def test_from_hours(self) -> None:
        assert UtcOffset.from_hours(-5) == UtcOffset(-18000)
        with pytest.raises(ValueError):
            UtcOffset.from_hours(24)

    def test_from_hms(self) -> None:
        assert UtcOffset.from_hms(5, 30).seconds_ahead() == 19800
        assert UtcOffset.from_hms(-3, -30).seconds_ahead() == -12600
        assert UtcOffset.from_hms(0, 0, 15).seconds_ahead() == 15

    def test_is_fixed(self) -> None:
        offset = UtcOffset.from_hours(2)
        assert offset.utc_offset(NaiveDateTime.UNIX_EPOCH) is offset
        assert offset.offset_from_local(NaiveDateTime.UNIX_EPOCH) is offset
        assert offset.offset_from_local(LEAP) is offset

    def test_neg(self) -> None:
        assert -UtcOffset(3600) == UtcOffset(-3600)

    def test_equality(self) -> None:
        assert UtcOffset(60) == UtcOffset.from_hms(0, 1)
        assert UtcOffset(60) != UtcOffset(61)
        assert hash(UtcOffset(60)) == hash(UtcOffset(60))
        assert UtcOffset(0) != UTC

    @pytest.mark.parametrize(("seconds", "expected"), (
        (0, "+00:00"),
        (3600, "+01:00"),
        (-12600, "-03:30"),
        (30, "+00:00:30"),
        (-86399, "-23:59:59"),
    ))
    def test_str(self, seconds, expected) -> None:
        assert str(UtcOffset(seconds)) == expected

    def test_repr(self) -> None:
        assert repr(UtcOffset(-3600)) == "civiltime.UtcOffset(-3600)"

    @pytest.mark.parametrize("seconds", (3600, -12600, 20700))
    def test_to_tzinfo_whole_minutes(self, seconds) -> None:
        tzinfo = UtcOffset(seconds).to_tzinfo()
        assert tzinfo == pytz.FixedOffset(seconds // 60)
        assert tzinfo.utcoffset(None) == datetime.timedelta(seconds=seconds)

    def test_to_tzinfo_zero(self) -> None:
        assert UtcOffset(0).to_tzinfo() is pytz.utc

    def test_to_tzinfo_seconds(self) -> None:
        tzinfo = UtcOffset(-12630).to_tzinfo()
        assert isinstance(tzinfo, datetime.timezone)
        assert tzinfo.utcoffset(None) == datetime.timedelta(seconds=-12630)


class TestUtc:

    def test_offset_is_zero(self) -> None:
        assert UTC.utc_offset(NaiveDateTime.UNIX_EPOCH) == UtcOffset.UTC
        assert UTC.offset_from_local(NaiveDateTime.UNIX_EPOCH) == UtcOffset.UTC

    def test_accepts_leap_second(self) -> None:
        assert UTC.offset_from_local(LEAP) == UtcOffset.UTC

    def test_equality(self) -> None:
        assert Utc() == UTC
        assert hash(Utc()) == hash(UTC)
        assert UTC != UtcOffset.UTC

    def test_to_tzinfo(self) -> None:
        assert UTC.to_tzinfo() is pytz.utc

    def test_formatting(self) -> None:
        assert str(UTC) == "UTC"
        assert repr(UTC) == "civiltime.Utc()"
