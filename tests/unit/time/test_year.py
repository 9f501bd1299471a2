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


import copy

import pytest

from civiltime import (
    is_leap_year,
    Year,
)


@pytest.mark.parametrize(("year", "expected"), (
    (2000, True),
    (2020, True),
    (2024, True),
    (1900, False),
    (2021, False),
    (2100, False),
    (0, True),
    (-4, True),
    (-100, False),
    (-400, True),
))
def test_is_leap_year(year, expected) -> None:
    assert is_leap_year(year) is expected
    assert Year(year).is_leap_year is expected
    assert Year(year).days == (366 if expected else 365)


class TestYear:

    def test_default(self) -> None:
        assert Year() == Year(0)
        assert Year().as_int() == 0

    def test_bounds(self) -> None:
        assert int(Year.MIN) == -(2 ** 31)
        assert int(Year.MAX) == 2 ** 31 - 1

    @pytest.mark.parametrize("value", (2 ** 31, -(2 ** 31) - 1))
    def test_out_of_range(self, value) -> None:
        with pytest.raises(ValueError):
            _ = Year(value)

    def test_from_int(self) -> None:
        assert Year.from_int(1970) == Year(1970)

    def test_checked_add(self) -> None:
        assert Year(2021).checked_add(1) == Year(2022)
        assert Year.MAX.checked_add(1) is None
        assert Year.MIN.checked_sub(1) is None

    def test_overflowing_add(self) -> None:
        assert Year(2021).overflowing_add(-21) == (Year(2000), False)
        assert Year.MAX.overflowing_add(1) == (Year.MIN, True)
        assert Year.MIN.overflowing_sub(1) == (Year.MAX, True)

    def test_saturating_add(self) -> None:
        assert Year.MAX.saturating_add(5) == Year.MAX
        assert Year.MIN.saturating_sub(5) == Year.MIN
        assert Year(1).saturating_add(5) == Year(6)

    def test_wrapping_add(self) -> None:
        assert Year.MAX.wrapping_add(2) == Year(-(2 ** 31) + 1)
        assert Year.MIN.wrapping_sub(1) == Year.MAX
        assert Year(10).wrapping_sub(3) == Year(7)

    def test_operators(self) -> None:
        assert Year(2000) + 21 == Year(2021)
        assert 21 + Year(2000) == Year(2021)
        assert Year(2000) - 1 == Year(1999)

    def test_operators_raise_on_overflow(self) -> None:
        with pytest.raises(OverflowError):
            _ = Year.MAX + 1
        with pytest.raises(OverflowError):
            _ = Year.MIN - 1

    def test_compares_with_int(self) -> None:
        assert Year(2021) == 2021
        assert Year(2020) < 2021
        assert Year(2022) > Year(2021)
        assert Year(2021) != "2021"

    def test_hash(self) -> None:
        assert hash(Year(5)) == hash(Year(5))
        assert len({Year(5), Year(5), Year(6)}) == 2

    def test_index(self) -> None:
        assert [0, 1, 2][Year(1)] == 1
        assert "%04d" % Year(7) == "0007"

    def test_repr(self) -> None:
        assert repr(Year(2021)) == "civiltime.Year(2021)"
        assert str(Year(-5)) == "-5"

    def test_deep_copy(self) -> None:
        year = Year(1984)
        assert copy.deepcopy(year) == year
