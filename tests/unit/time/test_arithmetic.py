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

from civiltime._arithmetic import (
    checked_add,
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    nano_divmod,
    overflowing_add,
    saturating_add,
    wrap_int,
)


@pytest.mark.parametrize(("value", "bits", "expected"), (
    (0, 32, 0),
    (I32_MAX, 32, I32_MAX),
    (I32_MAX + 1, 32, I32_MIN),
    (I32_MIN - 1, 32, I32_MAX),
    (2 ** 32, 32, 0),
    (I64_MAX + 1, 64, I64_MIN),
    (-1, 8, -1),
    (128, 8, -128),
))
def test_wrap_int(value, bits, expected) -> None:
    assert wrap_int(value, bits) == expected


@pytest.mark.parametrize(("x", "y", "expected"), (
    (1, 2, (3, False)),
    (I32_MAX, 1, (I32_MIN, True)),
    (I32_MIN, -1, (I32_MAX, True)),
    (I32_MAX, I32_MIN, (-1, False)),
))
def test_overflowing_add(x, y, expected) -> None:
    assert overflowing_add(x, y, 32) == expected


def test_checked_add() -> None:
    assert checked_add(I64_MAX - 1, 1, 64) == I64_MAX
    assert checked_add(I64_MAX, 1, 64) is None


@pytest.mark.parametrize(("x", "y", "expected"), (
    (I32_MAX, 1, I32_MAX),
    (I32_MIN, -1, I32_MIN),
    (I32_MAX, -1, I32_MAX - 1),
))
def test_saturating_add(x, y, expected) -> None:
    assert saturating_add(x, y, 32) == expected


@pytest.mark.parametrize(("nanoseconds", "unit", "expected"), (
    (0, 1000000000, (0, 0)),
    (1999999999, 1000000000, (1, 999999999)),
    (-1, 1000000000, (-1, 999999999)),
    (-1000, 1000, (-1, 0)),
))
def test_nano_divmod(nanoseconds, unit, expected) -> None:
    assert nano_divmod(nanoseconds, unit) == expected
