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


__all__ = [
    "I32_MIN",
    "I32_MAX",
    "I64_MIN",
    "I64_MAX",
    "NANO_SECONDS",
    "wrap_int",
    "overflowing_add",
    "checked_add",
    "saturating_add",
    "nano_divmod",
]


I32_MIN = -(2 ** 31)
I32_MAX = (2 ** 31) - 1
I64_MIN = -(2 ** 63)
I64_MAX = (2 ** 63) - 1

NANO_SECONDS = 1000000000


def wrap_int(value: int, bits: int) -> int:
    """Wrap an unbounded integer into a signed two's complement range.

        >>> wrap_int(2 ** 31, 32)
        -2147483648
        >>> wrap_int(-(2 ** 31) - 1, 32)
        2147483647
        >>> wrap_int(5, 32)
        5

    :param value: the integer to wrap
    :param bits: the width of the target integer type
    """
    span = 1 << bits
    half = 1 << (bits - 1)
    return (value + half) % span - half


def overflowing_add(x: int, y: int, bits: int) -> t.Tuple[int, bool]:
    """Add two integers as if they were signed integers of width `bits`.

    Returns the (possibly wrapped) sum along with a flag telling whether the
    exact sum would have left the representable range.

        >>> overflowing_add(2 ** 31 - 1, 1, 32)
        (-2147483648, True)
        >>> overflowing_add(1, 1, 32)
        (2, False)
    """
    exact = x + y
    wrapped = wrap_int(exact, bits)
    return wrapped, wrapped != exact


def checked_add(x: int, y: int, bits: int) -> t.Optional[int]:
    value, overflow = overflowing_add(x, y, bits)
    if overflow:
        return None
    return value


def saturating_add(x: int, y: int, bits: int) -> int:
    exact = x + y
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    return max(low, min(high, exact))


def nano_divmod(nanoseconds: int, unit: int) -> t.Tuple[int, int]:
    """Split a nanosecond count into whole `unit` nanoseconds and a
    remainder.

    The quotient is floored, so the remainder is never negative.

        >>> nano_divmod(-1, 1000000000)
        (-1, 999999999)
        >>> nano_divmod(1500000000, 1000000000)
        (1, 500000000)
    """
    return divmod(int(nanoseconds), int(unit))
