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


from time import (
    time,
    time_ns,
)

from ._arithmetic import nano_divmod
from ._clock import Clock
from ._timestamp import Timestamp


__all__ = [
    "SafeClock",
    "PEP564Clock",
]


class SafeClock(Clock):
    """ Clock implementation based on the floating point :func:`time.time`.
    This clock is guaranteed microsecond precision.
    """

    @classmethod
    def precision(cls):
        return 6

    @classmethod
    def available(cls):
        return True

    def utc_time(self):
        seconds, microseconds = nano_divmod(int(time() * 1000000), 1000000)
        return Timestamp(seconds, microseconds * 1000)


class PEP564Clock(Clock):
    """ Clock implementation based on :func:`time.time_ns`.
    This clock is guaranteed nanosecond precision.
    """

    @classmethod
    def precision(cls):
        return 9

    @classmethod
    def available(cls):
        return True

    def utc_time(self):
        seconds, nanoseconds = nano_divmod(time_ns(), 1000000000)
        return Timestamp(seconds, nanoseconds)
