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

import pytest

from civiltime import (
    LeapSecondRegistry,
    Tai,
)


# from civiltime.debug import watch
#
# watch()


@pytest.fixture
def registry() -> LeapSecondRegistry:
    return LeapSecondRegistry()


@pytest.fixture
def iers_registry() -> LeapSecondRegistry:
    return LeapSecondRegistry(iers_table=True)


@pytest.fixture
def tai(registry) -> Tai:
    return Tai(registry)


@pytest.fixture
def default_registry(mocker) -> LeapSecondRegistry:
    """Replace the process-wide registry with an empty one for the test."""
    fresh = LeapSecondRegistry()
    mocker.patch("civiltime.tai._default_registry", fresh)
    return fresh
