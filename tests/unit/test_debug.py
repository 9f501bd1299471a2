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

import io
import logging

import pytest

from civiltime import (
    Date,
    debug as civiltime_debug,
    LeapSecondRegistry,
)


@pytest.fixture
def civiltime_logger():
    logger = logging.getLogger("civiltime")
    level = logger.level
    yield logger
    logger.setLevel(level)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


def test_shows_leap_second_additions(civiltime_logger, out) -> None:
    registry = LeapSecondRegistry()
    with civiltime_debug.Watcher(out=out):
        registry.add_leap_second(Date(2017, 1, 1))
    assert "<LEAP SECONDS> added 2017-01-01" in out.getvalue()


def test_stops_on_exit(civiltime_logger, out) -> None:
    registry = LeapSecondRegistry()
    with civiltime_debug.Watcher(out=out) as watcher:
        assert watcher.watching
    assert not watcher.watching
    registry.add_leap_second(Date(2017, 1, 1))
    assert out.getvalue() == ""
    assert not any(isinstance(h, logging.StreamHandler)
                   and h.stream is out
                   for h in civiltime_logger.handlers)


def test_filters_by_tag(civiltime_logger, out) -> None:
    with civiltime_debug.Watcher("CONFIG", out=out):
        registry = LeapSecondRegistry(leap_seconds=[Date(2017, 1, 1)])
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert "<CONFIG> <RegistryConfig" in lines[0]
    assert len(registry) == 1


@pytest.mark.parametrize("tag", civiltime_debug.TAGS)
def test_tag_filter_accepts_its_tag(tag) -> None:
    record = logging.LogRecord("civiltime", logging.DEBUG, __file__, 1,
                               "[#0000]  _: <%s> x", (tag,), None)
    assert civiltime_debug.TagFilter(tag).filter(record)
    assert civiltime_debug.TagFilter().filter(record)
    others = [other for other in civiltime_debug.TAGS if other != tag]
    assert not civiltime_debug.TagFilter(*others).filter(record)


def test_rejects_unknown_tag() -> None:
    with pytest.raises(ValueError):
        civiltime_debug.Watcher("civiltime")


def test_level_hides_debug(civiltime_logger, out) -> None:
    with civiltime_debug.Watcher(level=logging.INFO, out=out):
        LeapSecondRegistry().add_leap_second(Date(2017, 1, 1))
    assert out.getvalue() == ""


def test_lowers_logger_level(civiltime_logger, out) -> None:
    civiltime_logger.setLevel(logging.WARNING)
    with civiltime_debug.Watcher(out=out):
        assert civiltime_logger.level == logging.DEBUG
    civiltime_logger.setLevel(logging.INFO)
    with civiltime_debug.Watcher(level=logging.ERROR, out=out):
        assert civiltime_logger.level == logging.INFO


@pytest.mark.parametrize("thread_info", (True, False))
def test_thread_info(civiltime_logger, out, thread_info) -> None:
    with civiltime_debug.Watcher(out=out, thread_info=thread_info):
        LeapSecondRegistry().add_leap_second(Date(2017, 1, 1))
    line = out.getvalue().splitlines()[-1]
    assert line.startswith("[Thread ") is thread_info
    assert "[DEBUG   ]" in line


def test_watch(civiltime_logger, out) -> None:
    watcher = civiltime_debug.watch("LEAP SECONDS", out=out)
    try:
        assert watcher.watching
        assert watcher.tags == ("LEAP SECONDS",)
        LeapSecondRegistry().add_leap_second(Date(2017, 1, 1))
    finally:
        watcher.stop()
    assert out.getvalue().count("<LEAP SECONDS>") == 1


def test_watch_twice_keeps_one_handler(civiltime_logger, out) -> None:
    before = len(civiltime_logger.handlers)
    watcher = civiltime_debug.Watcher(out=out)
    watcher.watch()
    watcher.watch()
    try:
        assert len(civiltime_logger.handlers) == before + 1
    finally:
        watcher.stop()
    assert len(civiltime_logger.handlers) == before
