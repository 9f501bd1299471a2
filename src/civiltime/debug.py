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
Debug logging.

Everything this library logs goes to the ``"civiltime"`` logger at DEBUG
level. Each message is tagged with what it concerns:

* ``<LEAP SECONDS>``: a leap second was added to a registry
* ``<CLOCK>``: a clock implementation was selected
* ``<CONFIG>``: a registry configuration was consumed

:class:`.Watcher` shows these messages on a stream, all of them or only
those with some of the tags::

    from civiltime.debug import Watcher

    with Watcher("LEAP SECONDS"):
        registry = LeapSecondRegistry(iers_table=True)

.. note::
    The exact messages are not part of the API contract and might change at
    any time without notice.
"""


from __future__ import annotations

import typing as t
from logging import (
    DEBUG,
    Filter,
    Formatter,
    getLogger,
    LogRecord,
    StreamHandler,
)
from sys import stderr


__all__ = [
    "TAGS",
    "TagFilter",
    "Watcher",
    "watch",
]


TAGS = ("LEAP SECONDS", "CLOCK", "CONFIG")


class TagFilter(Filter):
    """Let through the records tagged with one of `tags`, or all records
    if no tag is given.

    :raises ValueError: if a tag is not one of :data:`.TAGS`.
    """

    def __init__(self, *tags: str) -> None:
        super().__init__()
        unknown = [tag for tag in tags if tag not in TAGS]
        if unknown:
            raise ValueError("Unknown log tags: " + ", ".join(unknown))
        self.markers = tuple("<%s>" % tag for tag in tags)

    def filter(self, record: LogRecord) -> bool:
        if not self.markers:
            return True
        message = record.getMessage()
        return any(marker in message for marker in self.markers)


class Watcher:
    """Show the library's debug log on a stream.

    Usable as a context manager, or with :meth:`.watch` and :meth:`.stop`.
    Watching lowers the level of the ``"civiltime"`` logger to `level` if
    it is higher; stopping does not raise it again.

    :param tags: the tags to show, see :data:`.TAGS`. All messages are
        shown if none are given.
    :param level: minimum log level to show
    :param out: stream to write to
    :param thread_info: whether to prefix each message with the thread that
        logged it; leap seconds are often added from another thread than
        the one reading them.
    """

    def __init__(
        self,
        *tags: str,
        level: int = DEBUG,
        out: t.TextIO = stderr,
        thread_info: bool = True,
    ) -> None:
        self.tags = tags
        self.level = level
        self.out = out
        self.filter = TagFilter(*tags)
        format_ = "[%(levelname)-8s] %(asctime)s  %(message)s"
        if thread_info:
            format_ = "[Thread %(thread)d] " + format_
        self.formatter = Formatter(format_)
        self._logger = getLogger("civiltime")
        self._handler: t.Optional[StreamHandler] = None

    def __enter__(self) -> Watcher:
        self.watch()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    @property
    def watching(self) -> bool:
        return self._handler is not None

    def watch(self) -> None:
        """Start writing log messages to the stream."""
        self.stop()
        handler = StreamHandler(self.out)
        handler.setFormatter(self.formatter)
        handler.setLevel(self.level)
        handler.addFilter(self.filter)
        self._logger.addHandler(handler)
        if self._logger.getEffectiveLevel() > self.level:
            self._logger.setLevel(self.level)
        self._handler = handler

    def stop(self) -> None:
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler = None


def watch(
    *tags: str,
    level: int = DEBUG,
    out: t.TextIO = stderr,
    thread_info: bool = True,
) -> Watcher:
    """Create a :class:`.Watcher`, start it and return it.

    Example::

        from civiltime.debug import watch

        watch("LEAP SECONDS", "CONFIG")
    """
    watcher = Watcher(*tags, level=level, out=out, thread_info=thread_info)
    watcher.watch()
    return watcher
