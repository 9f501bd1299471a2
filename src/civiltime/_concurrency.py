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

import threading
import typing as t
from contextlib import contextmanager


__all__ = [
    "ReadWriteLock",
]


class ReadWriteLock:
    """Lock allowing many concurrent readers or a single writer.

    A writer waits for all outstanding readers to leave. While a writer is
    waiting or holding the lock, new readers are held back, so a stream of
    readers can't starve the writer.

    The lock is not reentrant. A thread holding the read lock must not try
    to acquire the write lock (or the read lock again while a writer is
    waiting), or it will deadlock.

    Inspired by the lock primitives of the Python standard library.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def __repr__(self):
        res = object.__repr__(self)
        if self._writer:
            extra = "write-locked"
        elif self._readers:
            extra = f"read-locked readers={self._readers}"
        else:
            extra = "unlocked"
        if self._writers_waiting:
            extra += f" writers_waiting={self._writers_waiting}"
        return f"<{res[1:-1]} [{extra}]>"

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("cannot release un-acquired read lock")
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("cannot release un-acquired write lock")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self) -> t.Iterator[None]:
        """Hold the lock shared for the duration of the ``with`` block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> t.Iterator[None]:
        """Hold the lock exclusively for the duration of the ``with``
        block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
