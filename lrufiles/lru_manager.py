"""Least-recently-used bookkeeping for file names.

Entries are indexed by a small chained hash table and kept in access order,
most recent first.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

HASH_BUCKETS = 128
MAX_LRU_ENTRIES = 256
MAX_FILE_NAME_WITH_PATH = 256


class Status(IntEnum):
    """Outcome of an operation on the manager."""

    ERROR = 0
    SUCCESS = 1
    ADD = 2
    UPDATE = 3
    PRESENT = 4
    REMOVE = 5
    REMOVE_TIME = 6


@dataclass(frozen=True)
class Info:
    """A cached file name and the time it was first recorded."""

    file_name: str
    time: float

    @classmethod
    def create(cls, file_name: str) -> "Info":
        """Record ``file_name`` with the current time."""
        return cls(file_name=file_name, time=time.time())


def bucket_index(key_name: str, buckets: int) -> int:
    """Return the hash bucket for ``key_name`` among ``buckets`` buckets."""
    if buckets < 1:
        raise ValueError("buckets must be at least 1")
    return sum(ord(ch) * 33 for ch in key_name) % buckets


class LRUManager:
    """Tracks file names in least-recently-used order.

    When an insertion brings the number of entries up to ``max_entries`` the
    least recently used entry is dropped, so at most ``max_entries - 1``
    names are held between calls.
    """

    def __init__(self, max_entries: int = MAX_LRU_ENTRIES, buckets: int = HASH_BUCKETS) -> None:
        if max_entries < 2:
            raise ValueError("max_entries must be at least 2")
        if buckets < 1:
            raise ValueError("buckets must be at least 1")
        self.max_entries = max_entries
        self.buckets = buckets
        self._order: OrderedDict[str, Info] = OrderedDict()
        self._table: list[list[str]] = [[] for _ in range(buckets)]

    def add(self, file_name: str) -> Status:
        """Record a use of ``file_name`` and make it the most recent entry.

        Returns ``Status.SUCCESS`` for a new name and ``Status.PRESENT`` when
        the name was already held.
        """
        if file_name in self._order:
            self._order.move_to_end(file_name, last=False)
            status = Status.PRESENT
        else:
            self._order[file_name] = Info.create(file_name)
            self._order.move_to_end(file_name, last=False)
            # Newest names go to the head of their bucket chain.
            self._table[bucket_index(file_name, self.buckets)].insert(0, file_name)
            status = Status.SUCCESS
        self._evict()
        return status

    def _evict(self) -> None:
        if len(self._order) == self.max_entries:
            oldest, _ = self._order.popitem(last=True)
            self._table[bucket_index(oldest, self.buckets)].remove(oldest)

    def info(self, file_name: str) -> Info:
        """Return the record for ``file_name``; raise KeyError if absent."""
        return self._order[file_name]

    def files(self) -> list[str]:
        """Return the held names, most recently used first."""
        return list(self._order)

    def bucket(self, index: int) -> list[str]:
        """Return the names in hash bucket ``index``, newest first."""
        if not 0 <= index < self.buckets:
            raise IndexError(f"bucket index {index} out of range")
        return list(self._table[index])

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._order

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._order))