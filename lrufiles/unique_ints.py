"""Collect the distinct integers of a whitespace-separated text file.

The file is split into byte ranges that are scanned by worker threads; every
value found is merged into one shared sorted collection. The value 0 marks
a duplicate while merging and is therefore never reported.
"""

from __future__ import annotations

import bisect
import re
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, Sequence

MAX_THREAD_COUNT = 4
MAX_DIGIT_COUNT = 10
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WORD = re.compile(rb"\S+")
_SPACE = re.compile(rb"\s")
_INTEGER = re.compile(r"[+-]?\d+")


class InvalidFileError(Exception):
    """The input file cannot be opened or read."""


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of range: {text}")
    return value


def mark_duplicates(sorted_ints: Sequence[int]) -> list[int]:
    """Return a copy of ``sorted_ints`` with every repeat replaced by 0."""
    result: list[int] = []
    previous: int | None = None
    for index, value in enumerate(sorted_ints):
        result.append(0 if index and value == previous else value)
        previous = value
    return result


class SortedUniqueInts:
    """A thread-safe ascending collection of distinct integers."""

    def __init__(self) -> None:
        self._values: list[int] = []
        self._lock = threading.Lock()

    def add(self, value: int) -> bool:
        """Insert ``value`` unless present; return whether it was inserted."""
        with self._lock:
            pos = bisect.bisect_left(self._values, value)
            if pos < len(self._values) and self._values[pos] == value:
                return False
            self._values.insert(pos, value)
            return True

    def merge(self, values: Iterable[int]) -> None:
        """Add every non-zero value; zeros stand for marked duplicates."""
        for value in values:
            if value != 0:
                self.add(value)

    def __iter__(self) -> Iterator[int]:
        with self._lock:
            return iter(list(self._values))

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)


def split_ranges(
    size: int,
    thread_count: int = MAX_THREAD_COUNT,
    max_digit_count: int = MAX_DIGIT_COUNT,
) -> list[tuple[int, int]]:
    """Split ``size`` bytes into overlapping ``(start, end)`` ranges.

    Each range reaches ``max_digit_count`` bytes past its share so that a
    number straddling a boundary is still read whole; the last range ends at
    ``size``.
    """
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    share = size // thread_count
    ranges = []
    start = 0
    for _ in range(thread_count):
        end = min(start + share + max_digit_count, size)
        ranges.append((start, end))
        start += share + 1
    return ranges


def parse_ints(text: str) -> list[int]:
    """Parse whitespace-separated integers; raise ValueError on bad input."""
    return [_to_int(word) for word in text.split()]


def _scan_range(data: bytes, start: int, end: int) -> list[int]:
    pos = start
    if 0 < start <= len(data) and not data[start - 1 : start].isspace():
        # The range begins inside a number that the previous range reads.
        gap = _SPACE.search(data, start)
        pos = gap.start() if gap else len(data)
    values = []
    for match in _WORD.finditer(data, pos):
        if match.start() >= end:
            break
        values.append(_to_int(match.group().decode("ascii", errors="replace")))
    return values


def find_unique_ints(path, thread_count: int = MAX_THREAD_COUNT) -> list[int]:
    """Return the distinct non-zero integers of the file at ``path``, sorted."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise InvalidFileError(f"invalid file: {path}: {exc}") from exc

    unique = SortedUniqueInts()

    def work(bounds: tuple[int, int]) -> None:
        values = sorted(_scan_range(data, *bounds))
        unique.merge(mark_duplicates(values))

    ranges = split_ranges(len(data), thread_count)
    with ThreadPoolExecutor(max_workers=thread_count) as pool:
        for future in [pool.submit(work, bounds) for bounds in ranges]:
            future.result()
    return list(unique)


def format_unique_ints(values: Iterable[int]) -> str:
    """Render values as space-terminated numbers followed by ' \\n'."""
    return "".join(f"{value} " for value in values) + " \n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the distinct integers of the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage unique-ints <file-name>")
        return 1
    try:
        values = find_unique_ints(args[0])
    except (InvalidFileError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(format_unique_ints(values))
    return 0