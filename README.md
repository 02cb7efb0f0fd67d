# lrufiles

Two small tools for bookkeeping on files.

## LRU manager

`lrufiles.lru_manager.LRUManager` tracks the file names you use, most recently used
first. Names are also kept in a chained hash table of `buckets` buckets (128 by
default). When an `add` brings the number of held names up to `max_entries` (256 by
default), the least recently used name is dropped, so at most `max_entries - 1` names
are held between calls.

```python
from lrufiles.lru_manager import LRUManager, Status

lru = LRUManager()
assert lru.add("/var/data/a.txt") is Status.SUCCESS
lru.add("/var/data/b.txt")
assert lru.add("/var/data/a.txt") is Status.PRESENT   # moves it to the front

print(lru.files())              # ['/var/data/a.txt', '/var/data/b.txt']
print(len(lru), "/var/data/b.txt" in lru)
print(lru.info("/var/data/a.txt").time)
```

- `add(file_name)` returns `Status.SUCCESS` for a new name and `Status.PRESENT` for
  one already held.
- `info(file_name)` returns an `Info` record (`file_name`, `time` of first use) and
  raises `KeyError` for an unknown name.
- `files()` and iteration give the names, most recent first.
- `bucket(index)` lists the names in one hash bucket, newest first; an index out of
  range raises `IndexError`.
- `bucket_index(key_name, buckets)` is the hash that picks a name's bucket.

## Unique integers

`lrufiles.unique_ints` reads a text file of whitespace-separated integers (for
example one per line). It splits the file into overlapping byte ranges, scans each
range in its own thread, and merges the values into one sorted collection of
distinct integers.

```python
from lrufiles.unique_ints import find_unique_ints, format_unique_ints

values = find_unique_ints("big-int.txt", 4)
print(format_unique_ints(values), end="")
```

Things to know:

- Values must fit in a signed 32-bit integer; anything else raises `ValueError`.
- `0` is used to mark duplicates while merging, so it is never reported.
- A file that cannot be opened raises `InvalidFileError`.

The helpers are usable on their own: `parse_ints(text)`, `mark_duplicates(sorted_ints)`,
`split_ranges(size, thread_count, max_digit_count)` and the thread-safe
`SortedUniqueInts` collection.

The same job runs from the command line:

```
unique-ints big-int.txt
```

It prints the distinct values in ascending order on one line. Without exactly one
argument it prints a usage line and exits with status 1; if the file cannot be read
or holds something that is not an integer, it reports the error on standard error
and exits with status 1.

## Tests

```
pip install -e .[test]
pytest
```