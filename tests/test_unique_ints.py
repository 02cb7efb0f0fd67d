import random

import pytest

from lrufiles.unique_ints import (
    InvalidFileError,
    SortedUniqueInts,
    find_unique_ints,
    format_unique_ints,
    main,
    mark_duplicates,
    parse_ints,
    split_ranges,
)


def test_mark_duplicates_zeroes_repeats():
    assert mark_duplicates([1, 1, 2, 3, 3, 3]) == [1, 0, 2, 3, 0, 0]
    assert mark_duplicates([]) == []


def test_mark_duplicates_keeps_length_and_distinct_values():
    data = sorted(random.Random(1).choices(range(1, 20), k=60))
    marked = mark_duplicates(data)
    assert len(marked) == len(data)
    assert sorted(v for v in marked if v) == sorted(set(data))


def test_sorted_unique_ints_add():
    unique = SortedUniqueInts()
    assert unique.add(5) is True
    assert unique.add(-3) is True
    assert unique.add(5) is False
    assert unique.add(7) is True
    assert list(unique) == [-3, 5, 7]
    assert len(unique) == 3


def test_merge_skips_zero():
    unique = SortedUniqueInts()
    unique.merge([3, 0, 1, 3, 0])
    assert list(unique) == [1, 3]


@pytest.mark.parametrize("size,threads", [(0, 4), (3, 4), (100, 4), (1001, 3), (50, 1)])
def test_split_ranges_cover_everything(size, threads):
    ranges = split_ranges(size, threads, 10)
    assert len(ranges) == threads
    assert ranges[0][0] == 0
    assert ranges[-1][1] == size
    for (_, end), (start, _) in zip(ranges, ranges[1:]):
        assert start <= end or start >= size


def test_split_ranges_rejects_zero_threads():
    with pytest.raises(ValueError):
        split_ranges(10, 0, 10)


def test_parse_ints():
    assert parse_ints("1\n-2\n  +3\n") == [1, -2, 3]
    with pytest.raises(ValueError):
        parse_ints("1\nabc\n")
    with pytest.raises(ValueError):
        parse_ints("99999999999")


@pytest.mark.parametrize("threads", [1, 2, 4, 7])
def test_find_unique_ints_matches_set(tmp_path, threads):
    rng = random.Random(threads)
    numbers = [rng.randint(-1000, 1000) for _ in range(500)]
    path = tmp_path / "big-int.txt"
    path.write_text("\n".join(map(str, numbers)) + "\n")
    assert find_unique_ints(path, threads) == sorted(set(numbers) - {0})


def test_find_unique_ints_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert find_unique_ints(path) == []


def test_find_unique_ints_missing_file(tmp_path):
    with pytest.raises(InvalidFileError):
        find_unique_ints(tmp_path / "nope.txt")


def test_format_unique_ints():
    assert format_unique_ints([1, 2]) == "1 2  \n"
    assert format_unique_ints([]) == " \n"


def test_main_prints_values(tmp_path, capsys):
    path = tmp_path / "nums.txt"
    path.write_text("4\n2\n4\n0\n2\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == format_unique_ints([2, 4])


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == 1