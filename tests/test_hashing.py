import pytest

from algokit.hashing import PolyHash, count_occurrences, string_borders


def test_empty_substring_hashes_to_zero():
    hashes = PolyHash("abc")
    assert hashes.get(0, 0) == 0
    assert hashes.get(2, 2) == 0


def test_equal_substrings_share_a_hash():
    hashes = PolyHash("xabyab")
    assert hashes.get(1, 3) == hashes.get(4, 6)
    assert hashes.get(1, 3) == PolyHash("ab").get(0, 2)


def test_different_substrings_differ():
    hashes = PolyHash("abba")
    assert hashes.get(0, 2) != hashes.get(2, 4)
    assert hashes.get(0, 1) != hashes.get(1, 2)


def test_length():
    assert len(PolyHash("hello")) == len("hello")


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (2, 1), (0, 4)])
def test_get_rejects_bad_range(start, end):
    with pytest.raises(IndexError):
        PolyHash("abc").get(start, end)


def test_string_borders_example():
    assert string_borders("abcab") == [2]


@pytest.mark.parametrize("s", ["abacaba", "aaaa", "abcabcab", "xyz"])
def test_string_borders_are_borders(s):
    borders = string_borders(s)
    assert borders == sorted(borders)
    for length in borders:
        assert s[:length] == s[-length:]


def test_string_borders_of_doubled_string_include_half():
    assert len("abc") in string_borders("abc" * 2)


def test_string_borders_short_strings():
    assert string_borders("") == []
    assert string_borders("a") == []


def test_count_occurrences_overlapping():
    assert count_occurrences("abababa", "aba") == 3


def test_count_occurrences_whole_text():
    assert count_occurrences("needle", "needle") == 1


def test_count_occurrences_repeated_pattern():
    assert count_occurrences("xy" * 4, "xy") >= 4


def test_count_occurrences_pattern_longer_than_text():
    assert count_occurrences("abc", "abcd") == 0


def test_count_occurrences_absent():
    assert count_occurrences("aaaa", "b") == 0