import pytest

from algokit.tap2019 import circles_separate, insert_ic, max_binary_path


def test_insert_ic_example():
    assert insert_ic("Juan") == "Juaicn"


@pytest.mark.parametrize("name", ["a", "Ana", "Guillermo"])
def test_insert_ic_shape(name):
    result = insert_ic(name)
    assert len(result) == len(name) + 2
    assert result.startswith(name[:-1])
    assert result.endswith("ic" + name[-1])


def test_insert_ic_empty_raises():
    with pytest.raises(ValueError):
        insert_ic("")


def test_circles_far_apart():
    assert circles_separate([(0, 0, 1), (10, 0, 1)])


def test_circles_crossing():
    assert not circles_separate([(0, 0, 2), (3, 0, 2)])


def test_circles_touching_outside():
    assert not circles_separate([(0, 0, 1), (2, 0, 1)])


def test_circle_strictly_inside():
    assert circles_separate([(0, 0, 10), (1, 0, 2)])
    assert circles_separate([(1, 0, 2), (0, 0, 10)])


def test_circle_touching_from_inside():
    assert not circles_separate([(0, 0, 10), (8, 0, 2)])


def test_coincident_circles():
    assert not circles_separate([(3, 3, 4), (3, 3, 4)])


def test_one_bad_pair_among_many():
    assert not circles_separate([(0, 0, 1), (50, 50, 1), (100, 0, 1), (101, 0, 1)])


def test_no_or_single_circle():
    assert circles_separate([])
    assert circles_separate([(0, 0, 5)])


def test_binary_path_cycle_picks_largest():
    assert max_binary_path([1, 0], [2, 1], 3) == "101"


def test_binary_path_all_zero():
    assert max_binary_path([0, 0, 0], [2, 3, 1], 4) == "0" * 4


def test_binary_path_too_short_walk_gives_zeros():
    assert max_binary_path([1], [0], 2) == "00"


def test_binary_path_single_step():
    assert max_binary_path([1], [0], 1) == "1"


def test_binary_path_length_matches():
    result = max_binary_path([1, 0, 1], [3, 1, 2], 5)
    assert len(result) == 5
    assert set(result) <= {"0", "1"}


def test_binary_path_mismatched_inputs():
    with pytest.raises(ValueError):
        max_binary_path([1, 0], [1], 1)


def test_binary_path_unknown_table():
    with pytest.raises(ValueError):
        max_binary_path([1], [2], 1)