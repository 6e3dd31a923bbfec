import pytest

from rustlings.exercises.options import drain_present, maybe_icecream


@pytest.mark.parametrize(
    "hour, expected",
    [(9, 5), (10, 5), (23, 0), (22, 0), (25, None)],
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    assert maybe_icecream(12) == 5


def test_layered_option():
    values = [None, *range(1, 11)]
    cursor = 10
    for integer in drain_present(values):
        assert integer == cursor
        cursor -= 1
    assert cursor == 0
    assert values == []


def test_drain_stops_at_none_and_keeps_the_rest():
    values = [1, 2, None, 3, 4]
    assert list(drain_present(values)) == [4, 3]
    assert values == [1, 2]


def test_drain_empty_list():
    values = []
    assert list(drain_present(values)) == []