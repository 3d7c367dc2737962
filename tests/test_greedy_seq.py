import pytest
from hypothesis import given, strategies as st

from algokit.greedy_seq import longest_greedy_subsequences


def _naive_window(window):
    best = 0
    for start in range(len(window)):
        length, current = 1, start
        for j in range(start + 1, len(window)):
            if window[j] > window[current]:
                current = j
                length += 1
        best = max(best, length)
    return best


def test_first_example():
    assert longest_greedy_subsequences([1, 5, 2, 5, 3, 6], 4) == [2, 2, 3]


def test_second_example():
    assert longest_greedy_subsequences([4, 5, 2, 5, 3, 6, 6], 6) == [3, 3]


def test_window_of_one_gives_ones():
    values = [5, 3, 8, 1, 9]
    assert longest_greedy_subsequences(values, 1) == [1] * len(values)


def test_increasing_sequence_full_window():
    values = list(range(10))
    assert longest_greedy_subsequences(values, len(values)) == [len(values)]


def test_output_length():
    values = [2, 7, 1, 8, 2, 8]
    assert len(longest_greedy_subsequences(values, 3)) == len(values) - 3 + 1


@pytest.mark.parametrize("k", [0, 4, -1])
def test_bad_window_rejected(k):
    with pytest.raises(ValueError):
        longest_greedy_subsequences([1, 2, 3], k)


@given(st.lists(st.integers(0, 6), min_size=1, max_size=12), st.data())
def test_matches_direct_search(values, data):
    k = data.draw(st.integers(1, len(values)))
    expected = [_naive_window(values[s:s + k]) for s in range(len(values) - k + 1)]
    assert longest_greedy_subsequences(values, k) == expected