import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.graphs import count_points_at_distance, shortest_path_avoiding_triplets

SQUARE = [(1, 2), (2, 3), (3, 4), (1, 3)]


def test_avoids_forbidden_triple():
    assert shortest_path_avoiding_triplets(4, SQUARE, [(1, 4, 3)]) == (2, [1, 3, 4])


def test_unreachable_target():
    assert shortest_path_avoiding_triplets(3, [(1, 2)], []) is None


def test_detour_through_repeated_vertex():
    result = shortest_path_avoiding_triplets(4, SQUARE, [(1, 2, 3), (1, 3, 4)])
    assert result == (4, [1, 3, 2, 3, 4])


def test_direct_edge_is_used():
    n = 5
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (1, n)]
    assert shortest_path_avoiding_triplets(n, edges) == (1, [1, n])


def _valid_walk(n, edges, forbidden, result):
    length, path = result
    adjacent = {frozenset(e) for e in edges}
    banned = set(forbidden)
    return (
        path[0] == 1
        and path[-1] == n
        and len(path) == length + 1
        and all(frozenset(pair) in adjacent for pair in zip(path, path[1:]))
        and all(triple not in banned for triple in zip(path, path[1:], path[2:]))
    )


_graphs = st.integers(2, 6).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=8),
        st.lists(
            st.tuples(st.integers(1, n), st.integers(1, n), st.integers(1, n)),
            max_size=6,
        ),
    )
)


@settings(max_examples=80)
@given(_graphs)
def test_returned_walks_are_valid(data):
    n, extra, forbidden = data
    edges = [(i, i + 1) for i in range(1, n)] + [e for e in extra if e[0] != e[1]]
    unrestricted = shortest_path_avoiding_triplets(n, edges)
    result = shortest_path_avoiding_triplets(n, edges, forbidden)
    if result is None:
        # Without restrictions the chain makes n reachable, so only bans can block it.
        assert len(forbidden) > 0
    else:
        assert _valid_walk(n, edges, forbidden, result)
        assert result[0] >= unrestricted[0]


@settings(max_examples=50)
@given(_graphs)
def test_connected_without_restrictions_is_reachable(data):
    n, extra, _ = data
    edges = [(i, i + 1) for i in range(1, n)] + [e for e in extra if e[0] != e[1]]
    result = shortest_path_avoiding_triplets(n, edges)
    assert _valid_walk(n, edges, [], result)
    assert result[0] <= n - 1


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        shortest_path_avoiding_triplets(3, [(1, 4)])


def test_points_at_distance_first_example():
    edges = [(1, 2, 1), (1, 3, 3), (2, 3, 1), (2, 4, 1), (3, 4, 1), (1, 4, 2)]
    assert count_points_at_distance(4, edges, 1, 2) == 3


def test_points_at_distance_second_example():
    edges = [(3, 1, 1), (3, 2, 1), (3, 4, 1), (3, 5, 1), (1, 2, 6), (4, 5, 8)]
    assert count_points_at_distance(5, edges, 3, 4) == 3


@pytest.mark.parametrize("leaves", [1, 3, 6])
@pytest.mark.parametrize("target", [2, 5])
def test_star_has_one_point_per_edge(leaves, target):
    weight = 5
    edges = [(1, leaf, weight) for leaf in range(2, leaves + 2)]
    assert count_points_at_distance(leaves + 1, edges, 1, target) == leaves


def test_beyond_every_distance():
    edges = [(1, 2, 3), (2, 3, 4)]
    assert count_points_at_distance(3, edges, 1, 100) == 0


def test_source_out_of_range():
    with pytest.raises(ValueError):
        count_points_at_distance(2, [(1, 2, 1)], 3, 1)