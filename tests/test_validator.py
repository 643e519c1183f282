import pytest

import fourcolor


def test_valid_coloring(triangle):
    coloring = fourcolor.ColorAssignment({'a': 0, 'b': 1, 'c': 2})
    assert fourcolor.validate(triangle, coloring)
    assert fourcolor.find_conflicts(triangle, coloring) == []


def test_adjacent_nodes_sharing_a_color(triangle):
    coloring = {'a': 0, 'b': 1, 'c': 1}
    assert not fourcolor.validate(triangle, coloring)
    assert fourcolor.find_conflicts(triangle, coloring) == [('b', 'c')]
    assert fourcolor.count_conflicts(triangle, coloring) == 1


def test_uncolored_nodes_never_conflict(triangle):
    assert fourcolor.validate(triangle, {})
    assert fourcolor.validate(triangle, {'a': 0})
    assert fourcolor.validate(triangle, {'a': 0, 'c': 1})


def test_nonadjacent_nodes_may_share_a_color(two_triangles):
    coloring = {'a': 0, 'b': 1, 'c': 2, 'd': 0, 'e': 1, 'f': 2}
    assert fourcolor.validate(two_triangles, coloring)


def test_every_conflict_is_found(k4):
    coloring = {'a': 0, 'b': 0, 'c': 0, 'd': 1}
    assert fourcolor.find_conflicts(k4, coloring) == \
        [('a', 'b'), ('a', 'c'), ('b', 'c')]
    assert fourcolor.count_conflicts(k4, coloring) == 3


def test_unknown_nodes_are_ignored(triangle):
    assert fourcolor.validate(triangle, {'a': 0, 'zz': 0})


def test_validation_does_not_mutate(triangle):
    coloring = fourcolor.ColorAssignment({'a': 0, 'b': 0}, valid=True)
    before = coloring.copy()
    assert not fourcolor.validate(triangle, coloring)
    assert coloring == before


if __name__ == "__main__":
    pytest.main(["-v", __file__])
