import pytest

from antfarm.model import Farm, FarmError, Weight
from antfarm.solver import (
    divide_ants,
    reset_unused_links,
    solve,
    update_link_weights,
)


def build(rooms, links, start, end, ants=1):
    farm = Farm()
    by_name = {name: farm.add_room(name) for name in rooms}
    farm.start = by_name[start]
    farm.end = by_name[end]
    farm.total_ants = ants
    farm.index_rooms()
    for first, second in links:
        farm.add_link(by_name[first], by_name[second])
    farm.connect()
    return farm


def names(path):
    return [room.name for room in path]


def linear():
    return build(["s", "a", "e"], [("s", "a"), ("a", "e")], "s", "e")


def test_update_marks_flow_forward():
    farm = linear()
    path = [farm.room("s"), farm.room("a"), farm.room("e")]
    assert update_link_weights(farm, path) is False
    link = farm.find_link(farm.room("s"), farm.room("a"))
    assert link.one_two == Weight.DROP
    assert link.two_one == Weight.INVERSE


def test_update_reports_cancelled_tunnel():
    farm = linear()
    path = [farm.room("s"), farm.room("a"), farm.room("e")]
    update_link_weights(farm, path)
    assert update_link_weights(farm, list(reversed(path))) is True
    link = farm.find_link(farm.room("a"), farm.room("e"))
    assert (link.one_two, link.two_one) == (Weight.DROP, Weight.DROP)


def test_reset_clears_flow_but_keeps_cancelled():
    farm = build(
        ["s", "a", "b", "e"],
        [("s", "a"), ("a", "e"), ("s", "b"), ("b", "e")],
        "s",
        "e",
    )
    s, a, b, e = (farm.room(n) for n in "sabe")
    update_link_weights(farm, [s, a, e])
    update_link_weights(farm, [s, b, e])
    update_link_weights(farm, [e, b])
    reset_unused_links(farm, [[s, a, e], [s, b, e]])
    cleared = farm.find_link(s, a)
    assert (cleared.one_two, cleared.two_one) == (Weight.UNUSED, Weight.UNUSED)
    kept = farm.find_link(b, e)
    assert (kept.one_two, kept.two_one) == (Weight.DROP, Weight.DROP)


def test_divide_ants_needs_a_path():
    with pytest.raises(ValueError):
        divide_ants(3, [])


def test_divide_ants_single_path():
    assert divide_ants(5, [2]) == ([5], 6)


def test_divide_ants_equal_paths_balance():
    ants, turns = divide_ants(10, [2, 2])
    assert ants == [5, 5]
    assert turns == 6


@pytest.mark.parametrize(
    "total, lengths",
    [(1, [3]), (7, [1, 4]), (20, [2, 3, 5]), (100, [4, 4, 6, 9]), (3, [1, 10])],
)
def test_divide_ants_invariants(total, lengths):
    ants, turns = divide_ants(total, lengths)
    assert sum(ants) == total
    assert len(ants) == len(lengths)
    assert turns == max(l - 1 + a for l, a in zip(lengths, ants) if a > 0)


def test_solve_linear():
    farm = linear()
    farm.total_ants = 3
    solution = solve(farm)
    assert [names(p) for p in solution.paths] == [["s", "a", "e"]]
    assert solution.ants == [3]
    assert solution.turns == 4


def test_solve_uses_both_disjoint_paths():
    farm = build(
        ["s", "a", "b", "e"],
        [("s", "a"), ("a", "e"), ("s", "b"), ("b", "e")],
        "s",
        "e",
        ants=10,
    )
    solution = solve(farm)
    assert [names(p) for p in solution.paths] == [["s", "a", "e"], ["s", "b", "e"]]
    assert solution.ants == [5, 5]
    assert solution.turns == 6


def test_solve_one_ant_keeps_shortest_path():
    farm = build(
        ["s", "a", "b", "c", "e"],
        [("s", "a"), ("a", "e"), ("s", "b"), ("b", "c"), ("c", "e")],
        "s",
        "e",
        ants=1,
    )
    solution = solve(farm)
    assert [names(p) for p in solution.paths] == [["s", "a", "e"]]
    assert solution.ants == [1]


def test_solve_without_path_raises():
    farm = build(["s", "a", "x", "e"], [("s", "a"), ("x", "e")], "s", "e")
    with pytest.raises(FarmError):
        solve(farm)


def test_solve_trap_graph_invariants():
    farm = build(
        ["s", "a", "b", "c", "d", "e"],
        [
            ("s", "a"),
            ("a", "b"),
            ("b", "e"),
            ("a", "d"),
            ("d", "e"),
            ("s", "c"),
            ("c", "b"),
        ],
        "s",
        "e",
        ants=12,
    )
    solution = solve(farm)
    assert sum(solution.ants) == 12
    assert len(solution.ants) == len(solution.paths)
    for path in solution.paths:
        assert path[0] is farm.start
        assert path[-1] is farm.end
        for origin, target in zip(path, path[1:]):
            assert farm.find_link(origin, target).joins(origin, target)
    lengths = [len(p) - 1 for p in solution.paths]
    assert solution.turns == max(
        l - 1 + a for l, a in zip(lengths, solution.ants) if a > 0
    )