import pytest

from antfarm.bfs import find_path
from antfarm.model import Farm, FarmError, Weight


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


def test_linear_farm():
    farm = build(["s", "a", "e"], [("s", "a"), ("a", "e")], "s", "e")
    assert names(find_path(farm)) == ["s", "a", "e"]


def test_takes_shortest_route():
    farm = build(
        ["s", "a", "b", "c", "e"],
        [("s", "b"), ("b", "c"), ("c", "e"), ("s", "a"), ("a", "e")],
        "s",
        "e",
    )
    assert names(find_path(farm)) == ["s", "a", "e"]


def test_unreachable_end_gives_none():
    farm = build(["s", "a", "x", "e"], [("s", "a"), ("x", "e")], "s", "e")
    assert find_path(farm) is None


def test_start_without_links_raises():
    farm = build(["s", "a", "e"], [("a", "e")], "s", "e")
    with pytest.raises(FarmError):
        find_path(farm)


def test_missing_end_raises():
    farm = build(["s", "a"], [("s", "a")], "s", "a")
    farm.end = None
    with pytest.raises(FarmError):
        find_path(farm)


def test_dropped_tunnel_is_avoided():
    farm = build(
        ["s", "a", "b", "e"],
        [("s", "a"), ("a", "e"), ("s", "b"), ("b", "e")],
        "s",
        "e",
    )
    farm.find_link(farm.room("s"), farm.room("a")).one_two = Weight.DROP
    assert names(find_path(farm)) == ["s", "b", "e"]


def test_fully_blocked_start_gives_none():
    farm = build(
        ["s", "a", "b", "e"],
        [("s", "a"), ("a", "e"), ("s", "b"), ("b", "e")],
        "s",
        "e",
    )
    for link in farm.start.links:
        link.one_two = Weight.DROP
    assert find_path(farm) is None


def test_grid_path_is_a_simple_walk():
    rooms = [f"r{row}{col}" for row in range(3) for col in range(3)]
    links = []
    for row in range(3):
        for col in range(3):
            if col < 2:
                links.append((f"r{row}{col}", f"r{row}{col + 1}"))
            if row < 2:
                links.append((f"r{row}{col}", f"r{row + 1}{col}"))
    farm = build(rooms, links, "r00", "r22")
    path = find_path(farm)
    assert path[0] is farm.start
    assert path[-1] is farm.end
    assert len({room.index for room in path}) == len(path)
    for origin, target in zip(path, path[1:]):
        assert farm.find_link(origin, target).joins(origin, target)
    assert len(path) == 5