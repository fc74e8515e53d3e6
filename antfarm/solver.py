"""Choosing the set of paths that moves every ant in the fewest turns."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from antfarm.bfs import find_path
from antfarm.model import Farm, FarmError, Room, Weight


@dataclass
class Solution:
    """The chosen paths, how many ants take each, and the turns that takes."""

    paths: list[list[Room]]
    ants: list[int]
    turns: int


def _edges(path: Sequence[Room]) -> Iterable[tuple[Room, Room]]:
    return zip(path, path[1:])


def update_link_weights(farm: Farm, path: Sequence[Room]) -> bool:
    """Mark the flow of ``path`` on its tunnels.

    Returns True if some tunnel now carries flow in both directions.
    """
    cancelled = False
    for origin, target in _edges(path):
        link = farm.find_link(origin, target)
        if link.room1 is origin:
            link.one_two = Weight.DROP
            if link.two_one != Weight.DROP:
                link.two_one = Weight.INVERSE
        else:
            link.two_one = Weight.DROP
            if link.one_two != Weight.DROP:
                link.one_two = Weight.INVERSE
        if link.one_two == Weight.DROP and link.two_one == Weight.DROP:
            cancelled = True
    return cancelled


def reset_unused_links(farm: Farm, paths: Iterable[Sequence[Room]]) -> None:
    """Clear the flow on the tunnels of ``paths``, except tunnels used both ways."""
    for path in paths:
        for origin, target in _edges(path):
            link = farm.find_link(origin, target)
            if not (link.one_two == Weight.DROP and link.two_one == Weight.DROP):
                link.one_two = Weight.UNUSED
                link.two_one = Weight.UNUSED


def divide_ants(total_ants: int, path_lengths: Sequence[int]) -> tuple[list[int], int]:
    """Share the ants out over paths of the given tunnel counts.

    Returns the number of ants on each path and the number of turns needed.
    The first path always receives at least one ant.
    """
    if not path_lengths:
        raise ValueError("at least one path is needed")
    lengths = list(path_lengths)
    ants = [0] * len(lengths)
    ants[0] = 1
    turns = lengths[0] - 1 + ants[0]
    for _ in range(1, total_ants):
        chosen = len(lengths) - 1
        for j in range(len(lengths) - 1):
            if lengths[j] + ants[j] < lengths[j + 1] + ants[j + 1]:
                chosen = j
                break
        ants[chosen] += 1
        turns = max(turns, lengths[chosen] - 1 + ants[chosen])
    return ants, turns


def solve(farm: Farm) -> Solution:
    """Find the path set that takes all ants from start to end in the fewest turns."""
    first = find_path(farm)
    if first is None:
        raise FarmError("no path from start to end")

    found: list[list[Room]] = [first]
    best: Solution | None = None

    def evaluate(group: list[list[Room]]) -> int:
        nonlocal best
        ants, turns = divide_ants(farm.total_ants, [len(p) - 1 for p in group])
        if best is None or best.turns > turns:
            best = Solution(paths=list(group), ants=ants, turns=turns)
        return turns

    evaluate(found[:1])
    group_start = 0
    count = 1
    keep = 0
    path: list[Room] | None = first
    while path is not None:
        if count == 1:
            group_start = len(found) - 1
        if update_link_weights(farm, path):
            reset_unused_links(farm, found[group_start:])
            count = 0
        else:
            turns = evaluate(found[group_start:])
            if count != 1 and keep < turns:
                break
            keep = turns
        path = find_path(farm)
        if path is not None:
            found.append(path)
        count += 1

    assert best is not None
    return best