"""Moving the ants along the chosen paths, turn by turn."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from antfarm.model import Farm, FarmError, Room
from antfarm.solver import Solution


@dataclass(eq=False)
class Ant:
    """One ant: its number, the path it follows and its next position on it."""

    number: int
    path: list[Room]
    pos: int = 1

    @property
    def arrived(self) -> bool:
        """Tell whether the ant has walked its whole path."""
        return self.pos > len(self.path) - 1


def format_move(ant: int | str, room_name: str) -> str:
    """Return the notation for ``ant`` moving into ``room_name``."""
    return f"L{ant}-{room_name}"


def assign_ants(solution: Solution, total_ants: int) -> list[Ant]:
    """Number the ants from 1 and hand them out to the paths in turn.

    Paths whose share of ants is used up are skipped. Raises ValueError when
    the shares of the solution cannot hold ``total_ants`` ants.
    """
    remaining = list(solution.ants)
    if sum(max(count, 0) for count in remaining) < total_ants:
        raise ValueError("the solution does not carry that many ants")
    ants: list[Ant] = []
    while len(ants) < total_ants:
        for slot, path in enumerate(solution.paths):
            if len(ants) == total_ants:
                break
            if remaining[slot] > 0:
                remaining[slot] -= 1
                ants.append(Ant(number=len(ants) + 1, path=path))
    return ants


def simulate(farm: Farm, solution: Solution) -> Iterator[str]:
    """Yield one line of moves for each turn of the solution.

    An ant enters a room only when it is free; the end room takes any number
    of ants. Room occupancy is tracked on the farm's rooms.
    """
    end = farm.end
    if end is None:
        raise FarmError("the farm needs an end room")
    ants = assign_ants(solution, farm.total_ants)
    hold = 0
    for _ in range(solution.turns):
        moves: list[str] = []
        for order, ant in enumerate(ants[hold:], start=hold):
            if ant.arrived:
                if order == hold + 1:
                    hold = order
                end.is_occupied = False
                continue
            room = ant.path[ant.pos]
            if not room.is_occupied or room is end:
                moves.append(format_move(ant.number, room.name))
                room.is_occupied = True
                if ant.pos > 1:
                    ant.path[ant.pos - 1].is_occupied = False
                ant.pos += 1
        yield " ".join(moves)