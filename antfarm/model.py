"""Rooms, tunnels and the farm that holds them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class FarmError(Exception):
    """Raised when a farm description or operation is invalid."""


class Weight(IntEnum):
    """Flow state of one direction of a tunnel."""

    INVERSE = -1
    UNUSED = 0
    DROP = 1


@dataclass(eq=False)
class Room:
    """A room of the farm; compared by identity."""

    name: str
    index: int
    links: list[Link] = field(default_factory=list, repr=False)
    is_occupied: bool = False
    path_nb: int = 0


@dataclass(eq=False)
class Link:
    """A tunnel between two rooms.

    ``one_two`` is the weight from ``room1`` to ``room2``, ``two_one`` the
    weight in the other direction.
    """

    room1: Room
    room2: Room
    one_two: Weight = Weight.UNUSED
    two_one: Weight = Weight.UNUSED

    def step(self, room: Room) -> tuple[Room, Weight]:
        """Return the room across the tunnel from ``room`` and the weight of that move."""
        if room is self.room2:
            return self.room1, self.two_one
        return self.room2, self.one_two

    def joins(self, room1: Room, room2: Room) -> bool:
        """Tell whether this tunnel connects the two rooms, in either order."""
        return (self.room1 is room1 and self.room2 is room2) or (
            self.room1 is room2 and self.room2 is room1
        )


class Farm:
    """The ant farm: its rooms, tunnels, entrance, exit and ant count."""

    def __init__(self) -> None:
        self.rooms: list[Room] = []
        self.links: list[Link] = []
        self.start: Room | None = None
        self.end: Room | None = None
        self.total_ants: int = 0
        self._by_name: dict[str, Room] = {}
        self._link_index: dict[frozenset[int], Link] = {}

    def add_room(self, name: str) -> Room:
        """Append a new room; its index is its position in the farm."""
        room = Room(name=name, index=len(self.rooms))
        self.rooms.append(room)
        return room

    def index_rooms(self) -> None:
        """Build the name lookup; raise FarmError if two rooms share a name."""
        by_name: dict[str, Room] = {}
        for room in self.rooms:
            if room.name in by_name:
                raise FarmError(f"duplicate room name: {room.name!r}")
            by_name[room.name] = room
        self._by_name = by_name

    def room(self, name: str) -> Room | None:
        """Return the indexed room called ``name``, or None if there is none."""
        return self._by_name.get(name)

    def add_link(self, room1: Room, room2: Room) -> Link:
        """Record a tunnel between two rooms and return it."""
        link = Link(room1, room2)
        self.links.append(link)
        self._link_index.setdefault(frozenset((room1.index, room2.index)), link)
        return link

    def find_link(self, room1: Room, room2: Room) -> Link:
        """Return the first tunnel recorded between the two rooms."""
        try:
            return self._link_index[frozenset((room1.index, room2.index))]
        except KeyError:
            raise FarmError(
                f"no link between {room1.name!r} and {room2.name!r}"
            ) from None

    def connect(self) -> None:
        """Fill every room's list of tunnels, skipping repeated tunnels."""
        for room in self.rooms:
            room.links = []
        for link in self.links:
            target = link.room2
            if any(
                existing.room1 is target or existing.room2 is target
                for existing in link.room1.links
            ):
                continue
            link.room1.links.append(link)
            link.room2.links.append(link)