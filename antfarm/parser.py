"""Reading an ant farm description line by line."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum

from antfarm.model import Farm, FarmError, Room

INT_MAX = 2147483647
INT_MIN = -2147483648

_SPACES = " \t\n\v\f\r"


class LineType(IntEnum):
    """Kind of a line in a farm description."""

    COMMENT = 0
    ROOM = 1
    START = 2
    END = 3
    COMMAND = 4
    LINK = 5
    EMPTY = 6


class _Stage(Enum):
    ANTS = 0
    ROOMS = 1
    LINKS = 2


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def _atol(text: str) -> int:
    """Read a leading signed decimal number, ignoring what follows it."""
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("-", "+") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not _is_digit(char):
            break
        value = value * 10 + int(char)
    return sign * value


def line_type(line: str) -> LineType:
    """Classify one line of the description."""
    if not line:
        return LineType.EMPTY
    if line == "##start":
        return LineType.START
    if line == "##end":
        return LineType.END
    if line[0] == "#" and line[1:2] != "#":
        return LineType.COMMENT
    if line[0] == "#":
        return LineType.COMMAND
    if "-" in line and " " not in line:
        return LineType.LINK
    return LineType.ROOM


def parse_ant_count(line: str) -> int:
    """Return the number of ants given on ``line``; raise FarmError if it is not one."""
    if line_type(line) is not LineType.ROOM:
        raise FarmError(f"expected an ant count, got {line!r}")
    if not all(_is_digit(char) for char in line):
        raise FarmError(f"ant count must be digits only: {line!r}")
    count = int(line)
    if count > INT_MAX:
        raise FarmError(f"ant count too large: {line!r}")
    return count


def check_xy(text: str) -> bool:
    """Tell whether ``text`` is a valid coordinate part of a room line, e.g. ``" 1 2"``."""
    if not text or text[0] != " ":
        return False
    body = text[1:]
    spaces = 0
    for pos, char in enumerate(body):
        if char == " ":
            spaces += 1
        if (not _is_digit(char) and char not in " +") or spaces > 1:
            return False
        if char == " " and not _is_digit(body[pos + 1 : pos + 2]):
            return False
    if spaces == 0:
        return False
    x = _atol(text)
    y = _atol(text[text.index(" ", 1) :])
    return INT_MIN <= x <= INT_MAX and INT_MIN <= y <= INT_MAX


def parse_room_name(line: str) -> str:
    """Validate a room line and return the room's name."""
    name, sep, _ = line.partition(" ")
    if not sep:
        raise FarmError(f"room line without coordinates: {line!r}")
    if name.startswith("L"):
        raise FarmError(f"room name may not start with 'L': {name!r}")
    if not check_xy(line[len(name) :]):
        raise FarmError(f"invalid room coordinates: {line!r}")
    return name


def split_link(line: str, farm: Farm) -> tuple[Room, Room]:
    """Find the two known rooms that a link line joins.

    Every ``-`` in the line is tried as the separator, from the left, until
    both sides name rooms of the farm.
    """
    pos = line.find("-")
    while pos != -1:
        room1 = farm.room(line[:pos])
        room2 = farm.room(line[pos + 1 :])
        if room1 is not None and room2 is not None:
            return room1, room2
        pos = line.find("-", pos + 1)
    raise FarmError(f"invalid link: {line!r}")


class Parser:
    """Incremental reader of a farm description.

    Feed it lines without their newline, then call ``finish`` for the farm.
    """

    def __init__(self) -> None:
        self.farm = Farm()
        self._stage = _Stage.ANTS
        self._pending = LineType.COMMENT
        self._last_room: Room | None = None
        self._failed = False

    def feed(self, line: str) -> None:
        """Take one line; raise FarmError as soon as the description is invalid."""
        if self._failed:
            raise FarmError("description already rejected")
        try:
            self._feed(line.removesuffix("\n"))
        except FarmError:
            self._failed = True
            raise

    def _feed(self, line: str) -> None:
        kind = line_type(line)
        if kind is LineType.EMPTY:
            raise FarmError("empty line")
        if self._stage is _Stage.ANTS and kind in (LineType.COMMENT, LineType.COMMAND):
            raise FarmError("the ant count must come first")
        if kind is LineType.COMMENT:
            return
        if self._stage is _Stage.ANTS:
            self.farm.total_ants = parse_ant_count(line)
            self._stage = _Stage.ROOMS
            return
        if self._stage is _Stage.ROOMS:
            if kind is LineType.LINK:
                self._stage = _Stage.LINKS
                if self.farm.start is None or self.farm.end is None:
                    raise FarmError("missing ##start or ##end room")
                self.farm.index_rooms()
                self.farm.add_link(*split_link(line, self.farm))
            else:
                self._room_line(line, kind)
            return
        if kind is LineType.ROOM:
            raise FarmError(f"room after links: {line!r}")
        if kind is not LineType.COMMAND:
            self.farm.add_link(*split_link(line, self.farm))

    def _room_line(self, line: str, kind: LineType) -> None:
        if kind is LineType.ROOM:
            self._last_room = self.farm.add_room(parse_room_name(line))
        if self._pending in (LineType.START, LineType.END) and kind is not LineType.ROOM:
            raise FarmError("##start and ##end must be followed by a room")
        if self._pending is LineType.START:
            self.farm.start = self._last_room
        elif self._pending is LineType.END:
            self.farm.end = self._last_room
        self._pending = kind

    def finish(self) -> Farm:
        """Return the connected farm; raise FarmError if the description is incomplete."""
        if self._failed:
            raise FarmError("description already rejected")
        if self._stage is not _Stage.LINKS:
            raise FarmError("the farm has no links")
        self.farm.connect()
        return self.farm


def parse_farm(lines: Iterable[str]) -> Farm:
    """Parse a whole farm description."""
    parser = Parser()
    for line in lines:
        parser.feed(line)
    return parser.finish()