"""Breadth-first search for augmenting paths through the farm."""

from __future__ import annotations

from collections import deque

from antfarm.model import Farm, FarmError, Room, Weight


class _Search:
    """State of one search: one predecessor tree per tunnel out of the start."""

    def __init__(self, farm: Farm, start: Room, end: Room) -> None:
        self.start = start
        self.end = end
        size = len(farm.rooms)
        self.prev: list[list[Room | None]] = [[None] * size for _ in start.links]
        self.inverse: list[bool] = [False] * len(start.links)
        self.visited: list[bool] = [False] * size
        self.queue: deque[Room] = deque([start])
        self.visited[start.index] = True

    def _reached(self) -> bool:
        return self.prev[self.end.path_nb][self.end.index] is not None

    def _push(self, curr: Room, nxt: Room, inverse: bool) -> None:
        self.queue.append(nxt)
        self.prev[nxt.path_nb][nxt.index] = curr
        if inverse:
            self.inverse[curr.path_nb] = True
        self.visited[nxt.index] = True

    def _on_branch(self, curr: Room, target: Room) -> bool:
        """Tell whether ``target`` lies on the way back from ``curr`` to the start."""
        tree = self.prev[curr.path_nb]
        seen: set[int] = set()
        room: Room | None = curr
        while room is not None:
            if room.index in seen:
                return False
            seen.add(room.index)
            room = tree[room.index]
            if room is target:
                return True
        return False

    def _branch_for(self, curr: Room, index: int) -> int:
        return index if curr is self.start else curr.path_nb

    def _inverse_step(self, curr: Room) -> Room | None:
        """Follow the first tunnel that runs against existing flow, if allowed."""
        for index, link in enumerate(curr.links):
            nxt, weight = link.step(curr)
            if weight == Weight.INVERSE:
                if self._on_branch(curr, nxt) or self.inverse[curr.path_nb]:
                    return None
                nxt.path_nb = self._branch_for(curr, index)
                return nxt
        return None

    def _expand(self, curr: Room) -> None:
        for index, link in enumerate(curr.links):
            nxt, weight = link.step(curr)
            if not self.visited[nxt.index] and weight != Weight.DROP:
                nxt.path_nb = self._branch_for(curr, index)
                self._push(curr, nxt, inverse=False)
            if self.prev[nxt.path_nb][self.end.index] is not None:
                break

    def _trace(self, tree: list[Room | None]) -> list[Room]:
        rooms: list[Room] = []
        seen: set[int] = set()
        room: Room | None = self.end
        while room is not None:
            if room.index in seen:
                raise FarmError("predecessor chain loops back on itself")
            seen.add(room.index)
            rooms.append(room)
            room = tree[room.index]
        rooms.reverse()
        return rooms

    def run(self) -> list[Room] | None:
        while self.queue:
            curr = self.queue.popleft()
            nxt = self._inverse_step(curr)
            if nxt is not None:
                self._push(curr, nxt, inverse=True)
            else:
                self._expand(curr)
            if self._reached():
                break
        tree = self.prev[self.end.path_nb]
        if tree[self.end.index] is None:
            return None
        return self._trace(tree)


def find_path(farm: Farm) -> list[Room] | None:
    """Find the next path from start to end under the current tunnel weights.

    Returns the rooms of the path, start first, or None when no path is left.
    Raises FarmError when the farm has no start or end, or the start has no tunnels.
    """
    if farm.start is None or farm.end is None:
        raise FarmError("the farm needs a start and an end room")
    if not farm.start.links:
        raise FarmError("the start room has no links")
    return _Search(farm, farm.start, farm.end).run()