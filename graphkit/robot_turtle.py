"""Program a turtle on an 8x8 board to reach the diamond."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_SIZE = 8
_START = (7, 0)
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _right(heading: tuple[int, int]) -> tuple[int, int]:
    return heading[1], -heading[0]


def _left(heading: tuple[int, int]) -> tuple[int, int]:
    return -heading[1], heading[0]


def robot_turtle(board: Sequence[str]) -> str | None:
    """Commands (F, L, R, X) moving the turtle from the bottom-left corner to
    the diamond ``D``, or None when castles ``C`` block every route.

    The turtle starts facing right; ice castles ``I`` are melted with ``X``.
    """
    rows = [str(row) for row in board]
    if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
        raise ValueError("the board must be 8 by 8")
    diamonds = [(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "D"]
    if not diamonds:
        raise ValueError("the board has no diamond")
    target = diamonds[-1]

    parent = {_START: _START}
    queue = deque([_START])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIRECTIONS:
            cell = (x + dx, y + dy)
            if not (0 <= cell[0] < _SIZE and 0 <= cell[1] < _SIZE):
                continue
            if rows[cell[0]][cell[1]] == "C" or cell in parent:
                continue
            parent[cell] = (x, y)
            queue.append(cell)

    if target == _START or target not in parent:
        return None

    path = []
    cell = target
    while cell != _START:
        path.append(cell)
        cell = parent[cell]
    path.reverse()

    heading = (0, 1)
    previous = _START
    commands = []
    for cell in path:
        move = (cell[0] - previous[0], cell[1] - previous[1])
        if move == _right(heading):
            commands.append("R")
        elif move == _left(heading):
            commands.append("L")
        if rows[cell[0]][cell[1]] == "I":
            commands.append("X")
        commands.append("F")
        heading = move
        previous = cell
    return "".join(commands)