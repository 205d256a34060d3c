"""Read-only cursor movement for the list and details views."""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from natocli.views.manga_details import MANGA_DETAILS_NAME

SELECTOR = "[x]"


class Key(Enum):
    """Arrow keys the read-only views react to."""

    ARROW_DOWN = "down"
    ARROW_UP = "up"
    ARROW_LEFT = "left"
    ARROW_RIGHT = "right"


_DIRECTIONS: dict[Union[Key, str], Key] = {
    Key.ARROW_DOWN: Key.ARROW_DOWN,
    Key.ARROW_UP: Key.ARROW_UP,
    Key.ARROW_LEFT: Key.ARROW_LEFT,
    Key.ARROW_RIGHT: Key.ARROW_RIGHT,
    "s": Key.ARROW_DOWN,
    "w": Key.ARROW_UP,
    "a": Key.ARROW_LEFT,
    "d": Key.ARROW_RIGHT,
}


def is_selectable(line: str) -> bool:
    """Tell whether a line starts, after its indentation, with the selector."""
    stripped = line.strip()
    return len(stripped) > 2 and stripped.startswith(SELECTOR)


def next_selectable(lines: Sequence[str], y: int) -> int | None:
    """Return the index of the first selectable line below line y."""
    return next(
        (index for index in range(y + 1, len(lines)) if is_selectable(lines[index])),
        None,
    )


def prev_selectable(lines: Sequence[str], y: int) -> int | None:
    """Return the index of the first selectable line above line y."""
    return next(
        (index for index in range(min(y, len(lines)) - 1, -1, -1) if is_selectable(lines[index])),
        None,
    )


def move_cursor(
    view_name: str,
    lines: Sequence[str],
    cursor: tuple[int, int],
    key: Union[Key, str],
) -> tuple[int, int]:
    """Return the cursor position after a key press in a read-only view.

    The details view moves freely one cell at a time; the other views jump
    vertically between selectable lines and ignore horizontal keys.
    """
    x, y = cursor
    direction = _DIRECTIONS.get(key)
    if direction is None:
        return x, y

    if view_name == MANGA_DETAILS_NAME:
        dx, dy = {
            Key.ARROW_DOWN: (0, 1),
            Key.ARROW_UP: (0, -1),
            Key.ARROW_LEFT: (-1, 0),
            Key.ARROW_RIGHT: (1, 0),
        }[direction]
        return max(0, x + dx), max(0, y + dy)

    if direction is Key.ARROW_DOWN:
        target = next_selectable(lines, y)
    elif direction is Key.ARROW_UP:
        target = prev_selectable(lines, y)
    else:
        return x, y
    return (x, y) if target is None else (x, target)