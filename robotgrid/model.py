"""Robot on a small square grid with an undoable history of positions."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

GRID_SIZE = 5
FAST_AFTER_MOVES = 10


@dataclass(frozen=True)
class Point2D:
    """A cell on the grid."""

    x: int = 0
    y: int = 0


_START = Point2D(2, 2)


class Robot:
    """A named robot that moves on the grid and remembers where it has been.

    Every successful move is recorded in the history. Undo and redo walk
    through the history; a move made after an undo discards the positions
    that could have been redone. After ten move attempts the robot moves
    two cells at a time.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._position = _START
        self._history: list[Point2D] = [_START]
        self._index = 0
        self.move_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def position(self) -> Point2D:
        return self._position

    @property
    def current_history_index(self) -> int:
        return self._index

    @property
    def history(self) -> tuple[Point2D, ...]:
        return tuple(self._history)

    def move_up(self) -> None:
        self._step(0, -1)

    def move_down(self) -> None:
        self._step(0, 1)

    def move_left(self) -> None:
        self._step(-1, 0)

    def move_right(self) -> None:
        self._step(1, 0)

    def undo(self) -> None:
        """Step back one position in the history, if possible."""
        if not self.can_undo():
            return
        self._index -= 1
        self._position = self._history[self._index]

    def redo(self) -> None:
        """Step forward one position in the history, if possible."""
        if not self.can_redo():
            return
        self._index += 1
        self._position = self._history[self._index]

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1

    def save_to_file(self, file_path: PathLike) -> None:
        """Write the name, the history index and every recorded position."""
        with open(file_path, "w", encoding="utf-8") as file:
            file.write(f"{self._name}\n")
            file.write(f"{self._index}\n")
            for point in self._history:
                file.write(f"{point.x} {point.y}\n")

    def load_from_file(self, file_path: PathLike) -> None:
        """Read a saved robot, keeping the history up to its saved index.

        Raises ValueError if the file is not in the saved format.
        """
        with open(file_path, encoding="utf-8") as file:
            name = file.readline().rstrip("\n")
            tokens = file.read().split()

        try:
            numbers = [int(token) for token in tokens]
        except ValueError as exc:
            raise ValueError(f"malformed robot file: {file_path}") from exc

        if not numbers:
            raise ValueError(f"missing history index in {file_path}")
        index, coordinates = numbers[0], numbers[1:]
        if index < 0:
            raise ValueError(f"negative history index in {file_path}: {index}")
        needed = 2 * (index + 1)
        if len(coordinates) < needed:
            raise ValueError(
                f"robot file {file_path} holds fewer positions than its index needs"
            )

        pairs = zip(coordinates[0:needed:2], coordinates[1:needed:2])
        history = [Point2D(px, py) for px, py in pairs]

        self._name = name
        self._history = history
        self._index = index
        self._position = history[-1]

    def _step(self, dx: int, dy: int) -> None:
        self.move_count += 1
        scale = 2 if self.move_count > FAST_AFTER_MOVES else 1
        self._move_to(self.x + dx * scale, self.y + dy * scale)

    def _move_to(self, new_x: int, new_y: int) -> None:
        if not (0 <= new_x < GRID_SIZE and 0 <= new_y < GRID_SIZE):
            return
        target = Point2D(new_x, new_y)
        if target == self._position:
            return
        self._position = target
        self._record_position()

    def _record_position(self) -> None:
        del self._history[self._index + 1 :]
        self._history.append(self._position)
        self._index = len(self._history) - 1