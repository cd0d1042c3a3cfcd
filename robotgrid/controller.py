"""Connects a robot model to a window that shows it."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

from robotgrid.model import Robot

SAVED_ROBOTS_FOLDER = "saved_robots"
ROBOT_FILE_SUFFIX = ".robot"


def _saved_robots_path(file_name: str = "") -> str:
    folder = Path(SAVED_ROBOTS_FOLDER)
    folder.mkdir(parents=True, exist_ok=True)
    return str(folder / file_name) if file_name else str(folder)


class RobotController:
    """Turns user actions into model changes and keeps the view up to date.

    The view is expected to provide set_controller, set_robot_position,
    set_undo_enabled, set_redo_enabled, set_status_text, ask_save_path and
    ask_open_path.
    """

    def __init__(self, model: Robot, view: Any) -> None:
        self.model = model
        self.view = view
        self._moves: dict[str, Callable[[], None]] = {
            "w": self.move_up,
            "s": self.move_down,
            "a": self.move_left,
            "d": self.move_right,
        }
        self._history_keys: dict[str, Callable[[], None]] = {
            "z": self.undo,
            "y": self.redo,
        }

    def initialize(self) -> None:
        """Attach to the view, which wires its buttons to this controller."""
        self.view.set_controller(self)
        self._refresh_view()

    def move_up(self) -> None:
        self.model.move_up()
        self._refresh_view()

    def move_down(self) -> None:
        self.model.move_down()
        self._refresh_view()

    def move_left(self) -> None:
        self.model.move_left()
        self._refresh_view()

    def move_right(self) -> None:
        self.model.move_right()
        self._refresh_view()

    def undo(self) -> None:
        self.model.undo()
        self._refresh_view()

    def redo(self) -> None:
        self.model.redo()
        self._refresh_view()

    def save_history(self) -> None:
        """Ask the view for a file and save the robot's history there."""
        default_name = self.model.name + ROBOT_FILE_SUFFIX
        file_path = self.view.ask_save_path(_saved_robots_path(default_name))
        if not file_path:
            return
        self.model.save_to_file(file_path)
        self.view.set_status_text(f"Saved {Path(file_path).name}")

    def load_history(self) -> None:
        """Ask the view for a file and load a robot's history from it."""
        file_path = self.view.ask_open_path(_saved_robots_path())
        if not file_path:
            return
        self.model.load_from_file(file_path)
        self._refresh_view()
        self.view.set_status_text(f"Loaded {Path(file_path).name}")

    def handle_key_press(self, key: str, control: bool = False) -> bool:
        """Act on a key press; return True if the key was handled.

        W, A, S and D move the robot; Ctrl+Z undoes and Ctrl+Y redoes.
        """
        name = key.lower()
        move = self._moves.get(name)
        if move is not None:
            move()
            return True
        action = self._history_keys.get(name)
        if action is not None and control:
            action()
            return True
        return False

    def _refresh_view(self) -> None:
        model = self.model
        self.view.set_robot_position(model.x, model.y)
        self.view.set_undo_enabled(model.can_undo())
        self.view.set_redo_enabled(model.can_redo())
        self.view.set_status_text(
            f"{model.name}: ({model.x}, {model.y})    "
            f"History: {model.current_history_index + 1} of {len(model.history)}"
        )