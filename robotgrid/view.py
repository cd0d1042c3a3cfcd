"""Tk window that shows the robot on its grid with history controls."""

from __future__ import annotations

import os
import tkinter as tk
from tkinter import filedialog
from typing import Any, Optional

from robotgrid.model import GRID_SIZE, Point2D

CELL_SIZE = 50
ROBOT_GLYPH = "\U0001F916"
WINDOW_TITLE = "Robot History Serialization"
WINDOW_GEOMETRY = "360x430"
HINT_TEXT = "Use arrow keys to move the robot"
ROBOT_FILE_TYPES = [("Robot Files", "*.robot")]

_CONTROL_MASK = 0x0004


class RobotGridWidget:
    """A square grid of cells, one of which holds the robot."""

    def __init__(self, master: Any) -> None:
        side = GRID_SIZE * CELL_SIZE
        self.frame = tk.Frame(master, width=side, height=side)
        self.frame.grid_propagate(False)
        for line in range(GRID_SIZE):
            self.frame.grid_rowconfigure(line, weight=1, uniform="cell")
            self.frame.grid_columnconfigure(line, weight=1, uniform="cell")
        self._cells = [
            [self._make_cell(row, column) for column in range(GRID_SIZE)]
            for row in range(GRID_SIZE)
        ]
        self._position = Point2D(2, 2)
        self._update_robot_icon()

    @property
    def position(self) -> Point2D:
        """The cell the robot is drawn in."""
        return self._position

    def set_robot_position(self, x: int, y: int) -> None:
        """Draw the robot in the cell at column x, row y.

        Raises ValueError if the cell is outside the grid.
        """
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise ValueError(f"cell ({x}, {y}) is outside the grid")
        self._position = Point2D(x, y)
        self._update_robot_icon()

    def _make_cell(self, row: int, column: int) -> Any:
        cell = tk.Label(
            self.frame,
            text="",
            borderwidth=1,
            relief="solid",
            anchor="center",
            font=("TkDefaultFont", 20),
        )
        cell.grid(row=row, column=column, sticky="nsew")
        return cell

    def _update_robot_icon(self) -> None:
        for row in self._cells:
            for cell in row:
                cell.config(text="")
        self._cells[self._position.y][self._position.x].config(text=ROBOT_GLYPH)


class RobotWindow:
    """The main window: grid, undo/redo buttons, save/load buttons and status."""

    def __init__(self, root: Any) -> None:
        self.root = root
        self._controller: Optional[Any] = None
        self._status_text = ""
        self._undo_enabled = True
        self._redo_enabled = True

        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_GEOMETRY)

        self.hint_label = tk.Label(root, text=HINT_TEXT, anchor="center")
        self.grid = RobotGridWidget(root)

        history_row = tk.Frame(root)
        self.undo_button = tk.Button(history_row, text="UNDO", takefocus=0)
        self.redo_button = tk.Button(history_row, text="REDO", takefocus=0)

        file_row = tk.Frame(root)
        self.save_button = tk.Button(file_row, text="Save History", takefocus=0)
        self.load_button = tk.Button(file_row, text="Load History", takefocus=0)

        self.status_label = tk.Label(root, text="", anchor="center")

        self.hint_label.pack(side="top", fill="x", pady=4)
        self.grid.frame.pack(side="top", pady=4)
        history_row.pack(side="top", fill="x", padx=8, pady=2)
        self.undo_button.pack(side="left", expand=True, fill="x")
        self.redo_button.pack(side="left", expand=True, fill="x")
        file_row.pack(side="top", fill="x", padx=8, pady=2)
        self.save_button.pack(side="left", expand=True, fill="x")
        self.load_button.pack(side="left", expand=True, fill="x")
        self.status_label.pack(side="top", fill="x", pady=4)

        root.bind("<KeyPress>", self._on_key_press)

    @property
    def controller(self) -> Optional[Any]:
        return self._controller

    @property
    def status_text(self) -> str:
        return self._status_text

    @property
    def undo_enabled(self) -> bool:
        return self._undo_enabled

    @property
    def redo_enabled(self) -> bool:
        return self._redo_enabled

    def set_robot_position(self, x: int, y: int) -> None:
        self.grid.set_robot_position(x, y)

    def set_controller(self, controller: Any) -> None:
        """Use this controller for key presses and wire the buttons to it."""
        self._controller = controller
        self.undo_button.config(command=controller.undo)
        self.redo_button.config(command=controller.redo)
        self.save_button.config(command=controller.save_history)
        self.load_button.config(command=controller.load_history)

    def set_undo_enabled(self, enabled: bool) -> None:
        self._undo_enabled = bool(enabled)
        self.undo_button.config(state="normal" if enabled else "disabled")

    def set_redo_enabled(self, enabled: bool) -> None:
        self._redo_enabled = bool(enabled)
        self.redo_button.config(state="normal" if enabled else "disabled")

    def set_status_text(self, text: str) -> None:
        self._status_text = text
        self.status_label.config(text=text)

    def ask_save_path(self, initial_path: str) -> str:
        """Ask where to save; return the chosen path, or "" if cancelled."""
        directory, file_name = os.path.split(initial_path)
        chosen = filedialog.asksaveasfilename(
            parent=self.root,
            title="Save Robot History",
            initialdir=directory or os.curdir,
            initialfile=file_name,
            filetypes=ROBOT_FILE_TYPES,
            defaultextension=".robot",
        )
        return chosen if isinstance(chosen, str) else ""

    def ask_open_path(self, initial_dir: str) -> str:
        """Ask which file to load; return the chosen path, or "" if cancelled."""
        chosen = filedialog.askopenfilename(
            parent=self.root,
            title="Load Robot History",
            initialdir=initial_dir,
            filetypes=ROBOT_FILE_TYPES,
        )
        return chosen if isinstance(chosen, str) else ""

    def _on_key_press(self, event: Any) -> Optional[str]:
        if self._controller is None:
            return None
        control = bool(event.state & _CONTROL_MASK)
        if self._controller.handle_key_press(event.keysym, control):
            return "break"
        return None