"""Starts the robot grid application."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import simpledialog
from typing import Optional, Sequence

from robotgrid.controller import RobotController
from robotgrid.model import Robot
from robotgrid.view import RobotWindow

DEFAULT_NAME = "Robot"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for the robot's name, then show the window until it is closed."""
    parser = argparse.ArgumentParser(
        prog="robotgrid",
        description="Move a robot on a grid, undo, redo, save and load its history.",
    )
    parser.parse_args(argv)

    root = tk.Tk()
    root.withdraw()
    name = simpledialog.askstring("Robot Name", "Name:", parent=root)
    root.deiconify()

    model = Robot(name or DEFAULT_NAME)
    view = RobotWindow(root)
    controller = RobotController(model, view)
    controller.initialize()

    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())