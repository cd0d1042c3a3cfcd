# robotgrid

A small desktop application. You steer a robot around a 5×5 grid. Every move is
recorded, so you can step back and forth through the robot's history. The
history can also be saved to a file and loaded again later.

## Installation

```
pip install .
```

The package has no third-party dependencies. The window uses `tkinter`, which
comes with the Python standard library. Some Linux distributions ship it as a
separate system package.

## Running

```
robotgrid
```

The same entry point can also be started with `python -m robotgrid.app`. The
command takes no options apart from `--help`.

At startup the program asks for a name for the robot. If you leave the name
empty or cancel the dialog, it uses `Robot`. The robot, drawn as a robot emoji,
then appears in the centre cell of the grid.

### Controls

| Key        | Action     |
|------------|------------|
| `W`        | move up    |
| `S`        | move down  |
| `A`        | move left  |
| `D`        | move right |
| `Ctrl+Z`   | undo       |
| `Ctrl+Y`   | redo       |

Upper-case and lower-case letters both work. The **UNDO** and **REDO** buttons
do the same as the keys. Each button is disabled when there is nothing to undo
or redo.

The **Save History** and **Load History** buttons open file dialogs in a
`saved_robots` folder in the current directory. That folder is created if it
does not exist. The save dialog suggests `<name>.robot`. After a file is saved
or loaded, the status line shows its name.

### Movement rules

- The robot cannot leave the grid. A move that would take it off the grid is ignored.
- Every move attempt is counted, including ignored ones. From the eleventh attempt onward, each step covers two cells instead of one.
- A move made after an undo discards the positions that could have been redone.

The status line shows the robot's name, its position and where you are in the
history, for example `Robot: (2, 2)    History: 1 of 1`.

## Using the model directly

`robotgrid.model.Robot` has no user interface code in it:

```python
from robotgrid.model import Robot

robot = Robot("Rover")
robot.move_right()
robot.move_down()
robot.undo()
print(robot.position, robot.can_undo(), robot.can_redo())
robot.save_to_file("rover.robot")

copy = Robot("placeholder")
copy.load_from_file("rover.robot")
```

A `Robot` has the read-only properties `name`, `x`, `y`, `position` (a
`Point2D`), `current_history_index` and `history` (a tuple of `Point2D`). It
also has a `move_count` attribute.

`robotgrid.controller.RobotController` connects a `Robot` to any view object
that provides `set_controller`, `set_robot_position`, `set_undo_enabled`,
`set_redo_enabled`, `set_status_text`, `ask_save_path` and `ask_open_path`.
`handle_key_press(key, control=False)` returns whether the key was handled.

### History files

A history file is plain text. The first line is the name and the second is the
current history index. After those comes one `x y` line for each recorded
position. Loading reads only the positions up to and including the saved index,
so positions that could have been redone are dropped. If a file is malformed,
`load_from_file` raises `ValueError`.

## Tests

```
pip install ".[test]"
pytest
```