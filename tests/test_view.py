from types import SimpleNamespace
from unittest import mock

import pytest

from robotgrid.controller import RobotController
from robotgrid.model import GRID_SIZE, Point2D, Robot
from robotgrid.view import ROBOT_GLYPH, RobotGridWidget, RobotWindow


@pytest.fixture
def fake_tk():
    created = []

    def make(kind):
        def factory(*args, **kwargs):
            widget = mock.MagicMock()
            widget.kind = kind
            widget.options = kwargs
            created.append(widget)
            return widget

        return factory

    module = mock.MagicMock()
    for kind in ("Frame", "Label", "Button"):
        getattr(module, kind).side_effect = make(kind)
    module.created = created
    with mock.patch("robotgrid.view.tk", module):
        yield module


@pytest.fixture
def fake_dialogs():
    with mock.patch("robotgrid.view.filedialog") as dialogs:
        yield dialogs


def _labels(fake_tk):
    return [w for w in fake_tk.created if w.kind == "Label"]


def _last_text(widget):
    texts = [c.kwargs["text"] for c in widget.config.call_args_list if "text" in c.kwargs]
    return texts[-1]


def _handler(root):
    event_name, handler = root.bind.call_args.args
    assert event_name == "<KeyPress>"
    return handler


def test_grid_starts_in_centre(fake_tk):
    grid = RobotGridWidget(mock.MagicMock())
    assert grid.position == Point2D(2, 2)
    assert len(_labels(fake_tk)) == GRID_SIZE * GRID_SIZE


def test_grid_moves_robot_glyph(fake_tk):
    grid = RobotGridWidget(mock.MagicMock())
    cells = _labels(fake_tk)
    grid.set_robot_position(4, 0)
    assert grid.position == Point2D(4, 0)
    assert _last_text(cells[4]) == ROBOT_GLYPH
    assert _last_text(cells[2 * GRID_SIZE + 2]) == ""


def test_grid_glyph_only_in_one_cell(fake_tk):
    grid = RobotGridWidget(mock.MagicMock())
    grid.set_robot_position(1, 3)
    assert grid.position == Point2D(1, 3)
    texts = [_last_text(cell) for cell in _labels(fake_tk)]
    assert texts.count(ROBOT_GLYPH) == 1
    assert texts.index(ROBOT_GLYPH) == 3 * GRID_SIZE + 1


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (GRID_SIZE, 0), (0, GRID_SIZE)])
def test_grid_rejects_cells_outside(fake_tk, x, y):
    grid = RobotGridWidget(mock.MagicMock())
    with pytest.raises(ValueError):
        grid.set_robot_position(x, y)
    assert grid.position == Point2D(2, 2)


def test_window_title(fake_tk):
    root = mock.MagicMock()
    RobotWindow(root)
    root.title.assert_called_once_with("Robot History Serialization")


def test_window_status_text(fake_tk):
    window = RobotWindow(mock.MagicMock())
    window.set_status_text("hello")
    assert window.status_text == "hello"
    assert _last_text(window.status_label) == "hello"


def test_window_undo_redo_enabled(fake_tk):
    window = RobotWindow(mock.MagicMock())
    window.set_undo_enabled(False)
    window.set_redo_enabled(True)
    assert window.undo_enabled is False
    assert window.redo_enabled is True
    assert window.undo_button.config.call_args.kwargs == {"state": "disabled"}
    assert window.redo_button.config.call_args.kwargs == {"state": "normal"}


def test_window_set_robot_position(fake_tk):
    window = RobotWindow(mock.MagicMock())
    window.set_robot_position(0, 4)
    assert window.grid.position == Point2D(0, 4)


def test_controller_wires_buttons(fake_tk):
    window = RobotWindow(mock.MagicMock())
    controller = RobotController(Robot("Ada"), window)
    controller.initialize()
    assert window.controller is controller
    assert window.undo_button.config.call_args_list[0].kwargs["command"] == controller.undo
    assert window.redo_button.config.call_args_list[0].kwargs["command"] == controller.redo
    assert window.save_button.config.call_args.kwargs["command"] == controller.save_history
    assert window.load_button.config.call_args.kwargs["command"] == controller.load_history


def test_initialize_refreshes_window(fake_tk):
    window = RobotWindow(mock.MagicMock())
    RobotController(Robot("Ada"), window).initialize()
    assert window.status_text == "Ada: (2, 2)    History: 1 of 1"
    assert window.undo_enabled is False
    assert window.redo_enabled is False


def test_key_press_moves_robot(fake_tk):
    root = mock.MagicMock()
    window = RobotWindow(root)
    model = Robot("Ada")
    RobotController(model, window).initialize()
    result = _handler(root)(SimpleNamespace(keysym="d", state=0))
    assert result == "break"
    assert model.position == Point2D(3, 2)
    assert window.grid.position == Point2D(3, 2)


def test_control_z_undoes(fake_tk):
    root = mock.MagicMock()
    window = RobotWindow(root)
    model = Robot("Ada")
    RobotController(model, window).initialize()
    handler = _handler(root)
    handler(SimpleNamespace(keysym="s", state=0))
    assert handler(SimpleNamespace(keysym="z", state=0x4)) == "break"
    assert model.position == Point2D(2, 2)
    assert window.redo_enabled is True


def test_unhandled_key_passes_through(fake_tk):
    root = mock.MagicMock()
    window = RobotWindow(root)
    model = Robot("Ada")
    RobotController(model, window).initialize()
    handler = _handler(root)
    assert handler(SimpleNamespace(keysym="q", state=0)) is None
    assert handler(SimpleNamespace(keysym="z", state=0)) is None
    assert model.position == Point2D(2, 2)


def test_key_press_without_controller(fake_tk):
    root = mock.MagicMock()
    RobotWindow(root)
    assert _handler(root)(SimpleNamespace(keysym="d", state=0)) is None


def test_ask_save_path(fake_tk, fake_dialogs, tmp_path):
    window = RobotWindow(mock.MagicMock())
    target = str(tmp_path / "Ada.robot")
    fake_dialogs.asksaveasfilename.return_value = target
    assert window.ask_save_path(target) == target
    kwargs = fake_dialogs.asksaveasfilename.call_args.kwargs
    assert kwargs["initialdir"] == str(tmp_path)
    assert kwargs["initialfile"] == "Ada.robot"


@pytest.mark.parametrize("cancelled", ["", ()])
def test_ask_save_path_cancelled(fake_tk, fake_dialogs, cancelled):
    window = RobotWindow(mock.MagicMock())
    fake_dialogs.asksaveasfilename.return_value = cancelled
    assert window.ask_save_path("saved_robots/Ada.robot") == ""


def test_ask_open_path(fake_tk, fake_dialogs, tmp_path):
    window = RobotWindow(mock.MagicMock())
    target = str(tmp_path / "Ada.robot")
    fake_dialogs.askopenfilename.return_value = target
    assert window.ask_open_path(str(tmp_path)) == target
    assert fake_dialogs.askopenfilename.call_args.kwargs["initialdir"] == str(tmp_path)


def test_ask_open_path_cancelled(fake_tk, fake_dialogs):
    window = RobotWindow(mock.MagicMock())
    fake_dialogs.askopenfilename.return_value = ()
    assert window.ask_open_path("saved_robots") == ""


def test_save_and_load_through_window(fake_tk, fake_dialogs, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    window = RobotWindow(mock.MagicMock())
    model = Robot("Ada")
    controller = RobotController(model, window)
    controller.initialize()
    controller.move_right()
    target = str(tmp_path / "Ada.robot")
    fake_dialogs.asksaveasfilename.return_value = target
    controller.save_history()
    assert window.status_text == "Saved Ada.robot"

    other = Robot("Bob")
    other_window = RobotWindow(mock.MagicMock())
    other_controller = RobotController(other, other_window)
    other_controller.initialize()
    fake_dialogs.askopenfilename.return_value = target
    other_controller.load_history()
    assert other.position == model.position
    assert other_window.grid.position == model.position
    assert other_window.status_text == "Loaded Ada.robot"