"""A robot on a 5x5 grid with undo, redo and saved movement history."""

__version__ = "0.1.0"
__all__ = ["__version__"]