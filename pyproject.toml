[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotgrid"
version = "0.1.0"
description = "Move a robot around a 5x5 grid with undo, redo and saved movement history"
requires-python = ">=3.10"
dependencies = []
keywords = ["robot", "grid", "undo", "redo", "history", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robotgrid = "robotgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["robotgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
