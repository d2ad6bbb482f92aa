[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintpad"
version = "0.1.0"
description = "A small raster paint program with brushes, shapes, flood fill and undo history"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["paint", "drawing", "raster", "image", "editor", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
paintpad = "paintpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["paintpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
