[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colorecho"
version = "0.1.0"
description = "A red-and-blue memory game: repeat the growing sequence the computer plays, while the buttons move."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "memory", "simon", "sequence", "tkinter"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colorecho = "colorecho.app:main"

[tool.hatch.build.targets.wheel]
packages = ["colorecho"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
