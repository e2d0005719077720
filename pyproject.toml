[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ironlong"
version = "1.0.0"
description = "A small tile-based collect-and-escape puzzle game with map validation"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "tile-map", "pygame"]
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
test = [
    "pytest",
]

[project.scripts]
ironlong = "ironlong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ironlong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
