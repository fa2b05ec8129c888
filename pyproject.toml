[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciistorm"
version = "0.1.0"
description = "A terminal shoot-'em-up with a small actor/level engine, quadtree collision and double-buffered text rendering."
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["game", "terminal", "ascii", "shooter", "quadtree", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asciistorm = "asciistorm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["asciistorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
