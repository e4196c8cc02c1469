[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacdots"
version = "0.1.0"
description = "A small terminal maze game: eat every dot before the ghosts catch you."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "maze", "arcade", "ghosts"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
pacdots = "pacdots.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pacdots"]

[tool.pytest.ini_options]
addopts = "-ra"
