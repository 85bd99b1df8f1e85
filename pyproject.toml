[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saltytaire"
version = "0.1.0"
description = "A small Klondike solitaire game with pixel-art cards"
requires-python = ">=3.10"
keywords = ["solitaire", "klondike", "cards", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
saltytaire = "saltytaire.app:main"

[tool.hatch.build.targets.wheel]
packages = ["saltytaire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
