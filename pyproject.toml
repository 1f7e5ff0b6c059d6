[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matchstick"
version = "1.0.0"
description = "Terminal matchstick game: take turns removing matches from a pyramid against the computer or another player"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "matchstick", "nim", "terminal", "board game"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matchstick = "matchstick.game:main"
matchstick-duel = "matchstick.duel:main"

[tool.hatch.build.targets.wheel]
packages = ["matchstick"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
