[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "villagesim"
version = "0.1.0"
description = "A small medieval village simulation: villagers take quests, gather resources, store them and keep themselves fed."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game-ai", "pathfinding", "a-star", "agents", "village"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["villagesim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
