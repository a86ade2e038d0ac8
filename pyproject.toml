[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternengine"
version = "0.1.0"
description = "Game-engine core for a node-pattern battle game: JSON and CSV data loading, pattern recognition, component systems and scenes"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "animation", "sprite", "csv", "pattern", "scene"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["patternengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
