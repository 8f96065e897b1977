[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "askit"
version = "0.1.0"
description = "Small game toolkit: input counters, colours, inventories, maze and world-map generation, flood fill and simple binary storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "inventory", "color", "base64", "flood-fill"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["askit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
