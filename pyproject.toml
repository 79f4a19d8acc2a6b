[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockcraft"
version = "0.4.1"
description = "Block-world simulation core: block properties, block updaters, water flow, furnaces, chests, day/night cycle, settings and ADPCM audio decoding."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "sandbox", "blocks", "simulation", "2d", "adpcm"]
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
packages = ["blockcraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
