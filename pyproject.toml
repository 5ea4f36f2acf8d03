[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kittdash"
version = "0.1.0"
description = "Toolkit-independent state models of dashboard widgets: buttons, indicator lamps, bar gauges, a seven-segment readout, a voice visualiser and popups"
requires-python = ">=3.10"
dependencies = []
keywords = ["dashboard", "widgets", "ui", "gauge", "seven-segment", "visualiser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kittdash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
