[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kbdmodels"
version = "0.1.0"
description = "Data models for a virtual on-screen keyboard: keys, layouts, word candidates, preedit text and style attributes"
requires-python = ">=3.10"
dependencies = []
keywords = ["keyboard", "virtual keyboard", "input method", "layout", "word candidates"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["kbdmodels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
