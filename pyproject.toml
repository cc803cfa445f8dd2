[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agx"
version = "0.1.0"
description = "Configuration, key routing, layout and pane state for an AI agent terminal multiplexer"
requires-python = ">=3.11"
keywords = ["ai", "agent", "terminal", "multiplexer", "tui", "keybinding", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Typing :: Typed",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["agx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
