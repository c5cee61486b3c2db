[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flattiverse"
version = "43.0.0"
description = "Client-side galaxy state, events and errors for flattiverse game clients."
requires-python = ">=3.10"
dependencies = []
keywords = ["flattiverse", "game", "galaxy", "events", "client"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["flattiverse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
