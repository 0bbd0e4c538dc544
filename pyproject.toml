[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rzozowski"
version = "0.1.3"
description = "Regular expressions matched with Brzozowski derivatives."
requires-python = ">=3.10"
dependencies = []
keywords = ["regex", "brzozowski", "derivatives", "automata"]
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
    "Topic :: Text Processing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rzozowski"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
