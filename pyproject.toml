[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jumptable"
version = "0.1.0"
description = "Dispatch tables and numbered menus of callables, with small command-line demos"
requires-python = ">=3.10"
dependencies = []
keywords = ["jump table", "dispatch", "menu", "callables"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jump-menu = "jumptable.menu:main"
jump-parsers = "jumptable.parsers:main"
jump-table-demo = "jumptable.demos:jump_table_main"
multijump-demo = "jumptable.demos:multijump_main"

[tool.hatch.build.targets.wheel]
packages = ["jumptable"]

[tool.pytest.ini_options]
addopts = "-ra"
