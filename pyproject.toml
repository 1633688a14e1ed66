[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vuelos"
version = "0.1.0"
description = "Line-command flight board built on hand-written stacks, queues, lists, heaps, hash maps and binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["flights", "data-structures", "heap", "hash-table", "binary-search-tree", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vuelos = "vuelos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vuelos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
