[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calgokit"
version = "0.1.0"
description = "Classic data structures: hash table, doubly-linked list, double-ended queue and red-black tree, with hash and string comparison helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "hash table",
    "linked list",
    "deque",
    "red-black tree",
    "djb2",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calgokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
