[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashbuckets"
version = "0.1.0"
description = "Distribute names into hash buckets of doubly linked lists, sort each bucket with quicksort and write a report"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "linked list", "quicksort", "buckets", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashbuckets = "hashbuckets.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hashbuckets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
