[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lrufiles"
version = "0.1.0"
description = "A hashed LRU tracker for file names and a threaded collector of the distinct integers in a text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["lru", "cache", "hash", "unique", "integers"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unique-ints = "lrufiles.unique_ints:main"

[tool.hatch.build.targets.wheel]
packages = ["lrufiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
