[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gencoll"
version = "0.1.0"
description = "Generic collections: dynamic arrays, linked lists, binary search trees and red-black trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "linked list", "red-black tree", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
packages = ["gencoll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
