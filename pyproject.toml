[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftcontainers"
version = "0.1.0"
description = "A growable vector with explicit capacity and iterator positions, plus pairs, range comparisons and linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "vector", "iterator", "reverse iterator", "linked list", "pair"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftcontainers-demo = "ftcontainers.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["ftcontainers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
