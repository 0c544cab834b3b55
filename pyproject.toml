[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgo"
version = "0.1.0"
description = "Find dictionary words hidden in a grid of letters, in straight lines or along winding paths"
requires-python = ">=3.10"
dependencies = []
keywords = ["word search", "puzzle", "trie", "letter grid", "boggle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordgo = "wordgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgo"]

[tool.pytest.ini_options]
addopts = "-ra"
