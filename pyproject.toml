[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bintree"
version = "0.1.0"
description = "Binary tree nodes with parent links, measurements, traversals and an ASCII tree printer"
requires-python = ">=3.10"
dependencies = []
keywords = ["binary tree", "tree", "data structures", "traversal", "ascii art"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bintree-demo = "bintree.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["bintree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
