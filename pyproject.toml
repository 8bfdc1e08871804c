[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashviz"
version = "0.1.0"
description = "A separately chained hash map with cursors, and a force-directed graph layout tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash map", "hash table", "separate chaining", "graph layout", "force-directed"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hashviz-demo = "hashviz.demo:main"
hashviz-layout = "hashviz.layout:main"

[tool.hatch.build.targets.wheel]
packages = ["hashviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
