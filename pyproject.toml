[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicsim"
version = "0.1.0"
description = "Event-driven digital logic simulator with PlantUML timing output, plus an m-ary heap, a stack and linked-list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "simulation", "digital", "circuit", "plantuml", "heap", "priority-queue", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicsim = "logicsim.circuit:main"
llrec = "logicsim.llrec:main"

[tool.hatch.build.targets.wheel]
packages = ["logicsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
