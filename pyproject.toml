[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "triagequeue"
version = "0.1.0"
description = "Hospital triage queue simulator with priority and common queues shared through small binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["triage", "queue", "priority queue", "simulation", "hospital"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triagequeue-menu = "triagequeue.menu:main"
triagequeue-simulate = "triagequeue.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["triagequeue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
