[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpdrills"
version = "0.1.0"
description = "Solutions to short competitive-programming drills, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "practice", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpdrills = "cpdrills.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpdrills"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
