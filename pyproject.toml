[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynprog"
version = "0.1.0"
description = "Classic dynamic-programming solvers: counting, grids, sequences and knapsack-style problems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "combinatorics",
    "edit distance",
    "longest common subsequence",
    "knapsack",
    "coin change",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dynprog = "dynprog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dynprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
