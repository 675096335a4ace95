[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estruturas"
version = "0.1.0"
description = "Classic algorithms and data structures for study: complexity counters, recursion, sorting, linear structures and trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "recursion",
    "stack",
    "queue",
    "linked list",
    "tree",
    "binary search tree",
    "education",
]
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
estruturas-complexity = "estruturas.complexity:main"
estruturas-recursion = "estruturas.recursion:main"
estruturas-sorting = "estruturas.sorting:main"
estruturas-benchmark = "estruturas.benchmark:main"
estruturas-round-robin = "estruturas.round_robin:main"
estruturas-console = "estruturas.console:main"

[tool.hatch.build.targets.wheel]
packages = ["estruturas"]

[tool.hatch.build.targets.sdist]
include = ["estruturas", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
