[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "daakit"
version = "0.1.0"
description = "Classic algorithms: Huffman coding, string matching, flows, shortest paths, geometry, dynamic programming and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "huffman",
    "string-matching",
    "max-flow",
    "shortest-paths",
    "convex-hull",
    "knapsack",
    "dynamic-programming",
    "n-queens",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
daakit = "daakit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["daakit"]

[tool.hatch.build.targets.sdist]
include = ["daakit", "tests", "pyproject.toml"]

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
