[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zysurface"
version = "0.1.0"
description = "Surface syntax building blocks for the Zydeco language: spans, lexing, syntax trees, parse errors and scoped syntax"
requires-python = ">=3.10"
dependencies = []
keywords = ["zydeco", "compiler", "lexer", "syntax-tree", "spans", "call-by-push-value"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zysurface"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
