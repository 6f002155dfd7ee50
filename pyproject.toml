[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cppexperiments"
version = "0.1.0"
description = "Small computing experiments: run counting, bit patterns, magic squares, interval arithmetic, cubic equations and radix tries."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "experiments",
    "magic-square",
    "radix-trie",
    "radix-sort",
    "interval-arithmetic",
    "floating-point",
    "cubic-equation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cppexp-pattern-count = "cppexperiments.pattern_count:main"
cppexp-bits = "cppexperiments.bits:main"
cppexp-hello-server = "cppexperiments.hello_server:main"
cppexp-magic = "cppexperiments.magic:main"
cppexp-cubic = "cppexperiments.cubic:main"
cppexp-trie = "cppexperiments.trie:main"

[tool.hatch.build.targets.wheel]
packages = ["cppexperiments"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
