[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sstest"
version = "0.1.0"
description = "Building blocks for a small unit-testing library: comparison predicates, expression decomposition, float comparison, string views, a stopwatch and result tallies"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "unit-test", "assertions", "comparison", "float-equality"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sstest"]

[tool.pytest.ini_options]
addopts = "-ra"
