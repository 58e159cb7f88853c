[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchlab"
version = "0.1.0"
description = "Search algorithms over sorted sequences, small numeric helpers and micro-benchmarks"
requires-python = ">=3.10"
keywords = ["binary search", "ternary search", "exponential search", "benchmark", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchlab-bench = "searchlab.benchmarks:main"

[tool.hatch.build.targets.wheel]
packages = ["searchlab"]

[tool.pytest.ini_options]
addopts = "-ra"
