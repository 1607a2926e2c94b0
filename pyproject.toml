[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphpart"
version = "0.1.0"
description = "Graph partitioning building blocks: configuration presets, quality metrics, block extraction, balance limits and Fennel label-propagation refinement"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "partitioning", "edge-cut", "fennel", "label-propagation", "balance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["graphpart"]

[tool.pytest.ini_options]
addopts = "-ra"
