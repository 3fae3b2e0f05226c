[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zsdist"
version = "0.1.0"
description = "Tree edit distance with the Zhang-Shasha algorithm and an exhaustive baseline, plus a small benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["tree edit distance", "zhang-shasha", "algorithms", "benchmark", "trees"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zsdist-benchmark = "zsdist.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["zsdist"]

[tool.pytest.ini_options]
addopts = "-ra"
