[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knnlite"
version = "0.1.0"
description = "A small k-nearest-neighbours classifier over integer CSV datasets"
requires-python = ">=3.10"
dependencies = []
keywords = ["knn", "k-nearest-neighbours", "classification", "csv", "dataset"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knnlite = "knnlite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knnlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
