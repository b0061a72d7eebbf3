[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartviewer"
version = "0.1.0"
description = "Load time-series data from JSON or SQLite files and draw bar, pie and scatter charts"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["chart", "plot", "time series", "sqlite", "json", "visualization", "dependency injection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chartviewer = "chartviewer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chartviewer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
