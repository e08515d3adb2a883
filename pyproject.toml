[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnssrtk"
version = "0.1.0"
description = "GNSS time systems, troposphere correction, outlier and cycle-slip detection, single differencing and single-point positioning for GPS and BDS"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["gnss", "gps", "beidou", "rtk", "spp", "positioning", "geodesy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gnssrtk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
