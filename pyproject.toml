[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uavsched"
version = "0.1.0"
description = "Energy-aware task allocation and refuelling for a fleet of UAVs"
requires-python = ">=3.10"
dependencies = []
keywords = ["uav", "drone", "scheduling", "task allocation", "refuel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uavsched = "uavsched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["uavsched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
