[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "containerkit"
version = "0.1.0"
description = "Vector, stack and ordered-map containers with explicit capacity and red-black tree ordering"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "vector", "stack", "red-black tree", "ordered map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["containerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
