[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectorpaint"
version = "0.6.0"
description = "Device-independent 2D vector drawing primitives: geometry, clipping, path tessellation and paints"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "2d", "vector", "tessellation", "clipping", "canvas"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vectorpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
