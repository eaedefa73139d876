[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boundvec"
version = "0.3.0"
description = "Fixed-capacity and data-free vector models for verification-style code"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "fixed-capacity", "verification", "model", "container"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["boundvec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
