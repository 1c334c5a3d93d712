[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "autochair"
version = "0.1.0"
description = "Client-side models, view models and form logic for a car seat shop"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "catalogue", "basket", "orders", "view-model", "car seats"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["autochair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
