[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kutil"
version = "0.1.0"
description = "Small utilities: traced errors, outcome values, a cursor-based UTF-8 string and byte debugging helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["error", "result", "outcome", "utf-8", "cursor", "debugging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
