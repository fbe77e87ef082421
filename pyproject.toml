[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refdom"
version = "0.1.0"
description = "A simple document tree that an HTML or XML tree builder can fill, with an iterative serializer walk and plain-text renderings."
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "xml", "dom", "tree", "tree-builder", "tree-sink"]
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
    "Topic :: Text Processing :: Markup :: HTML",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["refdom"]

[tool.hatch.build.targets.sdist]
include = ["refdom", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
