[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackvmc"
version = "0.1.0"
description = "Translate Hack stack-machine VM push and pop commands into Hack assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["hack", "vm", "translator", "assembly", "stack machine", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hackvmc = "hackvmc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackvmc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
