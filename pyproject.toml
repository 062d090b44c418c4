[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "immui"
version = "0.1.0"
description = "A small immediate-mode UI toolkit that draws through pluggable graphics callbacks"
requires-python = ">=3.10"
keywords = ["ui", "immediate-mode", "gui", "pygame", "widgets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
immui-sample = "immui.sample:main"

[tool.hatch.build.targets.wheel]
packages = ["immui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
