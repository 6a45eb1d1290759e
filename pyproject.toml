[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typecrab"
version = "0.6.0"
description = "A minimalistic, customizable typing test."
requires-python = ">=3.10"
dependencies = []
keywords = ["typing", "typing-test", "terminal", "cli", "productivity"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
typecrab = "typecrab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["typecrab"]

[tool.pytest.ini_options]
addopts = "-ra"
