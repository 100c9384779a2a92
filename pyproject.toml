[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crossguard"
version = "0.1.0"
description = "An arcade game: guide a line of children safely across a busy road."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "crossing", "traffic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crossguard = "crossguard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["crossguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
