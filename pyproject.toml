[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stripcast"
version = "0.1.0"
description = "Render test patterns for LED strip columns and stream them as raw RGB frames over UDP"
requires-python = ">=3.10"
dependencies = []
keywords = ["led", "udp", "pixels", "strip", "test-pattern"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stripcast = "stripcast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["stripcast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
