[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rafchafetch"
version = "0.1.0"
description = "A small system information fetcher with braille-art logos and coloured output"
requires-python = ">=3.10"
keywords = ["fetch", "system-information", "terminal", "cli", "uptime", "memory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rafchafetch = "rafchafetch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rafchafetch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
