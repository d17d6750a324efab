[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftunit"
version = "0.1.0"
description = "A small unit-test runner that runs each test in its own process, with a libc-style string, memory and list toolkit."
requires-python = ">=3.10"
dependencies = []
keywords = ["unit-testing", "test-runner", "process-isolation", "fork", "strings", "linked-list"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing :: Unit",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ftunit = "ftunit.suites:main"

[tool.hatch.build.targets.wheel]
packages = ["ftunit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
