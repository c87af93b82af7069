[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ciary"
version = "0.1.0"
description = "Diary building blocks: calendar arithmetic, configuration, one Markdown file per day with timed entries, calendar navigation and greetings"
requires-python = ">=3.10"
dependencies = []
keywords = ["diary", "journal", "calendar", "markdown", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ciary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
