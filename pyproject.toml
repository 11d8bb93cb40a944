[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortviz"
version = "0.1.0"
description = "Watch bubble, selection and insertion sort step through an array in the terminal"
requires-python = ">=3.10"
keywords = ["sorting", "algorithms", "visualization", "terminal", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
sortviz = "sortviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sortviz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
