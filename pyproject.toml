[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parceltracker"
version = "0.1.0"
description = "Parcel registration and status tracking backed by an SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["parcel", "tracking", "sqlite", "delivery", "logistics"]
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
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parceltracker = "parceltracker.service:main"

[tool.hatch.build.targets.wheel]
packages = ["parceltracker"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
