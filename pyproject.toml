[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "railbooking"
version = "0.1.0"
description = "In-memory model of trains, carriages, routes, timetables, clients and train tickets"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "tickets", "booking", "timetable", "railway"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = [
    "pytest",
    "freezegun",
]

[tool.hatch.build.targets.wheel]
packages = ["railbooking"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
