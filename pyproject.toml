[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parcelpost"
version = "0.1.0"
description = "Interactive parcel booking desk: price parcels, record senders and receivers, and manage a priority queue of orders in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["parcel", "courier", "shipping", "orders", "priority-queue", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parcelpost = "parcelpost.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parcelpost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
