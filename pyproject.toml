[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voyageplan"
version = "0.1.0"
description = "Plan multi-segment trips from catalogues of flights, hotels and excursions, with pricing strategies and booking annotations."
requires-python = ">=3.10"
dependencies = []
keywords = ["travel", "itinerary", "booking", "reservation", "planning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
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
test = ["pytest"]

[project.scripts]
voyageplan = "voyageplan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voyageplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
