[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "museumtour"
version = "0.1.0"
description = "A small model of a museum: halls, exhibits, a catalog, guided routes and visitors"
requires-python = ">=3.10"
dependencies = []
keywords = ["museum", "exhibits", "catalog", "guide", "education", "polymorphism"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
museumtour = "museumtour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["museumtour"]

[tool.pytest.ini_options]
addopts = "-ra"
