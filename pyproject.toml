[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smartcalc"
version = "1.0.0"
description = "Expression calculator with function sampling for plots and credit payment schedules"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "parser", "credit", "annuity", "plotting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smartcalc = "smartcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["smartcalc"]

[tool.hatch.build.targets.sdist]
include = ["smartcalc", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
