[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockwise"
version = "2.0.0"
description = "Inventory intelligence: event-driven stock tracking, demand modelling and Monte Carlo restock decisions"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "restock", "monte-carlo", "demand-forecasting", "warehouse"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stockwise = "stockwise.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stockwise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
