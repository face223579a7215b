[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slabcut"
version = "0.1.0"
description = "Data model, calculators and JSON storage for sheet-material cut lists: parts, stock sheets, CNC settings, G-code profiles, offcuts and purchase estimates."
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "cut list", "sheet goods", "woodworking", "gcode", "edge banding", "offcuts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Manufacturing",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["slabcut"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
