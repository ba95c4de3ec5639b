[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diuca"
version = "0.1.0"
description = "Constitutive laws, layering and response-spectrum tools for glacier ice and sediment flow models"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "glaciology",
    "ice",
    "glen flow law",
    "sediment",
    "elasticity",
    "damage",
    "response spectrum",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diuca"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
