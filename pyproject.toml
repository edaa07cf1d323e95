[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ssmkit"
version = "1.0.6"
description = "Time-stamped sensor stream primitives: error types, protocol constants, message layouts, a ring buffer with time lookup and sample sensor records"
requires-python = ">=3.10"
dependencies = []
keywords = ["sensor", "stream", "ring-buffer", "robotics", "time-series", "binary-layout"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ssmkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
