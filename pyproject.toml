[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tvsc"
version = "0.1.0"
description = "Buffers, paged ring buffers, clocks, hashing, random values and file readers for streaming data"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "buffer", "clock", "hash", "streaming", "file reader", "random"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tvsc-random = "tvsc.rng:main"

[tool.hatch.build.targets.wheel]
packages = ["tvsc"]

[tool.pytest.ini_options]
addopts = "-ra"
