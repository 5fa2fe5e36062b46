[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyzip"
version = "1.0.0"
description = "Small file compressor with run-length encoding and an adaptive Huffman tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "rle", "run-length encoding", "huffman", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polyzip = "polyzip.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polyzip"]

[tool.hatch.build.targets.sdist]
include = ["polyzip", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
