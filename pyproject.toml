[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lzhuffcrypt"
version = "0.1.0"
description = "File compressor combining LZ77 and Huffman coding, with optional Caesar-style byte shifting"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "lz77", "huffman", "caesar", "cipher"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
lzhuffcrypt = "lzhuffcrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lzhuffcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
