[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "charseg"
version = "0.1.0"
description = "Segmentation of text into words and separators, with CJK ideograph variant tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["tokenizer", "segmentation", "unicode", "search", "camelcase", "cjk"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["charseg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
