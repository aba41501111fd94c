[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "objcenc"
version = "0.1.0"
description = "Objective-C type encodings, runtime selection and block ABI constants in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["objective-c", "type-encoding", "encode", "runtime", "blocks", "abi"]
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

[tool.hatch.build.targets.wheel]
packages = ["objcenc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 99
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
