[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokit_transact"
version = "0.1.0"
description = "Build, encode, decode and identify Algorand transactions"
requires-python = ">=3.10"
keywords = ["algorand", "transaction", "msgpack", "blockchain", "address"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "msgpack>=1.0",
    "cryptography>=41.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["algokit_transact"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
