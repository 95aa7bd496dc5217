[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ziesha"
version = "0.1.0"
description = "Ledger primitives: money amounts, SHA3 hashing, Merkle trees, Ed25519 keys, addresses and key-value stores"
requires-python = ">=3.10"
keywords = ["blockchain", "merkle", "ed25519", "sha3", "key-value store"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Database",
]
dependencies = [
    "pynacl",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ziesha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
