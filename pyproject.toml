[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latticekem"
version = "0.1.0"
description = "Building blocks of a module-lattice key encapsulation mechanism: NTT arithmetic, polynomial encoding, hashing and deterministic random generators"
requires-python = ">=3.10"
keywords = ["lattice", "post-quantum", "kem", "ntt", "cryptography", "sha2", "ctr-drbg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["latticekem"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
