[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgptypes"
version = "0.1.0"
description = "OpenPGP building blocks: MPIs, packet headers and lengths, key IDs, string-to-key specifiers and encrypted secret key parameters."
requires-python = ">=3.10"
dependencies = []
keywords = ["openpgp", "pgp", "rfc4880", "mpi", "s2k", "packet"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["pgptypes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
