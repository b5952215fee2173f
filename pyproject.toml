[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mllgeom"
version = "0.1.0"
description = "Multiplicative linear logic proofs, proof structures and cut reduction, with basic algebraic structures, polynomials and projective geometry"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear logic",
    "proof nets",
    "cut elimination",
    "sequent calculus",
    "polynomials",
    "projective geometry",
    "algebra",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mllgeom = "mllgeom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mllgeom"]

[tool.hatch.build.targets.sdist]
include = ["mllgeom", "tests"]

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
warn_unused_ignores = true
warn_redundant_casts = true
