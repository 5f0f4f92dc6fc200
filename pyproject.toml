[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goldifri"
version = "0.1.0"
description = "Constraint-checked Goldilocks field, quadratic extension and FRI query arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = ["goldilocks", "finite-field", "quadratic-extension", "fri", "zero-knowledge", "polynomial-commitment"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["goldifri"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
