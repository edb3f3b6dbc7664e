[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "secretsift"
version = "0.1.0"
description = "Building blocks for secret scanning: entropy checks, binary detection, allowlists, path filtering, configuration and provider verification"
requires-python = ">=3.10"
keywords = ["security", "secrets", "scanner", "entropy", "gitignore", "allowlist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
secretsift = "secretsift.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["secretsift"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
