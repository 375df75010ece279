[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hospital_api"
version = "0.1.0"
description = "Flask application for hospital staff accounts and hospital-scoped patient search over SQLite"
requires-python = ">=3.10"
keywords = ["hospital", "patients", "staff", "jwt", "flask", "sqlite", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]
dependencies = [
    "flask",
    "pyjwt",
    "bcrypt",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hospital_api"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
