[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eventmaster"
version = "0.1.0"
description = "A small event management web service backed by MySQL"
requires-python = ">=3.10"
keywords = ["events", "flask", "mysql", "rest", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
]
dependencies = [
    "flask",
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eventmaster = "eventmaster.main:main"

[tool.hatch.build.targets.wheel]
packages = ["eventmaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
