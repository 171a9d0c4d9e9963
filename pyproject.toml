[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bigmul"
version = "0.1.0"
description = "Multiplication of large decimal strings with the schoolbook and Karatsuba algorithms, with benchmarking and HTML reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["big integer", "multiplication", "karatsuba", "benchmark", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
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
bigmul = "bigmul.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bigmul"]

[tool.pytest.ini_options]
addopts = "-ra"
