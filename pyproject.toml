[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fmelim"
version = "0.1.0"
description = "Fourier-Motzkin elimination for real and integer systems of linear inequalities"
requires-python = ">=3.10"
dependencies = []
keywords = ["fourier-motzkin", "linear inequalities", "elimination", "projection", "loop nest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fme = "fmelim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fmelim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
