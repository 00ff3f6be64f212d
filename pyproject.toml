[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyten"
version = "0.1.0"
description = "K9-style typed atoms, vectors and verb kernels for an array-language interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["k", "k9", "array-language", "apl", "vectors", "interpreter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["keyten"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
