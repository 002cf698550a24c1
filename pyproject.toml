[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goo"
version = "0.1.0"
description = "Brainfuck compiler phases: scanner, optimizer, interpreter and x86-64 NASM code generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["brainfuck", "compiler", "interpreter", "nasm", "assembler", "esoteric"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goo"]

[tool.pytest.ini_options]
addopts = "-ra"
