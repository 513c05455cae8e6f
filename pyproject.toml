[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wiringkit"
version = "0.1.0"
description = "Microcontroller-style text output, stream parsing, strings, IP addresses and math helpers in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["print", "stream", "parsing", "string", "ipaddress", "dtostrf", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wiringkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
