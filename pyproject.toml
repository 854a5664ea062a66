[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfdecode"
version = "0.1.0"
description = "Decoders for 433 MHz home-automation and weather-sensor radio protocols from raw pulse timings"
requires-python = ">=3.10"
dependencies = []
keywords = ["433mhz", "rf", "decoder", "weather station", "home automation", "pulses"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
