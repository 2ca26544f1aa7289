[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmrtrunk"
version = "0.1.0"
description = "DMR Tier III trunking signalling: CSBK builders, group number conversions and MMDVM UDP framing"
requires-python = ">=3.10"
keywords = ["dmr", "tier3", "trunking", "csbk", "mmdvm", "ham-radio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmrtrunk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
