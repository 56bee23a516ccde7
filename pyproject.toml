[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "muesliradio"
version = "0.1.0"
description = "Audio engine core: sample formats, drivers, devices, channel buffers, stream parameters and stream control over a pluggable backend"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "audio-engine", "buffer", "stream", "duplex", "interleave"]
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
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["muesliradio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
