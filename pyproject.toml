[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wavsteg"
version = "1.0.0"
description = "Hide text messages in the low bits of PCM WAV audio samples and recover them"
requires-python = ">=3.10"
keywords = ["wav", "steganography", "audio", "lsb", "waveform", "png"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
wavsteg = "wavsteg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wavsteg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
