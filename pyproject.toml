[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kronut"
version = "0.1.0"
description = "Save, load and edit Korg Kronos set lists over MIDI"
requires-python = ">=3.10"
dependencies = [
    "mido",
]
keywords = ["korg", "kronos", "midi", "sysex", "set list", "synthesizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kronut = "kronut.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kronut"]

[tool.pytest.ini_options]
addopts = "-ra"
