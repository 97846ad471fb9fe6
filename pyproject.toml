[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttsnorm"
version = "0.1.0"
description = "Text front end for speech synthesis: Chinese numerals and text normalisation, English cleaning, phoneme id sequences, query statistics and configuration loading."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["tts", "speech", "text normalization", "chinese", "numerals", "pinyin", "phonemes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ttsnorm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
