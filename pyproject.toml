[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yazz"
version = "0.0.2"
description = "Building blocks for isolated word speech recognition: WAV reading, hidden Markov models, Baum-Welch training, a vector-quantisation codebook and DTW"
requires-python = ">=3.10"
dependencies = []
keywords = ["speech", "recognition", "hmm", "baum-welch", "forward-backward", "wav", "dtw", "codebook"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["yazz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
