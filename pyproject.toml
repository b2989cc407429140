[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "horizonkit"
version = "0.1.0"
description = "Attitude estimation, artificial-horizon rendering, e-paper panel protocol and bitmap font helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ahrs", "madgwick", "imu", "artificial horizon", "e-paper", "framebuffer", "bitmap font"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["horizonkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
