[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eyecam"
version = "0.1.0"
description = "Camera capture and control abstractions with transparent pixel format conversion"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["camera", "capture", "video", "webcam", "pixel format", "color conversion"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Capture",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
eyecam = "eyecam.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eyecam"]

[tool.hatch.build.targets.sdist]
include = ["eyecam", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
