[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stormcastle"
version = "0.1.0"
description = "A small side-scrolling castle-storming game drawn on a simulated 84x48 Nokia 5110 LCD"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "nokia5110", "lcd", "pcd8544", "bitmap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stormcastle = "stormcastle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["stormcastle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
