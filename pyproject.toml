[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hordeshooter"
version = "0.1.0"
description = "A top-down arcade shooter: survive enemies that spawn every second and home in on you."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame", "top-down"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hordeshooter = "hordeshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hordeshooter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
