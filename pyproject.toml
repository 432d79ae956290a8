[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termshmup"
version = "0.1.0"
description = "A terminal shoot-'em-up played on ASCII maps in curses"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "shmup", "curses", "terminal", "arcade", "ascii"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
termshmup = "termshmup.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termshmup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
