[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voipdial"
version = "0.1.0"
description = "A terminal VoIP dialer front end: login, dashboard, settings and a call-screen state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["voip", "dialer", "call", "telephony", "state-machine", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Internet Phone",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
voipdial = "voipdial.app:main"

[tool.hatch.build.targets.wheel]
packages = ["voipdial"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
