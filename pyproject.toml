[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bachatbuddy"
version = "0.1.0"
description = "A small desktop expense tracker with sortable lists, monthly category totals and light and dark themes."
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "budget", "personal finance", "tkinter", "tracker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bachatbuddy = "bachatbuddy.app:main"

[tool.hatch.build.targets.wheel]
packages = ["bachatbuddy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
