[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calorietrack"
version = "0.1.0"
description = "A small interactive command-line diary for daily food intake, calories and BMI"
requires-python = ">=3.10"
dependencies = []
keywords = ["calories", "diet", "nutrition", "bmi", "food diary"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calorietrack = "calorietrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calorietrack"]

[tool.pytest.ini_options]
addopts = "-ra"
