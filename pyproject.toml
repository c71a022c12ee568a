[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordml"
version = "0.1.9"
description = "Read and write the settings, web settings and styles parts of WordprocessingML documents."
requires-python = ">=3.10"
dependencies = []
keywords = ["docx", "wordprocessingml", "openxml", "xml", "parser", "generator"]
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
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordml"]

[tool.pytest.ini_options]
addopts = "-ra"
