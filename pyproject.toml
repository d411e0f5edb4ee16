[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notepad-editor"
version = "0.1.0"
description = "Editing model for a Markdown note editor: cursor and selection handling, per-line highlighting, IME composition and key bindings"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "editor", "notes", "highlighting", "ime", "keymap"]
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
    "Topic :: Text Editors",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["notepad_editor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
