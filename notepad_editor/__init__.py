"""Editing model for a Markdown note editor: text positions, line highlighting, editor state, IME input and key bindings."""

__version__ = "0.1.0"