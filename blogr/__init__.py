"""Blog tooling: text and git utilities, a terminal editor model, markdown preview and theme metadata."""

__version__ = "0.3.0"