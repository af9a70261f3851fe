"""ClipKeep: a personal clipboard manager backed by MongoDB."""

__version__ = "0.1.0"
