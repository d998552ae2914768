"""In-memory project/task tracker with matcher-based task queries."""

__version__ = "0.1.0"
