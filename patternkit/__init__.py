"""Small, runnable concurrency and data-handling patterns."""

__version__ = "0.1.0"