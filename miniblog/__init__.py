"""Blog post model, in-memory store, service rules and JSON request handlers."""

__version__ = "0.1.0"