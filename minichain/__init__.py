"""A small transaction blockchain with binary file storage, a demo command and a pure-Python SHA-256."""

__version__ = "0.1.0"