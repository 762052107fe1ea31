"""Docstore: users, folders, and documents with hierarchy integrity."""

__version__ = "1.0.0"
