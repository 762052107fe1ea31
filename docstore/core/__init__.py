"""Core configuration, logging, and identifiers."""
