"""User registration and listing HTTP service."""

__version__ = "0.1.0"
