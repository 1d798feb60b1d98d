"""Everyday helpers for files, permissions, tarballs, strings and system information."""

__version__ = "0.1.0"