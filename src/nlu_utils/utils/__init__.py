"""Shared helpers: offset conversion, errors and logging."""
