"""Typed exceptions for language tags and configuration."""


class NluUtilsError(Exception):
    """Base class for errors raised by :mod:`nlu_utils`."""


class UnknownLanguageError(NluUtilsError, ValueError):
    """Raised when a language tag is outside the supported set."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown language {tag}")
        self.tag = tag


class ConfigError(NluUtilsError):
    """Raised when a configuration file cannot be read as a YAML mapping."""
