"""
Exception hierarchy for secruleset.

All exceptions inherit from RulesetError for easy catching.
"""

from __future__ import annotations


class RulesetError(Exception):
    """Base exception for all secruleset errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RulesetWriteError(RulesetError, OSError):
    """Raised when a generated ruleset cannot be written to disk."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        errno: int | None = None,
        strerror: str | None = None,
    ) -> None:
        super().__init__(message, {"path": path, "errno": errno})
        self.path = path
        self.errno = errno
        self.strerror = strerror
        self.filename = path

    def __str__(self) -> str:
        return self.message


class ConfigError(RulesetError):
    """Raised when a project config file is missing or invalid."""

    def __init__(self, message: str, config_path: str | None = None) -> None:
        super().__init__(message, {"config_path": config_path})
        self.config_path = config_path
