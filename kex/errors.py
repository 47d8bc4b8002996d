"""Typed exceptions for kex."""

from __future__ import annotations

from pathlib import Path


class KexError(Exception):
    """Base exception for kex failures."""


class LoadError(KexError):
    """Raised when the catalog file cannot be loaded."""

    def __init__(self, path: str | Path, cause: object):
        self.path = Path(path)
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"failed to load catalog {self.path}: {self.cause}"


class ReadError(LoadError):
    """Raised when the catalog file is missing or unreadable."""

    def _describe(self) -> str:
        return f"failed to read catalog file {self.path}: {self.cause}"


class ParseError(LoadError):
    """Raised when the catalog file is malformed or has the wrong shape."""

    def _describe(self) -> str:
        return f"failed to parse catalog file {self.path}: {self.cause}"


class DuplicateCommandError(ParseError):
    """Raised when two catalog entries share a name."""

    def __init__(self, path: str | Path, name: str):
        self.name = name
        super().__init__(path, f"duplicate command name '{name}'")
