"""Exceptions for schema decoding, loading and generation."""

from pathlib import Path


class SchemagenError(Exception):
    """Base exception for schemagen operations."""

    pass


class SchemaError(SchemagenError):
    """Raised when a schema document cannot be decoded into nodes."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path or "/"
        super().__init__(f"{message} (at {self.path})")


class ConstraintError(SchemagenError):
    """Raised when a node's constraints cannot be satisfied."""

    def __init__(self, message: str, attempts: int = 0) -> None:
        self.attempts = attempts
        super().__init__(message)


class SchemaLoadError(SchemagenError):
    """Raised when a schema file is missing, unreadable or not parseable."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")
