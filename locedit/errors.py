#!/usr/bin/env python3
"""
Error kinds and operation results.

Core operations never raise these errors to their callers. They log the
failure and hand it back on a result object, so a caller can ignore it
(best-effort desktop behaviour) or act on it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .models import Localization, LocalizationGroup, LocalizationString


class ErrorKind(str, Enum):
    """Kinds of failure the core can report."""
    SCAN_TARGET_UNAVAILABLE = "scan_target_unavailable"
    PARSE_FAILURE = "parse_failure"
    WRITE_FAILURE = "write_failure"
    CONFIG_ERROR = "config_error"


class LocalizationError(Exception):
    """Base class for all locedit errors."""

    kind: ErrorKind

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "error_type": self.kind.value,
            "error": self.message,
            "path": self.path,
        }


class ScanTargetUnavailable(LocalizationError):
    """Scan root is missing or is not a readable directory."""
    kind = ErrorKind.SCAN_TARGET_UNAVAILABLE


class ParseFailure(LocalizationError):
    """File content is not a valid key/value strings file."""
    kind = ErrorKind.PARSE_FAILURE

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message, path)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["line"] = self.line
        data["column"] = self.column
        return data


class WriteFailure(LocalizationError):
    """Destination file could not be written."""
    kind = ErrorKind.WRITE_FAILURE


class ConfigError(LocalizationError):
    """Configuration file is unreadable or invalid."""
    kind = ErrorKind.CONFIG_ERROR


@dataclass
class ParseResult:
    """Strings read from one file."""
    path: str
    strings: list[LocalizationString] = field(default_factory=list)
    error: Optional[ParseFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WriteResult:
    """Outcome of writing one file."""
    path: str
    error: Optional[WriteFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScanResult:
    """Groups found under a root, plus every failure met on the way."""
    root: str
    groups: list[LocalizationGroup] = field(default_factory=list)
    errors: list[LocalizationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class UpdateResult:
    """
    Outcome of a single value update.

    Attributes:
        localization: State to use for future reads. The updated localization
            when the value changed, the original one otherwise.
        changed: Whether the new value differs from the stored one
        written: Whether the file was rewritten successfully
        error: Write failure, if any
    """
    localization: Localization
    changed: bool = False
    written: bool = False
    error: Optional[WriteFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None
