"""
locedit - Apple .strings localization editor core

Scans a project for localization file groups (the same .strings file across
en.lproj, fr.lproj, ...), parses their key/value pairs and rewrites a file
when a single translation changes.

Quick start:
    from locedit import LocalizationProvider

    provider = LocalizationProvider()
    groups = provider.get_localizations("./MyApp")
    french = groups[0].localization_for("fr")
    provider.update_localization(french, "greeting", "Bonjour")
"""

__version__ = "1.0.0"

from .config import ScanConfig, load_config
from .errors import (
    ConfigError,
    ErrorKind,
    LocalizationError,
    ParseFailure,
    ParseResult,
    ScanResult,
    ScanTargetUnavailable,
    UpdateResult,
    WriteFailure,
    WriteResult,
)
from .models import Localization, LocalizationGroup, LocalizationString
from .provider import LocalizationProvider

__all__ = [
    "ConfigError",
    "ErrorKind",
    "Localization",
    "LocalizationError",
    "LocalizationGroup",
    "LocalizationProvider",
    "LocalizationString",
    "ParseFailure",
    "ParseResult",
    "ScanConfig",
    "ScanResult",
    "ScanTargetUnavailable",
    "UpdateResult",
    "WriteFailure",
    "WriteResult",
    "load_config",
]
