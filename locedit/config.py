#!/usr/bin/env python3
"""
Scan and serialization settings.

Defaults match the conventions of Xcode projects. A YAML file can override
any of them:

```yaml
extension: .strings
bundle_suffix: .lproj
ignored_directories: [Pods, Carthage, build, .framework]
duplicate_keys: last
leading_newline: false
```
"""

import codecs
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .errors import ConfigError

# Folders whose contents are never treated as source localizations
DEFAULT_IGNORED_DIRECTORIES = ["Pods", "Carthage", "build", ".framework"]

DUPLICATE_POLICIES = ("last", "first")


@dataclass
class ScanConfig:
    """
    Settings shared by the scanner, parser and serializer.

    Attributes:
        extension: Suffix of localization file names
        bundle_suffix: Suffix of language-bundle directories (e.g. en.lproj)
        ignored_directories: Names excluded when '<name>/' occurs in a path
        duplicate_keys: Which value survives a duplicate key ('last' or 'first')
        leading_newline: Start output with a blank line, like the macOS LocalizationEditor app
        encoding: Encoding used when writing files, and when reading files
            that carry no UTF-16 byte order mark
    """
    extension: str = ".strings"
    bundle_suffix: str = ".lproj"
    ignored_directories: list[str] = field(
        default_factory=lambda: list(DEFAULT_IGNORED_DIRECTORIES)
    )
    duplicate_keys: str = "last"
    leading_newline: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        if self.duplicate_keys not in DUPLICATE_POLICIES:
            raise ConfigError(
                f"duplicate_keys must be one of {', '.join(DUPLICATE_POLICIES)}, "
                f"got {self.duplicate_keys!r}"
            )
        if not self.extension:
            raise ConfigError("extension must not be empty")
        if not self.bundle_suffix:
            raise ConfigError("bundle_suffix must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding {self.encoding!r}")

    def is_ignored(self, path: str) -> bool:
        """Whether path contains '<name>/' for any ignored directory."""
        return any(f"{name}/" in path for name in self.ignored_directories)

    def is_bundle_directory(self, name: str) -> bool:
        return name.endswith(self.bundle_suffix)

    def language_for_directory(self, name: str) -> str:
        """Language code for a directory name, e.g. 'en.lproj' -> 'en'."""
        if name.endswith(self.bundle_suffix):
            return name[:-len(self.bundle_suffix)]
        return name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScanConfig":
        """Create from a mapping, validating keys and value types."""
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        for name, value in data.items():
            if name == "ignored_directories":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError("ignored_directories must be a list of strings")
            elif name == "leading_newline":
                if not isinstance(value, bool):
                    raise ConfigError("leading_newline must be true or false")
            elif not isinstance(value, str):
                raise ConfigError(f"{name} must be a string")

        return cls(**data)


def load_config(path: Optional[str] = None) -> ScanConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: YAML file path. Defaults apply when None.

    Returns:
        ScanConfig with the file's values applied over the defaults

    Raises:
        ConfigError: File is unreadable, not YAML, or has invalid values
    """
    if path is None:
        return ScanConfig()

    config_path = Path(path)
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", path=str(config_path))

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path=str(config_path))

    if data is None:
        return ScanConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", path=str(config_path))

    try:
        return ScanConfig.from_dict(data)
    except ConfigError as e:
        e.path = str(config_path)
        raise
