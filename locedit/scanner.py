#!/usr/bin/env python3
"""
Directory scanner for localization file groups.

Walks a project tree, keeps .strings files outside ignored directories and
clusters them by logical path: the file path with its language-bundle
directories (en.lproj, fr.lproj, ...) removed. Files in different language
directories that otherwise share a path form one LocalizationGroup.
"""

import os
from collections import defaultdict
from pathlib import PurePosixPath
from typing import Optional

from .config import ScanConfig
from .errors import ScanResult, ScanTargetUnavailable
from .format_handlers import FormatHandler, StringsHandler
from .logging_config import get_logger
from .models import Localization, LocalizationGroup

logger = get_logger(__name__)


def _as_posix(path: str) -> str:
    return path.replace(os.sep, '/') if os.sep != '/' else path


def find_localization_files(root: str, config: ScanConfig) -> list[str]:
    """
    List candidate localization files under root.

    A file is a candidate when its name ends with the configured extension
    and its path relative to root contains no '<ignored>/' substring.

    Args:
        root: Directory to search
        config: Scan settings

    Returns:
        Sorted list of file paths (joined onto root)
    """
    files = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in filenames:
            if not filename.endswith(config.extension):
                continue
            path = os.path.join(dirpath, filename)
            relative = _as_posix(os.path.relpath(path, root))
            if config.is_ignored(relative):
                logger.debug(f"Skipping {path} in ignored directory")
                continue
            files.append(path)
    return sorted(files)


def logical_path(path: str, config: ScanConfig) -> str:
    """Path with every language-bundle directory segment removed."""
    parts = _as_posix(path).split('/')
    return '/'.join(part for part in parts if not config.is_bundle_directory(part))


def language_for_file(path: str, config: ScanConfig) -> str:
    """Language code from the file's parent directory, e.g. 'en' for en.lproj."""
    parent = PurePosixPath(_as_posix(path)).parent.name
    return config.language_for_directory(parent)


def scan(
    root: str,
    config: Optional[ScanConfig] = None,
    handler: Optional[FormatHandler] = None,
) -> ScanResult:
    """
    Find and construct localizations for a directory.

    Args:
        root: Directory to start the search
        config: Scan settings (defaults when None)
        handler: Parser for the files (StringsHandler when None)

    Returns:
        ScanResult with groups sorted by name. When root is not a readable
        directory the group list is empty and the failure is recorded.
    """
    config = config or ScanConfig()
    handler = handler or StringsHandler(config)
    result = ScanResult(root=str(root))

    logger.debug(f"Searching {root} for {config.extension} files")

    if not os.path.isdir(root) or not os.access(root, os.R_OK | os.X_OK):
        logger.debug(f"{root} is not a readable directory")
        result.errors.append(ScanTargetUnavailable(f"Not a readable directory: {root}", path=str(root)))
        return result

    grouped: dict[str, list[str]] = defaultdict(list)
    for path in find_localization_files(str(root), config):
        grouped[logical_path(path, config)].append(path)

    logger.debug(f"Found {len(grouped)} localization files")

    groups = []
    for group_path, files in grouped.items():
        localizations = []
        for path in files:
            parsed = handler.read_file(path)
            if parsed.error is not None:
                result.errors.append(parsed.error)
            localizations.append(Localization(
                language=language_for_file(path, config),
                translations=parsed.strings,
                path=path,
            ))
        localizations.sort(key=lambda localization: (localization.language, localization.path))
        groups.append(LocalizationGroup(
            name=PurePosixPath(group_path).name,
            localizations=localizations,
            path=group_path,
        ))

    result.groups = sorted(groups)
    return result
