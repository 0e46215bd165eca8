#!/usr/bin/env python3
"""
Service for working with strings files.

LocalizationProvider is the entry point used by the editor front ends: it
scans a project for localization groups and persists single-value edits.
"""

from typing import Optional

from .config import ScanConfig
from .errors import ScanResult, UpdateResult
from .format_handlers import StringsHandler
from .logging_config import get_logger
from .models import Localization, LocalizationGroup, LocalizationString
from .scanner import scan

logger = get_logger(__name__)


def apply_update(
    translations: list[LocalizationString],
    key: str,
    value: str,
) -> list[LocalizationString]:
    """
    Key-sorted translations with key set to value.

    Entries with other keys are kept as they are; key is inserted when it
    was missing.
    """
    unchanged = [string for string in translations if string.key != key]
    return sorted(unchanged + [LocalizationString(key=key, value=value)])


def select_group(groups: list[LocalizationGroup], name: str) -> Optional[LocalizationGroup]:
    """
    Group whose logical path ends with name, or failing that the first group
    named name.

    Matching by path suffix lets a path relative to the project root select
    one of several groups sharing a file name.
    """
    for group in groups:
        if group.path == name or group.path.endswith('/' + name):
            return group
    for group in groups:
        if group.name == name:
            return group
    return None


class LocalizationProvider:
    """
    Scans projects and updates localization files.

    Holds the scan settings and the format handler. Stateless between calls:
    every scan reads a fresh snapshot from disk.
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        self.config = config or ScanConfig()
        self.handler = StringsHandler(self.config)

    # Actions

    def update(self, localization: Localization, key: str, value: str) -> UpdateResult:
        """
        Set one value and regenerate the whole localization file.

        Args:
            localization: Localization to update (left untouched)
            key: Localization string key
            value: New value for the localization string

        Returns:
            UpdateResult. No file is written when the key already holds
            value; on a write failure the error is set and written is False.
        """
        existing = localization.value_for(key)
        if existing is not None and existing == value:
            logger.debug(f"Same value provided for {key!r} in {localization}, not updating")
            return UpdateResult(localization=localization)

        logger.debug(f"Updating {key!r} in {localization}")

        updated = localization.with_translations(
            apply_update(localization.translations, key, value)
        )
        written = self.handler.write_file(updated.translations, updated.path)
        if written.error is not None:
            logger.error(f"Writing localization file for {localization} failed with {written.error}")
            return UpdateResult(localization=updated, changed=True, error=written.error)

        logger.debug(f"Localization file for {localization} updated")
        return UpdateResult(localization=updated, changed=True, written=True)

    def update_localization(self, localization: Localization, key: str, value: str) -> Localization:
        """
        Set one value and regenerate the whole localization file.

        Best-effort variant of update(): failures are only logged.

        Returns:
            Localization holding the new value
        """
        return self.update(localization, key, value).localization

    def scan(self, root: str) -> ScanResult:
        """Scan root and report groups together with every failure met."""
        return scan(root, self.config, self.handler)

    def get_localizations(self, root: str) -> list[LocalizationGroup]:
        """
        Find and construct localizations for a directory.

        Args:
            root: Directory to start the search

        Returns:
            Groups sorted by name, empty when root is not a readable directory
        """
        return self.scan(root).groups
