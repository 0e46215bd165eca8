#!/usr/bin/env python3
"""
Localization data model.

A LocalizationGroup is one logical strings file (for example
Localizable.strings) across all language directories. Each language file is
a Localization, holding its LocalizationString key/value pairs.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, order=True)
class LocalizationString:
    """Single key/value translation pair. Ordered by key."""
    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key} = {self.value}"


@dataclass(frozen=True)
class Localization:
    """
    Complete localization for a single language.

    Represents a single strings file for a single language. Instances are
    snapshots: updating a value produces a new Localization with the same
    language and path.

    Attributes:
        language: Language code taken from the language directory (e.g. 'en')
        translations: Key/value pairs sorted by key
        path: File the localization was read from and is written back to
    """
    language: str
    translations: list[LocalizationString] = field(default_factory=list, hash=False)
    path: str = ""

    def __str__(self) -> str:
        return self.language.upper()

    def keys(self) -> list[str]:
        return [string.key for string in self.translations]

    def value_for(self, key: str) -> Optional[str]:
        """Value stored for key, or None when the key is missing."""
        for string in self.translations:
            if string.key == key:
                return string.value
        return None

    def with_translations(self, translations: list[LocalizationString]) -> "Localization":
        return Localization(language=self.language, translations=translations, path=self.path)


@dataclass(frozen=True)
class LocalizationGroup:
    """
    Localizations sharing one logical path.

    Attributes:
        name: File name of the logical path (e.g. 'Localizable.strings')
        localizations: One Localization per language directory
        path: Logical path with language directories removed
    """
    name: str
    localizations: list[Localization] = field(default_factory=list, hash=False)
    path: str = ""

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: "LocalizationGroup") -> bool:
        if not isinstance(other, LocalizationGroup):
            return NotImplemented
        return (self.name, self.path) < (other.name, other.path)

    def languages(self) -> list[str]:
        return [localization.language for localization in self.localizations]

    def localization_for(self, language: str) -> Optional[Localization]:
        for localization in self.localizations:
            if localization.language == language:
                return localization
        return None

    def keys(self) -> list[str]:
        """Union of keys across all languages, sorted."""
        keys = set()
        for localization in self.localizations:
            keys.update(localization.keys())
        return sorted(keys)

    def table(self) -> dict[str, dict[str, Optional[str]]]:
        """
        Key by language table, as shown by the editor.

        Returns:
            Map of key -> {language -> value}, None where a language lacks the key
        """
        return {
            key: {
                localization.language: localization.value_for(key)
                for localization in self.localizations
            }
            for key in self.keys()
        }
