#!/usr/bin/env python3
"""
Base class for format handlers.

FormatHandler is the abstract base class for a localization file format.
Subclasses implement text parsing and serialization; reading and writing
files, decoding, and the log-and-continue error policy live here.
"""

import codecs
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..config import ScanConfig
from ..errors import ParseFailure, ParseResult, WriteFailure, WriteResult
from ..logging_config import get_logger
from ..models import LocalizationString

logger = get_logger(__name__)


class FormatHandler(ABC):
    """
    Abstract base class for format-specific handlers.

    A handler converts between file content and a key-sorted list of
    LocalizationString.
    """

    def __init__(self, config: Optional[ScanConfig] = None):
        self.config = config or ScanConfig()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name."""
        pass

    @abstractmethod
    def parse(self, content: str) -> list[LocalizationString]:
        """
        Parse format-specific content into localization strings.

        Args:
            content: Raw file content as string

        Returns:
            List of LocalizationString sorted by key

        Raises:
            ParseFailure: Content does not follow the format's grammar
        """
        pass

    @abstractmethod
    def serialize(self, strings: list[LocalizationString]) -> str:
        """
        Render localization strings as file content.

        Args:
            strings: Entries in output order

        Returns:
            Complete file content
        """
        pass

    def decode(self, raw: bytes) -> str:
        """
        Decode file bytes.

        A UTF-16 byte order mark wins. Otherwise the configured encoding is
        used (a UTF-8 byte order mark is stripped), with UTF-16 as the last
        resort.
        """
        if raw.startswith(b'\xff\xfe') or raw.startswith(b'\xfe\xff'):
            return raw.decode('utf-16')

        encoding = self.config.encoding
        if codecs.lookup(encoding).name == 'utf-8':
            encoding = 'utf-8-sig'

        try:
            return raw.decode(encoding)
        except UnicodeDecodeError:
            return raw.decode('utf-16')

    def read_file(self, path: str) -> ParseResult:
        """
        Read and parse one file.

        Failures are logged and reported on the result; the strings list is
        empty in that case.

        Args:
            path: File path

        Returns:
            ParseResult with the key-sorted strings or the failure
        """
        try:
            content = self.decode(Path(path).read_bytes())
        except (OSError, UnicodeDecodeError, LookupError) as e:
            error = ParseFailure(f"Could not read {path}: {e}", path=path)
            logger.error(f"Could not parse {path} as dictionary: {e}")
            return ParseResult(path=path, error=error)

        try:
            strings = self.parse(content)
        except ParseFailure as e:
            e.path = path
            logger.error(f"Could not parse {path} as dictionary: {e}")
            return ParseResult(path=path, error=e)

        logger.debug(f"Found {len(strings)} keys in {path}")
        return ParseResult(path=path, strings=strings)

    def write_file(self, strings: list[LocalizationString], path: str) -> WriteResult:
        """
        Overwrite path with the serialized strings.

        The write is not atomic. Failures are logged and reported on the
        result, never raised.

        Args:
            strings: Entries in output order
            path: Destination file

        Returns:
            WriteResult with the failure, if any
        """
        content = self.serialize(strings)
        try:
            with open(path, 'w', encoding=self.config.encoding, newline='') as f:
                f.write(content)
        except (OSError, UnicodeEncodeError, LookupError) as e:
            logger.error(f"Writing localization file {path} failed with {e}")
            return WriteResult(path=path, error=WriteFailure(str(e), path=path))

        logger.debug(f"Wrote {len(strings)} keys to {path}")
        return WriteResult(path=path)
