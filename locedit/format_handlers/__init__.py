#!/usr/bin/env python3
"""
Format handlers for localization file formats.

Supported formats:
- Strings: Apple .strings files
"""

from .base import FormatHandler
from .strings import StringsHandler

__all__ = [
    'FormatHandler',
    'StringsHandler',
]
