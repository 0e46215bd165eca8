#!/usr/bin/env python3
"""
Apple .strings format handler.

Handles parsing and serialization of the .strings localization files used
by iOS, macOS, watchOS and tvOS applications.
"""

import re
from typing import Optional

from ..errors import ParseFailure
from ..logging_config import get_logger
from ..models import LocalizationString
from .base import FormatHandler

logger = get_logger(__name__)

# Unquoted keys and values allowed by the old-style property list syntax
BARE_WORD = re.compile(r'[A-Za-z0-9_.$:/+-]+')

HEX_DIGITS = re.compile(r'[0-9A-Fa-f]{4}')

OCTAL_DIGITS = re.compile(r'[0-7]{1,3}')

ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'v': '\v',
    '"': '"',
    "'": "'",
    '\\': '\\',
}


class _Reader:
    """Cursor over .strings content that reports positions as line/column."""

    def __init__(self, content: str):
        self.content = content
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.content)

    def peek(self) -> str:
        return self.content[self.pos] if self.pos < len(self.content) else ''

    def error(self, message: str, pos: Optional[int] = None) -> ParseFailure:
        if pos is None:
            pos = self.pos
        line = self.content.count('\n', 0, pos) + 1
        column = pos - self.content.rfind('\n', 0, pos)
        return ParseFailure(message, line=line, column=column)

    def skip_trivia(self) -> None:
        """Skip whitespace, // line comments and /* block */ comments."""
        content = self.content
        while self.pos < len(content):
            ch = content[self.pos]
            if ch.isspace():
                self.pos += 1
            elif content.startswith('//', self.pos):
                end = content.find('\n', self.pos)
                self.pos = len(content) if end == -1 else end + 1
            elif content.startswith('/*', self.pos):
                end = content.find('*/', self.pos + 2)
                if end == -1:
                    raise self.error("Unterminated comment")
                self.pos = end + 2
            else:
                break

    def expect(self, ch: str, what: str) -> None:
        if self.peek() != ch:
            found = repr(self.peek()) if not self.at_end() else "end of file"
            raise self.error(f"Expected '{ch}' {what}, found {found}")
        self.pos += 1

    def read_token(self, what: str) -> str:
        """Read a quoted string or a bare word."""
        if self.peek() == '"':
            return self.read_quoted()

        match = BARE_WORD.match(self.content, self.pos)
        if match:
            self.pos = match.end()
            return match.group(0)

        found = repr(self.peek()) if not self.at_end() else "end of file"
        raise self.error(f"Expected {what}, found {found}")

    def read_quoted(self) -> str:
        start = self.pos
        self.pos += 1
        content = self.content
        chunks = []
        has_surrogates = False

        while True:
            if self.pos >= len(content):
                raise self.error("Unterminated string", pos=start)

            ch = content[self.pos]
            if ch == '"':
                self.pos += 1
                break

            if ch != '\\':
                chunks.append(ch)
                self.pos += 1
                continue

            escaped = content[self.pos + 1:self.pos + 2]
            if not escaped:
                raise self.error("Unterminated string", pos=start)

            if escaped in ('U', 'u'):
                digits = HEX_DIGITS.match(content, self.pos + 2)
                if not digits:
                    raise self.error("Invalid unicode escape")
                code = int(digits.group(0), 16)
                has_surrogates = has_surrogates or 0xD800 <= code <= 0xDFFF
                chunks.append(chr(code))
                self.pos = digits.end()
            elif escaped in '01234567':
                # \0 is the one-digit case of \ooo
                digits = OCTAL_DIGITS.match(content, self.pos + 1)
                chunks.append(chr(int(digits.group(0), 8)))
                self.pos = digits.end()
            else:
                chunks.append(ESCAPES.get(escaped, escaped))
                self.pos += 2

        text = ''.join(chunks)
        if has_surrogates:
            # \UD83D\UDE00 style pairs
            try:
                text = text.encode('utf-16', 'surrogatepass').decode('utf-16')
            except UnicodeDecodeError:
                raise self.error("Unpaired surrogate escape", pos=start)
        return text


class StringsHandler(FormatHandler):
    """
    Handler for Apple .strings files.

    .strings format structure:
    ```
    /* Comment about the string */
    "key.name" = "Value text";

    // Another style of comment
    "greeting" = "Hello, %@!";
    ```

    Comments are skipped; the handler only keeps key/value pairs. Output is
    always sorted by key.
    """

    @property
    def name(self) -> str:
        return "strings"

    def parse(self, content: str) -> list[LocalizationString]:
        """
        Parse .strings content.

        Grammar: `key = value;` pairs where key and value are quoted strings
        or bare words, separated by whitespace and comments. The legacy form
        `"key";` maps a key to itself.

        Args:
            content: Raw .strings file content

        Returns:
            LocalizationString list sorted by key

        Raises:
            ParseFailure: Malformed content, with line and column
        """
        reader = _Reader(content)
        values: dict[str, str] = {}
        keep_first = self.config.duplicate_keys == "first"

        while True:
            reader.skip_trivia()
            if reader.at_end():
                break

            key = reader.read_token("quoted key")
            reader.skip_trivia()

            if reader.peek() == ';':
                value = key
                reader.pos += 1
            else:
                reader.expect('=', f"after key {key!r}")
                reader.skip_trivia()
                value = reader.read_token("quoted value")
                reader.skip_trivia()
                reader.expect(';', f"after value of {key!r}")

            if key in values:
                logger.debug(f"Duplicate key {key!r}, keeping the {self.config.duplicate_keys} value")
                if keep_first:
                    continue
            values[key] = value

        return sorted(LocalizationString(key=key, value=value) for key, value in values.items())

    def _escape_string(self, s: str) -> str:
        """Escape string for .strings format."""
        return (
            s.replace('\\', '\\\\')
            .replace('"', '\\"')
            .replace('\n', '\\n')
            .replace('\t', '\\t')
            .replace('\r', '\\r')
        )

    def format_line(self, string: LocalizationString) -> str:
        return f'"{self._escape_string(string.key)}" = "{self._escape_string(string.value)}";'

    def serialize(self, strings: list[LocalizationString]) -> str:
        """
        Render strings as .strings content, one entry per line.

        With leading_newline set, every line (the first included) is
        preceded by a newline and there is no trailing newline, matching
        files written by the macOS LocalizationEditor app.

        Args:
            strings: Entries in output order (callers pass them key-sorted)

        Returns:
            Complete .strings file content
        """
        lines = [self.format_line(string) for string in strings]

        if self.config.leading_newline:
            return ''.join(f'\n{line}' for line in lines)

        if not lines:
            return ''
        return '\n'.join(lines) + '\n'
