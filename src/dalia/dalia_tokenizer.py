"""Tokenizer for dalia configuration files."""

import string
from typing import Iterator, List

from dalia.dalia_cursor import DaliaCursor
from dalia.dalia_error import DaliaTokenError
from dalia.dalia_token import DaliaToken, DaliaTokenType


WHITESPACE_CHARS = frozenset(" \t\r\n")
ALIAS_CHARS = frozenset(string.ascii_letters + string.digits + "_-")
LINE_END_CHARS = frozenset("\n\0")
PATH_TRAILING_CHARS = " \t\r"
GLOB_CHAR = "*"
EOF_TEXT = "<EOF>"


class DaliaTokenizer:
    """
    Produces tokens on demand from dalia configuration text.

    The tokenizer holds no state other than its cursor, so each call to
    next_token() scans exactly one token from wherever the previous call
    stopped.
    """

    def __init__(self, text: str) -> None:
        """
        Initialize the tokenizer.

        Args:
            text: Configuration text to tokenize
        """
        self._cursor = DaliaCursor(text)

    @property
    def cursor(self) -> DaliaCursor:
        """The cursor tracking the scan position."""
        return self._cursor

    def __iter__(self) -> Iterator[DaliaToken]:
        return self.tokens()

    def tokens(self) -> Iterator[DaliaToken]:
        """
        Lazily yield tokens up to and including the end-of-input token.

        Raises:
            DaliaTokenError: If a character cannot start any token
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == DaliaTokenType.EOF:
                return

    def next_token(self) -> DaliaToken:
        """
        Scan the next token from the input.

        Once the input is exhausted every call returns the end-of-input token.

        Returns:
            The next token

        Raises:
            DaliaTokenError: If the current character cannot start any token
        """
        self._skip_whitespace()

        cursor = self._cursor
        ch = cursor.current_char
        if ch is None:
            return DaliaToken(DaliaTokenType.EOF, EOF_TEXT, cursor.position)

        start = cursor.position

        if ch == '[':
            cursor.advance()
            return DaliaToken(DaliaTokenType.LBRACK, '[', start)

        if ch == ']':
            cursor.advance()
            return DaliaToken(DaliaTokenType.RBRACK, ']', start)

        # Alias names must be recognized before paths
        if self._is_alias_char():
            return self._read_alias()

        if ch == GLOB_CHAR:
            cursor.advance()
            return DaliaToken(DaliaTokenType.GLOB, GLOB_CHAR, start)

        if not self._is_line_end():
            return self._read_path()

        raise DaliaTokenError(
            f"invalid character {ch!r}",
            position=start,
            received=repr(ch),
            expected="'[', ']', '*', an alias name or a path"
        )

    def _skip_whitespace(self) -> None:
        while self._cursor.current_char in WHITESPACE_CHARS:
            self._cursor.advance()

    def _is_alias_char(self) -> bool:
        return self._cursor.current_char in ALIAS_CHARS

    def _is_line_end(self) -> bool:
        ch = self._cursor.current_char
        return ch is None or ch in LINE_END_CHARS

    def _read_alias(self) -> DaliaToken:
        start = self._cursor.position
        chars: List[str] = []
        ch = self._cursor.current_char
        while ch is not None and ch in ALIAS_CHARS:
            chars.append(ch)
            self._cursor.advance()
            ch = self._cursor.current_char

        return DaliaToken(DaliaTokenType.ALIAS, ''.join(chars), start)

    def _read_path(self) -> DaliaToken:
        """Read the rest of the line as a path, dropping trailing whitespace."""
        start = self._cursor.position
        chars: List[str] = []
        ch = self._cursor.current_char
        while ch is not None and ch not in LINE_END_CHARS:
            chars.append(ch)
            self._cursor.advance()
            ch = self._cursor.current_char

        return DaliaToken(DaliaTokenType.PATH, ''.join(chars).rstrip(PATH_TRAILING_CHARS), start)
