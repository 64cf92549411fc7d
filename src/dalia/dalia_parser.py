"""Recursive-descent parser that turns dalia configuration text into an alias map."""

import logging
import os
from pathlib import PurePath
from typing import Dict, List

from dalia.dalia_error import (
    DaliaDerivationError,
    DaliaEmptyInputError,
    DaliaExpansionError,
    DaliaParseError,
)
from dalia.dalia_token import DaliaToken, DaliaTokenType
from dalia.dalia_tokenizer import DaliaTokenizer


class DaliaParser:
    """
    Parses dalia configuration text into a mapping of alias name to path.

    Grammar, one directive per line:

        file := line+ EOF
        line := '[' ALIAS ']' PATH
              | '[' GLOB ']' PATH
              | PATH

    The parser keeps a single lookahead token and pulls tokens from the
    tokenizer on demand.  Any error aborts the whole parse.
    """

    def __init__(self, text: str) -> None:
        """
        Initialize the parser and lex the first lookahead token.

        Args:
            text: Configuration text to parse

        Raises:
            DaliaEmptyInputError: If the text is empty or contains only whitespace
            DaliaTokenError: If the first token cannot be lexed
        """
        if not text.strip():
            raise DaliaEmptyInputError("no input provided; the configuration is empty")

        self._logger = logging.getLogger("DaliaParser")
        self._tokenizer = DaliaTokenizer(text)
        self._lookahead: DaliaToken = self._tokenizer.next_token()
        self._aliases: Dict[str, str] = {}

    @property
    def lookahead(self) -> DaliaToken:
        """The current unconsumed token."""
        return self._lookahead

    def aliases(self) -> Dict[str, str]:
        """Get a copy of the aliases collected so far."""
        return dict(self._aliases)

    def parse(self) -> Dict[str, str]:
        """
        Parse every line of the configuration.

        Returns:
            Mapping of alias name to path

        Raises:
            DaliaTokenError: If the text contains a character that starts no token
            DaliaParseError: If a token does not fit the grammar
            DaliaDerivationError: If an alias name cannot be derived from a path
            DaliaExpansionError: If a [*] directory cannot be listed
        """
        while True:
            self._parse_line()
            if self._lookahead.type == DaliaTokenType.EOF:
                self._expect(DaliaTokenType.EOF)
                return self.aliases()

    def _advance(self) -> None:
        """Replace the lookahead with the next token from the tokenizer."""
        self._lookahead = self._tokenizer.next_token()

    def _expect(self, token_type: DaliaTokenType) -> None:
        """
        Consume the lookahead if it is of the given type.

        Args:
            token_type: Required token type

        Raises:
            DaliaParseError: If the lookahead is of a different type
        """
        if self._lookahead.type == token_type:
            self._advance()
            return

        raise DaliaParseError(
            f"expecting {token_type.value}; found {self._lookahead}",
            position=self._lookahead.position,
            expected=token_type.value,
            received=str(self._lookahead)
        )

    def _parse_line(self) -> None:
        """Parse a single directive and record the aliases it produces."""
        alias: str | None = None
        is_glob = False

        if self._lookahead.type == DaliaTokenType.LBRACK:
            self._expect(DaliaTokenType.LBRACK)

            if self._lookahead.type == DaliaTokenType.GLOB:
                is_glob = True
                self._expect(DaliaTokenType.GLOB)

            elif self._lookahead.type == DaliaTokenType.ALIAS:
                alias = self._lookahead.value
                self._expect(DaliaTokenType.ALIAS)

            self._expect(DaliaTokenType.RBRACK)

        path = self._lookahead.value
        self._expect(DaliaTokenType.PATH)

        if is_glob:
            self._insert_expanded_paths(path)
            return

        if alias is not None:
            self._insert(alias, path)
            return

        self._insert(self.derive_alias(path), path)

    def _insert_expanded_paths(self, directory: str) -> None:
        """
        Add an alias for every immediate subdirectory of a directory.

        The listing resolves a leading '~' but the stored paths keep the
        directory text exactly as written.

        Args:
            directory: Directory text from a [*] line

        Raises:
            DaliaExpansionError: If the directory cannot be listed
        """
        for name in self._list_subdirectories(directory):
            child = os.path.join(directory, name)
            self._insert(self.derive_alias(child), child)

    def _list_subdirectories(self, directory: str) -> List[str]:
        """Return the sorted names of the subdirectories of a directory."""
        listing_path = os.path.expanduser(directory)
        try:
            with os.scandir(listing_path) as entries:
                names = [entry.name for entry in entries if entry.is_dir()]

        except OSError as e:
            raise DaliaExpansionError(
                f"cannot expand directory {directory}: {e.strerror or e}",
                directory=directory,
                error_details={
                    'listing_path': listing_path,
                    'errno': e.errno,
                }
            ) from e

        names.sort()
        self._logger.debug("expanding %s into %d subdirectories", directory, len(names))
        return names

    def _insert(self, alias: str, path: str) -> None:
        previous = self._aliases.get(alias)
        if previous is not None:
            self._logger.debug("alias '%s' redefined: '%s' replaces '%s'", alias, path, previous)

        self._aliases[alias] = path

    @staticmethod
    def derive_alias(path: str) -> str:
        """
        Derive an alias name from the final segment of a path.

        The name is the final segment with its extension removed, lowercased.

        Args:
            path: Path text

        Returns:
            Derived alias name

        Raises:
            DaliaDerivationError: If the path has no final segment to use
        """
        name = PurePath(path).name
        if name in ('', '.', '..'):
            raise DaliaDerivationError(
                f"missing file stem in path: {path!r}",
                received=path,
                expected="a path ending in a named directory"
            )

        # A leading dot is part of the name, not an extension separator
        stem, dot, _extension = name.rpartition('.')
        if not dot or not stem:
            stem = name

        return stem.lower()
