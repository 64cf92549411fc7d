"""Exception classes for dalia configuration parsing."""

from typing import Any


class DaliaError(Exception):
    """Base exception for dalia errors."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        expected: str | None = None,
        received: str | None = None,
        error_details: dict[str, Any] | None = None
    ):
        """
        Initialize the exception.

        Args:
            message: Error message
            position: Character offset in the configuration text, if known
            expected: What the parser or tokenizer was expecting
            received: What was actually found
            error_details: Optional dictionary with further error information
        """
        super().__init__(message)
        self.message = message
        self.position = position
        self.expected = expected
        self.received = received
        self.error_details = error_details


class DaliaTokenError(DaliaError):
    """Raised when a character cannot start any token."""


class DaliaParseError(DaliaError):
    """Raised when the lookahead token does not fit the grammar."""


class DaliaDerivationError(DaliaError):
    """Raised when no alias name can be derived from a path."""


class DaliaExpansionError(DaliaError):
    """Raised when a directory named by a [*] line cannot be listed."""

    def __init__(self, message: str, directory: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            directory: Directory that could not be listed
            error_details: Optional dictionary with further error information
        """
        super().__init__(message, error_details=error_details)
        self.directory = directory


class DaliaEmptyInputError(DaliaError):
    """Raised when a parser is constructed from empty or whitespace-only text."""


class DaliaConfigError(DaliaError):
    """Raised when the configuration file is missing, unreadable or empty."""
