"""Character cursor used by the dalia tokenizer."""


class DaliaCursor:
    """
    Scan position over an immutable input string.

    The current character is None once the position has moved past the final
    character of the input.
    """

    def __init__(self, text: str, position: int = 0) -> None:
        """
        Initialize the cursor.

        Args:
            text: Input text to scan
            position: Starting offset into the text
        """
        self._text = text
        self._position = position
        self._current_char: str | None = text[position] if position < len(text) else None

    @property
    def text(self) -> str:
        """The text being scanned."""
        return self._text

    @property
    def position(self) -> int:
        """Offset of the current character."""
        return self._position

    @property
    def current_char(self) -> str | None:
        """The character at the current offset, or None at end of input."""
        return self._current_char

    def at_end(self) -> bool:
        """Check whether the cursor has moved past the end of the input."""
        return self._current_char is None

    def advance(self) -> None:
        """Move forward one character, detecting the end of the input."""
        if self._current_char is None:
            return

        self._position += 1
        if self._position >= len(self._text):
            self._current_char = None
            return

        self._current_char = self._text[self._position]
