import logging
from pathlib import Path
from typing import Any

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)


# =============================================================================
#   ErrorMessage
# =============================================================================
class ErrorMessage(Exception):
    """An error reduced to its human-readable message.

    Any value that can describe itself with ``str()`` can be turned into an
    ``ErrorMessage``, which gives a program a single error type to raise up
    to its entry point. Both ``repr()`` and ``str()`` return the bare message,
    so printing the error (or letting a top-level reporter print it) shows
    plain prose instead of ``ErrorMessage('...')``.

    Example:
        >>> err = ErrorMessage("Invalid input")
        >>> print(repr(err))
        Invalid input
    """

    def __init__(self, message: Any) -> None:
        text = str(message)
        super().__init__(text)
        self._message = text

    # -------------------------------------------------------------------------
    @classmethod
    def from_error(cls, error: Any) -> "ErrorMessage":
        """Convert any error-like value into an ``ErrorMessage``.

        The value is rendered with ``str()`` exactly once; its text is kept
        as-is.

        Args:
            error: An exception, or any object with a meaningful ``__str__``.

        Returns:
            ErrorMessage: A new message holding the rendered description.
        """
        text = str(error)
        logger.debug("Converted %s into an error message: %s", type(error).__name__, text)
        return cls(text)

    # -------------------------------------------------------------------------
    @property
    def message(self) -> str:
        """The stored message text."""
        return self._message

    def render(self) -> str:
        """Return the message exactly as stored."""
        return self._message

    # -------------------------------------------------------------------------
    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return self._message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorMessage):
            return NotImplemented
        return self._message == other._message

    def __hash__(self) -> int:
        return hash(self._message)
