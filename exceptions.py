from enum import Enum
from typing import Optional


class DeckErrorKind(str, Enum):
    """Failure categories raised by deck persistence."""

    IO_WRITE_FAILURE = "io-write-failure"
    IO_READ_FAILURE = "io-read-failure"
    DECODE_FAILURE = "decode-failure"


class DeckError(Exception):
    """Base exception for deck errors."""

    kind: Optional[DeckErrorKind] = None


class DeckIOError(DeckError):
    """Raised when a deck file cannot be accessed."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class DeckWriteError(DeckIOError):
    """Raised when a deck cannot be written to its target path."""

    kind = DeckErrorKind.IO_WRITE_FAILURE


class DeckReadError(DeckIOError):
    """Raised when a deck file is missing or unreadable."""

    kind = DeckErrorKind.IO_READ_FAILURE


class DeckDecodeError(DeckError):
    """Raised when file content is not a validly encoded deck."""

    kind = DeckErrorKind.DECODE_FAILURE
