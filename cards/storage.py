"""Binary persistence for decks.

A saved deck is laid out big-endian as::

    b"DECK"                  magic
    uint32                   number of cards
    (uint32, bytes) * count  byte length and UTF-8 text of each card

Nothing may follow the last card.
"""

import os
import stat
import struct
import tempfile
from typing import List

from pydantic import ValidationError

from exceptions import DeckDecodeError, DeckReadError, DeckWriteError
from loggers.storage_logger import StorageLogger

from .types import SavedDeck

MAGIC = b"DECK"
_UINT32 = struct.Struct(">I")


def encode_deck(deck: List[str]) -> bytes:
    """Encode a deck into its binary file representation."""
    parts = [MAGIC, _UINT32.pack(len(deck))]
    for card in deck:
        data = card.encode("utf-8")
        parts.append(_UINT32.pack(len(data)))
        parts.append(data)
    return b"".join(parts)


def decode_deck(data: bytes) -> List[str]:
    """
    Decode the binary representation produced by encode_deck.

    Args:
        data: Raw file content

    Returns:
        List[str]: The cards in saved order

    Raises:
        DeckDecodeError: If the content is not a validly encoded deck
    """
    if data[: len(MAGIC)] != MAGIC:
        raise DeckDecodeError("Missing deck header")

    offset = len(MAGIC)
    count, offset = _read_uint32(data, offset, "card count")

    cards = []
    for index in range(count):
        length, offset = _read_uint32(data, offset, f"length of card {index}")
        end = offset + length
        if end > len(data):
            raise DeckDecodeError(f"Card {index} is truncated")
        try:
            cards.append(data[offset:end].decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DeckDecodeError(f"Card {index} is not valid UTF-8") from e
        offset = end

    if offset != len(data):
        raise DeckDecodeError(f"{len(data) - offset} unexpected trailing bytes")

    try:
        return SavedDeck(count=count, cards=cards).cards
    except ValidationError as e:
        raise DeckDecodeError(f"Invalid deck payload: {e}") from e


def _read_uint32(data: bytes, offset: int, what: str):
    end = offset + _UINT32.size
    if end > len(data):
        raise DeckDecodeError(f"Unexpected end of data reading {what}")
    return _UINT32.unpack_from(data, offset)[0], end


def _target_mode(path: str) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save(deck: List[str], path: str) -> None:
    """
    Save the deck as a binary file, replacing any existing file at path.

    The deck is written to a temporary file next to path and then renamed
    into place, so path never holds a partially written deck. An existing
    file keeps its permission bits, a new one gets the umask default.

    Raises:
        DeckWriteError: If a card cannot be encoded or the file cannot be written
    """
    try:
        data = encode_deck(deck)
    except UnicodeEncodeError as e:
        StorageLogger.log_write_error(path, e)
        raise DeckWriteError(f"Cannot encode deck for {path}: {e}", path) from e

    directory = os.path.dirname(os.path.abspath(path))
    tmp_path = None
    try:
        mode = _target_mode(path)
        with tempfile.NamedTemporaryFile(
            dir=directory, prefix=".deck-", delete=False
        ) as tmp:
            tmp_path = tmp.name
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as e:
        StorageLogger.log_write_error(path, e)
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise DeckWriteError(f"Cannot write deck to {path}: {e}", path) from e

    StorageLogger.log_save(path, len(deck), len(data))


def load(path: str) -> List[str]:
    """
    Load a deck previously written by save.

    Raises:
        DeckReadError: If the file does not exist or cannot be read
        DeckDecodeError: If the file content is not a valid deck
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        StorageLogger.log_read_error(path, e)
        raise DeckReadError(f"Cannot read deck from {path}: {e}", path) from e

    try:
        deck = decode_deck(data)
    except DeckDecodeError as e:
        StorageLogger.log_decode_error(path, str(e))
        raise

    StorageLogger.log_load(path, len(deck))
    return deck
