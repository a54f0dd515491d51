import logging

logger = logging.getLogger(__name__)


class StorageLogger:
    """Handles logging for saving and loading decks."""

    @staticmethod
    def log_save(path: str, size: int, num_bytes: int) -> None:
        logger.info(f"Saved deck of {size} cards to {path} ({num_bytes} bytes)")

    @staticmethod
    def log_load(path: str, size: int) -> None:
        logger.info(f"Loaded deck of {size} cards from {path}")

    @staticmethod
    def log_write_error(path: str, error: Exception) -> None:
        logger.error(f"Failed to write deck to {path}: {error}")

    @staticmethod
    def log_read_error(path: str, error: Exception) -> None:
        logger.error(f"Failed to read deck from {path}: {error}")

    @staticmethod
    def log_decode_error(path: str, reason: str) -> None:
        logger.error(f"Corrupt deck file {path}: {reason}")
