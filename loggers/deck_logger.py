import logging

logger = logging.getLogger(__name__)


class DeckLogger:
    """Handles all logging operations for deck-related actions."""

    @staticmethod
    def log_create(size: int) -> None:
        """Log creation of a fresh deck."""
        logger.debug(f"Created deck with {size} cards")

    @staticmethod
    def log_shuffle(size: int, seeded: bool = False) -> None:
        """Log deck shuffling."""
        if seeded:
            logger.debug(f"Shuffling deck with {size} cards using injected generator")
        else:
            logger.debug(f"Shuffling deck with {size} cards")

    @staticmethod
    def log_deal(requested: int, dealt: int, remaining: int) -> None:
        """Log a split of the deck into hand and remainder."""
        if requested != dealt:
            logger.debug(
                f"Requested {requested} cards, dealt {dealt}. {remaining} cards remaining."
            )
        else:
            logger.debug(f"Dealt {dealt} cards. {remaining} cards remaining.")
