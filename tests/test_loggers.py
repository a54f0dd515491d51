import logging

import pytest

from cards.deck import create_deck, deal, shuffle
from cards.storage import load, save
from loggers.config import DEFAULT_LOG_LEVELS, configure_loggers
from exceptions import DeckReadError


@pytest.fixture
def enable_logging():
    """Re-enable logging disabled by the autouse fixture."""
    logging.disable(logging.NOTSET)
    yield
    configure_loggers()


class TestConfigureLoggers:
    def test_default_levels(self):
        configure_loggers()
        for name in DEFAULT_LOG_LEVELS:
            assert logging.getLogger(f"loggers.{name}_logger").level == logging.INFO

    def test_string_and_int_levels(self):
        configure_loggers({"deck": "debug", "storage": logging.ERROR})
        assert logging.getLogger("loggers.deck_logger").level == logging.DEBUG
        assert logging.getLogger("loggers.storage_logger").level == logging.ERROR
        configure_loggers()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_loggers({"deck": "LOUD"})


class TestLogOutput:
    def test_deal_is_logged_at_debug(self, enable_logging, caplog):
        configure_loggers({"deck": "DEBUG"})
        with caplog.at_level(logging.DEBUG, logger="loggers.deck_logger"):
            deal(create_deck(), 60)

        assert "Requested 60 cards, dealt 48" in caplog.text

    def test_shuffle_logs_generator_source(self, enable_logging, caplog, deck, seeded_rng):
        configure_loggers({"deck": "DEBUG"})
        with caplog.at_level(logging.DEBUG, logger="loggers.deck_logger"):
            shuffle(deck)
            assert "injected generator" not in caplog.text
            shuffle(deck, seeded_rng)

        assert "Shuffling deck with 48 cards using injected generator" in caplog.text

    def test_save_and_load_are_logged(self, enable_logging, caplog, deck, deck_path):
        with caplog.at_level(logging.INFO, logger="loggers.storage_logger"):
            save(deck, deck_path)
            load(deck_path)

        assert f"Saved deck of 48 cards to {deck_path}" in caplog.text
        assert f"Loaded deck of 48 cards from {deck_path}" in caplog.text

    def test_read_error_is_logged(self, enable_logging, caplog, deck_path):
        with caplog.at_level(logging.ERROR, logger="loggers.storage_logger"):
            with pytest.raises(DeckReadError):
                load(deck_path)

        assert f"Failed to read deck from {deck_path}" in caplog.text
