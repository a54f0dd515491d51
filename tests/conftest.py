import random

import pytest

from cards.deck import create_deck


@pytest.fixture(autouse=True)
def setup_logging():
    """Automatically disable logging for all tests."""
    import logging

    logging.disable(logging.CRITICAL)
    yield
    logging.disable(logging.NOTSET)


@pytest.fixture
def deck():
    """A fresh, ordered 48-card deck."""
    return create_deck()


@pytest.fixture
def seeded_rng():
    """Generator with a fixed seed for reproducible shuffles."""
    return random.Random(1234)


@pytest.fixture
def deck_path(tmp_path):
    """Path for a deck file inside a temporary directory."""
    return str(tmp_path / "my_deck")
