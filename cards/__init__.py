from .card import RANKS, SUITS, card_name
from .config import DeckConfig
from .deck import (
    DECK_SIZE,
    contains,
    create_deck,
    create_hand,
    deal,
    get_deck_state,
    shuffle,
)
from .storage import decode_deck, encode_deck, load, save
from .types import DeckState

__all__ = [
    "RANKS",
    "SUITS",
    "DECK_SIZE",
    "DeckConfig",
    "DeckState",
    "card_name",
    "contains",
    "create_deck",
    "create_hand",
    "deal",
    "decode_deck",
    "encode_deck",
    "get_deck_state",
    "load",
    "save",
    "shuffle",
]
