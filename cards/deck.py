import random
from collections import Counter
from typing import List, Optional, Tuple

from loggers.deck_logger import DeckLogger

from .card import RANKS, SUITS, card_name
from .types import DeckState

DECK_SIZE = len(RANKS) * len(SUITS)


def create_deck() -> List[str]:
    """
    Build a complete, ordered deck of 48 cards.

    Cards are enumerated suit by suit (Spades, Clubs, Hearts, Diamonds) and,
    within a suit, from Ace up to King.

    Returns:
        List[str]: Fresh deck starting with "Ace of Spades"
    """
    deck = [card_name(rank, suit) for suit in SUITS for rank in RANKS]
    DeckLogger.log_create(len(deck))
    return deck


def shuffle(deck: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """
    Return a shuffled copy of the deck.

    Args:
        deck: Cards to shuffle, left untouched
        rng: Generator to draw from. Defaults to the module-level generator,
            which is seeded from process entropy.

    Returns:
        List[str]: New list holding the same cards in random order
    """
    shuffled = list(deck)
    DeckLogger.log_shuffle(len(shuffled), seeded=rng is not None)
    (rng or random).shuffle(shuffled)
    return shuffled


def contains(deck: List[str], card: str) -> bool:
    """Check if a card exists in the deck."""
    return card in deck


def deal(deck: List[str], hand_size: int) -> Tuple[List[str], List[str]]:
    """
    Split a deck into a hand and the remainder of the deck.

    Sizes outside the deck are clamped: zero or negative gives an empty hand,
    anything beyond the deck length gives the whole deck.

    Args:
        deck: Cards to split, left untouched
        hand_size: Number of cards to take from the top

    Returns:
        Tuple[List[str], List[str]]: (hand, remainder), both in deck order
    """
    split_at = min(max(hand_size, 0), len(deck))
    hand, remainder = list(deck[:split_at]), list(deck[split_at:])
    DeckLogger.log_deal(hand_size, len(hand), len(remainder))
    return hand, remainder


def create_hand(
    hand_size: int, rng: Optional[random.Random] = None
) -> Tuple[List[str], List[str]]:
    """Create a deck, shuffle it, and deal a hand of hand_size cards."""
    return deal(shuffle(create_deck(), rng), hand_size)


def get_deck_state(deck: List[str]) -> DeckState:
    """Summarize which cards a deck holds."""
    counts = Counter(deck)
    suit_counts = {suit: 0 for suit in SUITS}
    for card, count in counts.items():
        _, sep, suit = card.rpartition(" of ")
        if sep and suit in suit_counts:
            suit_counts[suit] += count

    return DeckState(
        size=len(deck),
        suit_counts=suit_counts,
        duplicates=[card for card, count in counts.items() if count > 1],
        is_complete=counts == Counter(create_deck()),
    )
