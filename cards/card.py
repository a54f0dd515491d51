from typing import List

RANKS: List[str] = [
    "Ace",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Prince",
    "Queen",
    "King",
]
SUITS: List[str] = ["Spades", "Clubs", "Hearts", "Diamonds"]


def card_name(rank: str, suit: str) -> str:
    """
    Format a single playing card.

    Cards are plain strings so they can be compared, stored and written to
    disk without any conversion.

    Args:
        rank (str): One of RANKS, e.g. "Queen"
        suit (str): One of SUITS, e.g. "Spades"

    Returns:
        str: Card in format "rank of suit"
    """
    return f"{rank} of {suit}"
