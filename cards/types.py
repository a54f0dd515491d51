from typing import Dict, List

from pydantic import BaseModel, Field, StrictStr, validator


class DeckState(BaseModel):
    """Summary of a deck's composition.

    Attributes:
        size: Number of cards in the deck
        suit_counts: Cards per suit, only for cards that parse as "rank of suit"
        duplicates: Cards that appear more than once, in first-seen order
        is_complete: True when the deck is exactly a reordering of a fresh deck
    """

    size: int = Field(..., ge=0)
    suit_counts: Dict[str, int] = Field(default_factory=dict)
    duplicates: List[str] = Field(default_factory=list)
    is_complete: bool = False

    class Config:
        frozen = True

    @validator("suit_counts")
    def validate_suit_counts(cls, v):
        if any(count < 0 for count in v.values()):
            raise ValueError("Suit counts cannot be negative")
        return v

    def __str__(self) -> str:
        status = "complete" if self.is_complete else "incomplete"
        return f"Deck: {self.size} cards, {status}"


class SavedDeck(BaseModel):
    """Validated payload of a decoded deck file.

    Attributes:
        count: Number of cards announced by the file header
        cards: The cards in saved order
    """

    count: int = Field(..., ge=0)
    cards: List[StrictStr] = Field(default_factory=list)

    @validator("cards")
    def validate_count(cls, v, values):
        if "count" in values and len(v) != values["count"]:
            raise ValueError(
                f"Header announces {values['count']} cards, found {len(v)}"
            )
        return v
