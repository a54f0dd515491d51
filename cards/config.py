import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class DeckConfig:
    """
    Configuration for dealing hands.

    Attributes:
        seed (Optional[int]): Seed for the random generator, None to seed from
            process entropy (default: None)
        hand_size (int): Number of cards dealt by default (default: 5)

    Raises:
        ValueError: If seed is given and is not an integer
    """

    seed: Optional[int] = None
    hand_size: int = 5

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError("Seed must be an integer")

    def make_rng(self) -> random.Random:
        """Build a generator seeded from this config."""
        return random.Random(self.seed)
