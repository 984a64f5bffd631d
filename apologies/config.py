import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .types import CardType

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    BOARD_SQUARES: int = 60  # track squares 0..59
    SAFE_SQUARES: int = 5  # safe zone squares 0..4, home comes right after
    PAWNS: int = 4
    MIN_PLAYERS: int = 2
    MAX_PLAYERS: int = 4
    START_DISTANCE: int = 65  # forward squares from start to home

    PLAYER_COUNT: int = int(os.getenv("PLAYER_COUNT", 4))
    ADULT_HAND: int = int(os.getenv("ADULT_HAND", 5))

    # Per-color tables, indexed by Color (Red, Yellow, Green, Blue)
    START_CIRCLES: list[int] = field(default_factory=lambda: [4, 34, 49, 19])
    TURN_SQUARES: list[int] = field(default_factory=lambda: [2, 32, 47, 17])
    SLIDES: list[list[tuple[int, int]]] = field(
        default_factory=lambda: [
            [(1, 4), (9, 13)],
            [(31, 34), (39, 43)],
            [(46, 49), (54, 58)],
            [(16, 19), (24, 28)],
        ]
    )

    # Deck composition and the cards that give the player another draw
    DECK_COUNTS: dict[CardType, int] = field(
        default_factory=lambda: {
            CardType.CARD_1: 5,
            CardType.CARD_2: 4,
            CardType.CARD_3: 4,
            CardType.CARD_4: 4,
            CardType.CARD_5: 4,
            CardType.CARD_7: 4,
            CardType.CARD_8: 4,
            CardType.CARD_10: 4,
            CardType.CARD_11: 4,
            CardType.CARD_12: 4,
            CardType.CARD_APOLOGIES: 4,
        }
    )
    DRAW_AGAIN: dict[CardType, bool] = field(
        default_factory=lambda: {
            card_type: card_type == CardType.CARD_2 for card_type in CardType
        }
    )

    # Derived (populated in __post_init__ due to slots)
    DECK_SIZE: int = 0

    def __post_init__(self):
        self.DECK_SIZE = sum(self.DECK_COUNTS.values())

        if self.PLAYER_COUNT < self.MIN_PLAYERS or self.PLAYER_COUNT > self.MAX_PLAYERS:
            raise ValueError("PLAYER_COUNT must be between 2 and 4")
        if self.ADULT_HAND < 1:
            raise ValueError("ADULT_HAND must be positive")


config = Config()
