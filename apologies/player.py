from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .config import config
from .pawn import Pawn
from .types import Card, Color


@dataclass(slots=True)
class Player:
    color: Color
    hand: List[Card] = field(default_factory=list)
    pawns: Optional[List[Pawn]] = None
    turns: int = 0

    def __post_init__(self) -> None:
        if self.pawns is None:
            self.pawns = [Pawn(color=self.color, index=i) for i in range(config.PAWNS)]

    def copy(self) -> "Player":
        return Player(
            color=self.color,
            hand=list(self.hand),
            pawns=[pawn.copy() for pawn in self.pawns],
            turns=self.turns,
        )

    def public_data(self) -> "Player":
        """Copy of this player with the hand hidden from opponents."""
        return Player(
            color=self.color,
            hand=[],
            pawns=[pawn.copy() for pawn in self.pawns],
            turns=self.turns,
        )

    def append_to_hand(self, card: Card) -> None:
        self.hand.append(card)

    def remove_from_hand(self, card: Card) -> None:
        if card in self.hand:
            self.hand.remove(card)

    def find_first_pawn_in_start(self) -> Optional[Pawn]:
        return next((pawn for pawn in self.pawns if pawn.position.is_start), None)

    def all_pawns_in_home(self) -> bool:
        return all(pawn.position.is_home for pawn in self.pawns)

    def increment_turns(self) -> None:
        self.turns += 1


@dataclass(slots=True)
class PlayerView:
    """What one player sees on their turn: own data plus opponents' public data."""

    player: Player
    opponents: Dict[Color, Player] = field(default_factory=dict)

    def copy(self) -> "PlayerView":
        return PlayerView(
            player=self.player.copy(),
            opponents={
                color: self.opponents[color].copy()
                for color in Color
                if color in self.opponents
            },
        )

    def get_pawn(self, prototype: Pawn) -> Optional[Pawn]:
        """Return the pawn in this view with the same color and index, if any."""
        return next(
            (pawn for pawn in self.all_pawns() if pawn.key == prototype.key), None
        )

    def all_pawns(self) -> List[Pawn]:
        pawns = list(self.player.pawns)
        # iterate colors rather than the dict so the order is stable
        for color in Color:
            opponent = self.opponents.get(color)
            if opponent is not None:
                pawns.extend(opponent.pawns)
        return pawns
