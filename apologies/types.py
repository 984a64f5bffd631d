from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:  # pawn imports config, which imports this module
    from .pawn import Pawn, Position


class Color(IntEnum):
    """Player colors, enumerated in order of use."""

    RED = 0
    YELLOW = 1
    GREEN = 2
    BLUE = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class CardType(str, Enum):
    CARD_1 = "1"
    CARD_2 = "2"
    CARD_3 = "3"
    CARD_4 = "4"
    CARD_5 = "5"
    CARD_7 = "7"
    CARD_8 = "8"
    CARD_10 = "10"
    CARD_11 = "11"
    CARD_12 = "12"
    CARD_APOLOGIES = "A"


class ActionType(str, Enum):
    MOVE_TO_START = "MoveToStart"
    MOVE_TO_POSITION = "MoveToPosition"


class GameMode(str, Enum):
    STANDARD = "StandardMode"
    ADULT = "AdultMode"


class Zone(Enum):
    """Where a pawn resides; exactly one applies to any position."""

    START = "start"
    HOME = "home"
    SAFE = "safe"
    SQUARE = "square"


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True)
class Card:
    id: str
    type: CardType


@dataclass(slots=True)
class Action:
    type: ActionType
    pawn: Pawn
    position: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.type == ActionType.MOVE_TO_POSITION and self.position is None:
            raise ValueError("MoveToPosition action requires a position")
        if self.type == ActionType.MOVE_TO_START and self.position is not None:
            raise ValueError("MoveToStart action does not take a position")


@dataclass(slots=True)
class Move:
    """A player's move: the chosen actions plus the side effects they trigger.

    All consequences (bumps, slides) are worked out when the move is generated,
    so executing a move needs no further validation. The id only identifies a
    move for callers and never takes part in equality.
    """

    card: Card
    actions: List[Action] = field(default_factory=list)
    side_effects: List[Action] = field(default_factory=list)
    id: str = field(default_factory=new_id, compare=False)

    @property
    def merged_actions(self) -> List[Action]:
        return list(self.actions) + list(self.side_effects)

    @property
    def is_forfeit(self) -> bool:
        return not self.actions

    def add_side_effect(self, action: Action) -> None:
        if action not in self.actions:
            self.side_effects.append(action)


@dataclass(frozen=True, slots=True)
class History:
    action: str
    color: Optional[Color] = None
    card_type: Optional[CardType] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        color = self.color.label if self.color is not None else "General"
        timestamp = self.timestamp.isoformat(timespec="seconds")
        return f"[{timestamp}] {color} - {self.action}"
