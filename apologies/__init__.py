from .board import Slide, distance_to_home, slides, start_circle, turn_square
from .config import config
from .deck import Deck
from .game import Game
from .generator import MoveGenerator, calculate_position
from .pawn import Pawn, Position
from .player import Player, PlayerView
from .reward import RewardCalculator
from .rules import Rules
from .types import (
    Action,
    ActionType,
    Card,
    CardType,
    Color,
    GameMode,
    History,
    Move,
    Zone,
)

__all__ = [
    "Action",
    "ActionType",
    "Card",
    "CardType",
    "Color",
    "config",
    "calculate_position",
    "Deck",
    "distance_to_home",
    "Game",
    "GameMode",
    "History",
    "Move",
    "MoveGenerator",
    "Pawn",
    "Player",
    "PlayerView",
    "Position",
    "RewardCalculator",
    "Rules",
    "Slide",
    "slides",
    "start_circle",
    "turn_square",
    "Zone",
]
