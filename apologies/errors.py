"""Custom exception classes for the Apologies rules engine."""

from __future__ import annotations


class ApologiesError(Exception):
    """Base exception for all rules engine errors."""


class IllegalMoveError(ApologiesError):
    """Raised when a pawn cannot move the requested number of squares."""


class PastHomeError(IllegalMoveError):
    """Raised when a move would carry a pawn beyond its home area."""

    def __init__(self) -> None:
        super().__init__("pawn cannot move past home")


class MalformedPositionError(ApologiesError):
    """Raised when a raw position description does not name exactly one location."""


class EmptyDeckError(ApologiesError):
    """Raised when drawing from a deck with no cards left in either pile."""

    def __init__(self) -> None:
        super().__init__("no cards available in deck")


class DuplicateCardError(ApologiesError):
    """Raised when discarding a card the deck already holds."""

    def __init__(self, card_id: str) -> None:
        self.card_id = card_id
        super().__init__(f"card {card_id} already exists in deck")


class GameAlreadyStartedError(ApologiesError):
    """Raised when starting a game that has already been started."""

    def __init__(self) -> None:
        super().__init__("game is already started")


class InvalidColorError(ApologiesError):
    """Raised when a color is not playing in the game."""

    def __init__(self, color: object) -> None:
        self.color = color
        super().__init__(f"invalid color: {color}")


class InvalidPlayerCountError(ApologiesError):
    """Raised when a game is created with an unsupported number of players."""

    def __init__(self, player_count: int, min_players: int, max_players: int) -> None:
        self.player_count = player_count
        super().__init__(
            f"Invalid number of players {player_count}. "
            f"Must be in range [{min_players}, {max_players}]."
        )


class InternalEngineError(ApologiesError):
    """Raised when the engine reaches a state its own logic should make impossible."""


__all__ = [
    "ApologiesError",
    "DuplicateCardError",
    "EmptyDeckError",
    "GameAlreadyStartedError",
    "IllegalMoveError",
    "InternalEngineError",
    "InvalidColorError",
    "InvalidPlayerCountError",
    "MalformedPositionError",
    "PastHomeError",
]
