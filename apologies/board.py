from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .config import config
from .pawn import Pawn, Position
from .types import Color


@dataclass(frozen=True, slots=True)
class Slide:
    """A run of track squares; a pawn landing on `start` rides to `end`."""

    start: int
    end: int


def start_circle(color: Color) -> Position:
    """Track square where a pawn of this color enters play from start."""
    return Position.square(config.START_CIRCLES[color])


def turn_square(color: Color) -> Position:
    """Last track square before this color's safe zone entrance."""
    return Position.square(config.TURN_SQUARES[color])


def slides(color: Color) -> List[Slide]:
    return [Slide(start, end) for start, end in config.SLIDES[color]]


def distance_to_home(pawn: Pawn) -> int:
    """Number of forward squares between a pawn and its home area."""
    position = pawn.position
    if position.is_home:
        return 0
    if position.is_start:
        return config.START_DISTANCE
    if position.is_safe:
        return config.SAFE_SQUARES - position.index

    circle = config.START_CIRCLES[pawn.color]
    turn = config.TURN_SQUARES[pawn.color]
    square = position.index
    total = (config.BOARD_SQUARES - square) + turn + (config.SAFE_SQUARES + 1)
    # squares after the turn but before the circle have a full lap to go
    if turn < square < circle:
        return total
    return total if total < config.START_DISTANCE else total - config.BOARD_SQUARES
