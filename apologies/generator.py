from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from loguru import logger

from .board import slides, start_circle, turn_square
from .config import config
from .errors import IllegalMoveError, PastHomeError
from .pawn import Pawn, Position
from .types import Action, ActionType, Card, CardType, Color, Move, new_id

# Ways to split a move of 7 between two pawns
LEGAL_SPLITS = [(1, 6), (2, 5), (3, 4), (4, 3), (5, 2), (6, 1)]

# Distances a pawn on the board may move for each card; 10 offers two choices
SIMPLE_SQUARES = {
    CardType.CARD_1: (1,),
    CardType.CARD_2: (2,),
    CardType.CARD_3: (3,),
    CardType.CARD_4: (-4,),
    CardType.CARD_5: (5,),
    CardType.CARD_7: (7,),
    CardType.CARD_8: (8,),
    CardType.CARD_10: (10, -1),
    CardType.CARD_11: (11,),
    CardType.CARD_12: (12,),
}

CIRCLE_CARDS = (CardType.CARD_1, CardType.CARD_2)


def calculate_position(color: Color, position: Position, squares: int) -> Position:
    """
    Calculate the position reached by moving forward or backward from a position.

    Safe zone turns and board wraparound are honored; slides are not.

    :param color: Color of the pawn being moved.
    :param position: Current position, which must be on the track or in the safe zone.
    :param squares: Distance to move, negative for a backward move.
    :raises IllegalMoveError: When the pawn is in start or home.
    :raises PastHomeError: When the move would carry the pawn beyond home.
    :return: The resulting position.
    """
    if position.is_home or position.is_start:
        raise IllegalMoveError("pawn in home or start may not move")

    if squares == 0:
        return position

    if position.is_safe:
        safe = position.index
        if squares > 0:
            if safe + squares < config.SAFE_SQUARES:
                return Position.safe(safe + squares)
            if safe + squares == config.SAFE_SQUARES:
                return Position.home()
            raise PastHomeError()
        if safe + squares >= 0:
            return Position.safe(safe + squares)
        # back out of the safe zone onto the turn square
        return calculate_position(color, turn_square(color), squares + safe + 1)

    square = position.index
    turn = config.TURN_SQUARES[color]
    if squares > 0:
        if square <= turn < square + squares:
            remaining = squares - (turn - square) - 1
            return calculate_position(color, Position.safe(0), remaining)
        if square + squares >= config.BOARD_SQUARES:
            remaining = squares - (config.BOARD_SQUARES - square)
            return calculate_position(color, Position.square(0), remaining)
        return Position.square(square + squares)
    if square + squares < 0:
        last = Position.square(config.BOARD_SQUARES - 1)
        return calculate_position(color, last, squares + square + 1)
    return Position.square(square + squares)


def _find_pawn(
    all_pawns: Sequence[Pawn], position: Position, color: Color
) -> Optional[Pawn]:
    """Return the first pawn at a position; safe zones only hold their own color."""
    for pawn in all_pawns:
        if pawn.position == position and (
            not position.is_safe or pawn.color == color
        ):
            return pawn
    return None


@dataclass(slots=True)
class MoveGenerator:
    """Enumerates the legal moves one pawn can make with one card."""

    id_factory: Callable[[], str] = new_id

    def calculate_position(
        self, color: Color, position: Position, squares: int
    ) -> Position:
        return calculate_position(color, position, squares)

    def legal_moves(
        self, color: Color, card: Card, pawn: Pawn, all_pawns: Sequence[Pawn]
    ) -> List[Move]:
        """Return the legal moves for a pawn using a card, possibly empty."""
        moves: List[Move] = []
        if not pawn.position.is_home:
            if card.type in CIRCLE_CARDS:
                self._move_circle(moves, color, card, pawn, all_pawns)
            if card.type == CardType.CARD_11:
                self._move_swap(moves, color, card, pawn, all_pawns)
            for squares in SIMPLE_SQUARES.get(card.type, ()):
                self._move_simple(moves, color, card, pawn, all_pawns, squares)
            if card.type == CardType.CARD_7:
                self._move_split(moves, color, card, pawn, all_pawns)
            if card.type == CardType.CARD_APOLOGIES:
                self._move_apologies(moves, color, card, pawn, all_pawns)
        self._augment_with_slides(all_pawns, moves)
        logger.debug(f"{len(moves)} legal moves for {pawn} with card {card.type.value}")
        return moves

    def _new_move(
        self,
        card: Card,
        actions: List[Action],
        side_effects: Optional[List[Action]] = None,
    ) -> Move:
        return Move(
            card=card,
            actions=actions,
            side_effects=side_effects or [],
            id=self.id_factory(),
        )

    def _move_circle(
        self,
        moves: List[Move],
        color: Color,
        card: Card,
        pawn: Pawn,
        all_pawns: Sequence[Pawn],
    ) -> None:
        # A pawn in start may enter on its circle unless its own color sits there
        if not pawn.position.is_start:
            return
        circle = start_circle(color)
        action = Action(ActionType.MOVE_TO_POSITION, pawn, circle)
        conflict = _find_pawn(all_pawns, circle, color)
        if conflict is None:
            moves.append(self._new_move(card, [action]))
        elif conflict.color != color:
            bump = Action(ActionType.MOVE_TO_START, conflict)
            moves.append(self._new_move(card, [action], [bump]))

    def _move_simple(
        self,
        moves: List[Move],
        color: Color,
        card: Card,
        pawn: Pawn,
        all_pawns: Sequence[Pawn],
        squares: int,
    ) -> None:
        if not (pawn.position.is_square or pawn.position.is_safe):
            return
        try:
            target = calculate_position(color, pawn.position, squares)
        except IllegalMoveError:
            return  # not a legal distance for this pawn

        action = Action(ActionType.MOVE_TO_POSITION, pawn, target)
        if target.is_home or target.is_start:
            moves.append(self._new_move(card, [action]))
            return

        conflict = _find_pawn(all_pawns, target, color)
        if conflict is None:
            moves.append(self._new_move(card, [action]))
        elif conflict.color != color:
            bump = Action(ActionType.MOVE_TO_START, conflict)
            moves.append(self._new_move(card, [action], [bump]))

    def _move_split(
        self,
        moves: List[Move],
        color: Color,
        card: Card,
        pawn: Pawn,
        all_pawns: Sequence[Pawn],
    ) -> None:
        for other in all_pawns:
            if (
                other.key == pawn.key
                or other.color != color
                or other.position.is_home
                or other.position.is_start
            ):
                continue

            # neither half may conflict with the square the partner is leaving
            filtered = [p for p in all_pawns if p.key != other.key]
            for left, right in LEGAL_SPLITS:
                left_moves: List[Move] = []
                self._move_simple(left_moves, color, card, pawn, filtered, left)
                right_moves: List[Move] = []
                self._move_simple(right_moves, color, card, other, filtered, right)
                if left_moves and right_moves:
                    moves.append(
                        self._new_move(
                            card,
                            left_moves[0].actions + right_moves[0].actions,
                            left_moves[0].side_effects + right_moves[0].side_effects,
                        )
                    )

    def _move_swap(
        self,
        moves: List[Move],
        color: Color,
        card: Card,
        pawn: Pawn,
        all_pawns: Sequence[Pawn],
    ) -> None:
        if not pawn.position.is_square:
            return
        for swap in all_pawns:
            if swap.color != color and swap.position.is_square:
                moves.append(
                    self._new_move(
                        card,
                        [
                            Action(ActionType.MOVE_TO_POSITION, pawn, swap.position),
                            Action(ActionType.MOVE_TO_POSITION, swap, pawn.position),
                        ],
                    )
                )

    def _move_apologies(
        self,
        moves: List[Move],
        color: Color,
        card: Card,
        pawn: Pawn,
        all_pawns: Sequence[Pawn],
    ) -> None:
        if not pawn.position.is_start:
            return
        for swap in all_pawns:
            if swap.color != color and swap.position.is_square:
                moves.append(
                    self._new_move(
                        card,
                        [
                            Action(ActionType.MOVE_TO_POSITION, pawn, swap.position),
                            Action(ActionType.MOVE_TO_START, swap),
                        ],
                    )
                )

    def _augment_with_slides(
        self, all_pawns: Sequence[Pawn], moves: List[Move]
    ) -> None:
        """Redirect landings on another color's slide and bump every pawn on it."""
        for move in moves:
            for action in list(move.actions):
                if (
                    action.type != ActionType.MOVE_TO_POSITION
                    or not action.position.is_square
                ):
                    continue
                for color in Color:
                    if color == action.pawn.color:
                        continue
                    for slide in slides(color):
                        if action.position.index != slide.start:
                            continue
                        action.position = Position.square(slide.end)
                        for square in range(slide.start + 1, slide.end + 1):
                            # pawns of any color are bumped, the mover's own included
                            occupant = _find_pawn(
                                all_pawns, Position.square(square), color
                            )
                            if occupant is not None:
                                move.add_side_effect(
                                    Action(ActionType.MOVE_TO_START, occupant)
                                )
