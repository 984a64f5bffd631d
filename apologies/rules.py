from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from .board import start_circle
from .config import config
from .errors import GameAlreadyStartedError, InternalEngineError
from .game import Game
from .generator import MoveGenerator
from .pawn import Pawn
from .player import Player, PlayerView
from .types import Action, ActionType, Card, GameMode, Move


def _apply_action(pawn: Pawn, action: Action) -> None:
    if action.type == ActionType.MOVE_TO_START:
        pawn.move_to_start()
    elif action.type == ActionType.MOVE_TO_POSITION:
        pawn.move_to_position(action.position)


@dataclass(slots=True)
class Rules:
    """High-level game rules built on top of the move generator."""

    generator: MoveGenerator = field(default_factory=MoveGenerator)

    def start_game(self, game: Game, mode: GameMode) -> None:
        if game.started:
            raise GameAlreadyStartedError()

        game.track(f"Game started with mode: {mode.value}")
        logger.info(
            f"Game started with mode {mode.value} and {game.player_count} players"
        )

        # adult mode puts one pawn per player on the board and deals everyone a hand
        if mode == GameMode.ADULT:
            for player in game.players.values():
                player.pawns[0].move_to_position(start_circle(player.color))
            for _ in range(config.ADULT_HAND):
                for player in game.players.values():
                    player.append_to_hand(game.deck.draw())
            logger.debug(
                f"Dealt {config.ADULT_HAND} cards to each of "
                f"{game.player_count} players"
            )

    def execute_move(self, game: Game, player: Player, move: Move) -> None:
        """Execute a player's move, updating game state."""
        for action in move.merged_actions:
            # the action holds a copy of the pawn; change the one the game owns
            pawn = game.players[action.pawn.color].pawns[action.pawn.index]
            target = "start" if action.type == ActionType.MOVE_TO_START else "position"
            game.track(
                f"Played card {move.card.type.value}: [{pawn.name}->{target}]",
                player,
                move.card,
            )
            _apply_action(pawn, action)
            logger.debug(f"{pawn.name} moved to {pawn.position}")

        if game.completed:
            winner = game.winner
            game.track(
                f"Game completed: winner is {winner.color.label} "
                f"after {winner.turns} turns"
            )
            logger.info(f"{winner.color.label} won after {winner.turns} turns")

    def evaluate_move(self, view: PlayerView, move: Move) -> PlayerView:
        """
        Return the view that results from executing a move, without touching game state.

        Intended for characters that score each legal move before choosing one.
        """
        result = view.copy()
        for action in move.merged_actions:
            pawn = result.get_pawn(action.pawn)
            if pawn is not None:  # pawns outside the view are skipped
                _apply_action(pawn, action)
        return result

    def construct_legal_moves(
        self, view: PlayerView, card: Optional[Card] = None
    ) -> List[Move]:
        """
        Return every legal move for the viewing player.

        Only `card` is considered when given, otherwise every card in the
        player's hand. When nothing is legal, forfeiting one of the considered
        cards becomes the only allowable move.
        """
        all_pawns = view.all_pawns()
        color = view.player.color
        cards = [card] if card is not None else list(view.player.hand)

        moves: List[Move] = []
        for played in cards:
            for pawn in view.player.pawns:
                for move in self.generator.legal_moves(color, played, pawn, all_pawns):
                    if move not in moves:  # equal content, id ignored
                        moves.append(move)

        if not moves:
            logger.warning(
                f"No legal moves for {color.label}; forfeit is the only option"
            )
            moves = [
                Move(card=played, id=self.generator.id_factory()) for played in cards
            ]

        if not moves:
            raise InternalEngineError("could not construct any legal moves")

        return moves

    def draw_again(self, card: Optional[Card]) -> bool:
        """Whether the player gets to draw again after playing a card."""
        if card is None:
            return False
        return config.DRAW_AGAIN[card.type]
