"""
Position scoring for characters that rank candidate moves.

A pawn is worth more the closer it gets to home, with a bonus once it is in
the safe zone or home and a large bonus for winning. A view is scored by
comparing the player against all of its opponents, so the best move both
advances the player and sets the opponents back.
"""

from __future__ import annotations

from typing import Tuple

from .board import distance_to_home
from .config import config
from .player import Player, PlayerView

SAFE_INCENTIVE = 10
WINNER_INCENTIVE = 100
MAX_REWARD_PER_OPPONENT = 400


def _player_score(player: Player) -> int:
    max_distance = config.PAWNS * config.START_DISTANCE
    distance = max_distance - sum(distance_to_home(pawn) for pawn in player.pawns)
    finished = [p for p in player.pawns if p.position.is_home or p.position.is_safe]
    safe = SAFE_INCENTIVE * len(finished)
    winner = WINNER_INCENTIVE if player.all_pawns_in_home() else 0
    return distance + safe + winner


class RewardCalculator:
    def calculate(self, view: PlayerView) -> float:
        """Score a view from the point of view of its player, never below zero."""
        player_score = _player_score(view.player)
        opponent_score = sum(
            _player_score(opponent) for opponent in view.opponents.values()
        )
        reward = len(view.opponents) * player_score - opponent_score
        return float(max(reward, 0))

    def range(self, players: int) -> Tuple[float, float]:
        return 0.0, float((players - 1) * MAX_REWARD_PER_OPPONENT)
