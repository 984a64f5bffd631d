from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional

from .config import config
from .deck import Deck
from .errors import InvalidColorError, InvalidPlayerCountError
from .player import Player, PlayerView
from .types import Card, Color, History

Clock = Callable[[], datetime]


@dataclass(slots=True)
class Game:
    """Authoritative state for one game: players by color, the deck and history.

    `rng` drives the deck and `clock` stamps history entries; both can be
    replaced for repeatable tests.
    """

    player_count: int = config.PLAYER_COUNT
    rng: random.Random = field(default_factory=random.Random, repr=False)
    clock: Clock = field(default=datetime.now, repr=False)
    players: Dict[Color, Player] = field(init=False)
    deck: Deck = field(init=False)
    history: List[History] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not config.MIN_PLAYERS <= self.player_count <= config.MAX_PLAYERS:
            raise InvalidPlayerCountError(
                self.player_count, config.MIN_PLAYERS, config.MAX_PLAYERS
            )
        colors = list(Color)[: self.player_count]
        self.players = {color: Player(color) for color in colors}
        self.deck = Deck(rng=self.rng)

    @property
    def started(self) -> bool:
        return len(self.history) > 0

    @property
    def completed(self) -> bool:
        return self.winner is not None

    @property
    def winner(self) -> Optional[Player]:
        return next(
            (player for player in self.players.values() if player.all_pawns_in_home()),
            None,
        )

    def copy(self) -> "Game":
        obj = object.__new__(Game)
        obj.player_count = self.player_count
        obj.clock = self.clock
        obj.players = {color: player.copy() for color, player in self.players.items()}
        obj.deck = self.deck.copy()
        # the copy draws from the deck's cloned random state, not the source's
        obj.rng = obj.deck.rng
        obj.history = list(self.history)
        return obj

    def track(
        self,
        action: str,
        player: Optional[Player] = None,
        card: Optional[Card] = None,
    ) -> None:
        """Record an action in the game history; a named player is charged a turn."""
        color = player.color if player is not None else None
        card_type = card.type if card is not None else None
        entry = History(
            action=action, color=color, card_type=card_type, timestamp=self.clock()
        )
        self.history.append(entry)
        if player is not None:
            self.players[player.color].increment_turns()

    def create_player_view(self, color: Color) -> PlayerView:
        player = self.players.get(color)
        if player is None:
            raise InvalidColorError(color)
        opponents = {
            other: self.players[other].public_data()
            for other in Color
            if other in self.players and other != color
        }
        return PlayerView(player=player.copy(), opponents=opponents)
