from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Dict

from .config import config
from .errors import DuplicateCardError, EmptyDeckError
from .types import Card, CardType


def _build_draw_pile() -> Dict[str, Card]:
    pile: Dict[str, Card] = {}
    count = 0
    for card_type in CardType:
        for _ in range(config.DECK_COUNTS[card_type]):
            card_id = str(count)
            pile[card_id] = Card(card_id, card_type)
            count += 1
    return pile


@dataclass(slots=True)
class Deck:
    """Draw and discard piles for a game.

    Draw order depends only on the injected random source, so a seeded
    `random.Random` gives a repeatable sequence of cards.
    """

    rng: random.Random = field(default_factory=random.Random, repr=False)
    draw_pile: Dict[str, Card] = field(default_factory=_build_draw_pile)
    discard_pile: Dict[str, Card] = field(default_factory=dict)

    def copy(self) -> "Deck":
        # cards are immutable; the copy keeps its own random state
        rng = random.Random()
        rng.setstate(self.rng.getstate())
        return Deck(
            rng=rng,
            draw_pile=dict(self.draw_pile),
            discard_pile=dict(self.discard_pile),
        )

    def draw(self) -> Card:
        if not self.draw_pile:
            self.draw_pile.update(self.discard_pile)
            self.discard_pile.clear()

        if not self.draw_pile:
            raise EmptyDeckError()

        key = self.rng.choice(list(self.draw_pile))
        return self.draw_pile.pop(key)

    def discard(self, card: Card) -> None:
        if card.id in self.draw_pile or card.id in self.discard_pile:
            raise DuplicateCardError(card.id)
        self.discard_pile[card.id] = card
