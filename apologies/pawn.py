from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .config import config
from .errors import MalformedPositionError
from .types import Color, Zone


@dataclass(frozen=True, slots=True)
class Position:
    """Where a pawn resides: start, home, a safe square or a track square.

    Only the safe and square zones carry an index. Build positions through the
    class constructors so that the zone and index always agree.
    """

    zone: Zone
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.zone in (Zone.START, Zone.HOME):
            if self.index is not None:
                raise ValueError(f"{self.zone.value} position takes no index")
        elif self.zone == Zone.SAFE:
            if self.index is None or not 0 <= self.index < config.SAFE_SQUARES:
                raise ValueError(f"invalid safe square: {self.index}")
        elif self.index is None or not 0 <= self.index < config.BOARD_SQUARES:
            raise ValueError(f"invalid square: {self.index}")

    @classmethod
    def start(cls) -> "Position":
        return cls(Zone.START)

    @classmethod
    def home(cls) -> "Position":
        return cls(Zone.HOME)

    @classmethod
    def safe(cls, index: int) -> "Position":
        return cls(Zone.SAFE, index)

    @classmethod
    def square(cls, index: int) -> "Position":
        return cls(Zone.SQUARE, index)

    @classmethod
    def from_fields(
        cls,
        start: bool = False,
        home: bool = False,
        safe: Optional[int] = None,
        square: Optional[int] = None,
    ) -> "Position":
        """Convert a four-field description, exactly one of which must be set."""
        fields = [start, home, safe is not None, square is not None]
        if sum(fields) != 1:
            raise MalformedPositionError(
                "position must name exactly one of start, home, safe or square"
            )
        if start:
            return cls.start()
        if home:
            return cls.home()
        if safe is not None:
            return cls.safe(safe)
        return cls.square(square)

    @property
    def is_start(self) -> bool:
        return self.zone == Zone.START

    @property
    def is_home(self) -> bool:
        return self.zone == Zone.HOME

    @property
    def is_safe(self) -> bool:
        return self.zone == Zone.SAFE

    @property
    def is_square(self) -> bool:
        return self.zone == Zone.SQUARE

    def __str__(self) -> str:
        if self.index is None:
            return self.zone.value
        return f"{self.zone.value} {self.index}"


@dataclass(slots=True)
class Pawn:
    """Lightweight pawn model. Holds state only.

    A pawn is identified by (color, index). Moves are generated against copies
    of the pawns, so rule code resolves the authoritative pawn by key before
    changing its position.
    """

    color: Color
    index: int  # 0..3 per player
    position: Position = field(default_factory=Position.start)

    @property
    def name(self) -> str:
        return f"{self.color.label}{self.index}"

    @property
    def key(self) -> tuple[Color, int]:
        return self.color, self.index

    def copy(self) -> "Pawn":
        # positions are immutable, so sharing one is safe
        return Pawn(color=self.color, index=self.index, position=self.position)

    def move_to_position(self, position: Position) -> None:
        self.position = position

    def move_to_start(self) -> None:
        self.position = Position.start()

    def move_to_home(self) -> None:
        self.position = Position.home()

    def __str__(self) -> str:
        return f"{self.name}->{self.position}"
