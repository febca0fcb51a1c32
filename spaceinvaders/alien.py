"""The invaders marching across the screen."""

from __future__ import annotations

from dataclasses import dataclass

from spaceinvaders.block import Rect

ALIEN_TYPES = (1, 2, 3)
POINTS = {1: 100, 2: 200, 3: 300}


@dataclass
class Alien:
    """An alien of type 1, 2 or 3 whose sprite has the given size."""

    alien_type: int
    x: float
    y: float
    health: int
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.alien_type not in ALIEN_TYPES:
            raise ValueError(f"unknown alien type: {self.alien_type}")

    def update(self, direction: int) -> None:
        """Move sideways by ``direction`` pixels."""
        self.x += direction

    def rect(self) -> Rect:
        """The area the alien occupies."""
        return Rect(self.x, self.y, self.width, self.height)