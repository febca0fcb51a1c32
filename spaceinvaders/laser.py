"""Laser shots fired by the player and by the aliens."""

from __future__ import annotations

from dataclasses import dataclass

from spaceinvaders.block import Rect

LASER_WIDTH = 4
LASER_HEIGHT = 15
TOP_LIMIT = 25
BOTTOM_MARGIN = 100


@dataclass
class Laser:
    """A vertical shot moving by ``speed`` pixels each frame."""

    x: float
    y: float
    speed: int
    active: bool = True

    def update(self, screen_height: int) -> None:
        """Move one frame and switch off once outside the play area."""
        self.y += self.speed
        if self.active and (self.y > screen_height - BOTTOM_MARGIN or self.y < TOP_LIMIT):
            self.active = False

    def rect(self) -> Rect:
        """The area the shot occupies."""
        return Rect(self.x, self.y, LASER_WIDTH, LASER_HEIGHT)