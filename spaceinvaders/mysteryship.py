"""The bonus ship that crosses the top of the screen now and then."""

from __future__ import annotations

from dataclasses import dataclass

from spaceinvaders.block import Rect

SPAWN_Y = 90
EDGE_MARGIN = 25
SPEED = 3
MYSTERY_POINTS = 500


@dataclass
class MysteryShip:
    """A bonus ship on a screen of ``screen_width`` with a sprite of the given size."""

    screen_width: int
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    speed: int = 0
    alive: bool = False

    def spawn(self, side: int) -> None:
        """Appear at the left edge when ``side`` is 0, otherwise at the right edge."""
        self.y = SPAWN_Y
        if side == 0:
            self.x = EDGE_MARGIN
            self.speed = SPEED
        else:
            self.x = self.screen_width - self.width - EDGE_MARGIN
            self.speed = -SPEED
        self.alive = True

    def update(self) -> None:
        """Move one frame and vanish once past either edge."""
        if not self.alive:
            return
        self.x += self.speed
        if self.x > self.screen_width - self.width - EDGE_MARGIN or self.x < EDGE_MARGIN:
            self.alive = False

    def rect(self) -> Rect:
        """The area the ship occupies; zero-sized while it is not alive."""
        if self.alive:
            return Rect(self.x, self.y, self.width, self.height)
        return Rect(self.x, self.y, 0, 0)