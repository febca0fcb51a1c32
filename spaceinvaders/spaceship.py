"""The player's cannon."""

from __future__ import annotations

from spaceinvaders.block import Rect
from spaceinvaders.laser import Laser

SPEED = 7
MARGIN = 25
BOTTOM_OFFSET = 100
FIRE_INTERVAL = 0.2
LASER_SPEED = -6


class Spaceship:
    """The player's ship, moving along the bottom of the screen and firing upwards."""

    def __init__(self, screen_width: int, screen_height: int, width: int, height: int) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.width = width
        self.height = height
        self.last_fire_time = 0.0
        self.lasers: list[Laser] = []
        self.x: float = 0
        self.y: float = 0
        self.reset()

    def move_left(self) -> None:
        """Move left, stopping at the left margin."""
        self.x = max(self.x - SPEED, MARGIN)

    def move_right(self) -> None:
        """Move right, stopping at the right margin."""
        self.x += SPEED
        limit = self.screen_width - self.width - MARGIN
        if self.x > limit:
            self.x = limit

    def fire_laser(self, now: float) -> bool:
        """Fire a shot unless the last one was too recent; return whether it fired."""
        if now - self.last_fire_time < FIRE_INTERVAL:
            return False
        self.lasers.append(Laser(self.x + self.width // 2 - 2, self.y, LASER_SPEED))
        self.last_fire_time = now
        return True

    def reset(self) -> None:
        """Return to the starting position and drop all shots."""
        self.x = (self.screen_width - self.width) // 2
        self.y = self.screen_height - self.height - BOTTOM_OFFSET
        self.lasers.clear()

    def rect(self) -> Rect:
        """The area the ship occupies."""
        return Rect(self.x, self.y, self.width, self.height)