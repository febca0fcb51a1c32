"""Axis-aligned rectangles and the small blocks that make up the shields."""

from __future__ import annotations

from dataclasses import dataclass

BLOCK_SIZE = 4
BLOCK_COLOR = (243, 216, 63)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    def collides(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap (touching edges do not)."""
        return (
            self.x < other.x + other.width
            and self.x + self.width > other.x
            and self.y < other.y + other.height
            and self.y + self.height > other.y
        )


@dataclass(frozen=True)
class Block:
    """One square piece of a shield."""

    x: float
    y: float

    def rect(self) -> Rect:
        """The area the block occupies."""
        return Rect(self.x, self.y, BLOCK_SIZE, BLOCK_SIZE)