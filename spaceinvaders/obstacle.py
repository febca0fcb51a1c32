"""Shields built from a fixed pattern of blocks."""

from __future__ import annotations

from dataclasses import dataclass, field

from spaceinvaders.block import BLOCK_SIZE, Block

CELL_SPACING = 3

GRID: tuple[str, ...] = (
    "." * 4 + "#" * 15 + "." * 4,
    "." * 3 + "#" * 17 + "." * 3,
    "." * 2 + "#" * 19 + "." * 2,
    "." * 1 + "#" * 21 + "." * 1,
    *("#" * 23 for _ in range(6)),
    "#" * 6 + "." * 11 + "#" * 6,
    "#" * 5 + "." * 13 + "#" * 5,
    "#" * 4 + "." * 15 + "#" * 4,
)


def obstacle_width() -> int:
    """Nominal width of one shield, used to spread shields across the screen."""
    return len(GRID[0]) * BLOCK_SIZE


@dataclass
class Obstacle:
    """A shield whose top-left corner is at (x, y)."""

    x: float
    y: float
    blocks: list[Block] = field(init=False)

    def __post_init__(self) -> None:
        self.blocks = [
            Block(self.x + column * CELL_SPACING, self.y + row * CELL_SPACING)
            for row, line in enumerate(GRID)
            for column, cell in enumerate(line)
            if cell == "#"
        ]