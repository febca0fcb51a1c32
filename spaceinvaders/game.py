"""Game state and rules: waves of aliens, shields, shots, lives and scoring."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from spaceinvaders.alien import POINTS, Alien
from spaceinvaders.block import Rect
from spaceinvaders.laser import Laser
from spaceinvaders.mysteryship import MYSTERY_POINTS, MysteryShip
from spaceinvaders.obstacle import Obstacle, obstacle_width
from spaceinvaders.spaceship import Spaceship

log = logging.getLogger(__name__)

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800

ALIEN_ROWS = 5
ALIEN_COLUMNS = 11
ALIEN_ORIGIN_X = 75
ALIEN_ORIGIN_Y = 110
ALIEN_SPACING = 55
ALIEN_DROP = 4
EDGE_MARGIN = 25

ALIEN_LASER_INTERVAL = 0.350
ALIEN_LASER_SPEED = 6
FIRST_SHOT_DELAY = 2.0

OBSTACLE_COUNT = 4
OBSTACLE_BOTTOM_OFFSET = 200

MYSTERY_INTERVAL_RANGE = (10, 20)
STARTING_LIVES = 3

Size = tuple[int, int]

_HEALTH_BY_LEVEL: dict[int, dict[int, int]] = {
    1: {1: 1, 2: 1, 3: 1},
    2: {1: 1, 2: 1, 3: 2},
    3: {1: 1, 2: 2, 3: 2},
}
_DEFAULT_HEALTH = 2


def calculate_health(level: int, alien_type: int) -> int:
    """Hit points of an alien of the given type on the given level."""
    return _HEALTH_BY_LEVEL.get(level, {}).get(alien_type, _DEFAULT_HEALTH)


def _row_type(row: int) -> int:
    if row == 0:
        return 3
    if row in (1, 2):
        return 2
    return 1


def create_aliens(level: int, alien_sizes: Mapping[int, Size]) -> list[Alien]:
    """Build the formation for a level; ``alien_sizes`` maps type to sprite size."""
    aliens = []
    for row in range(ALIEN_ROWS):
        alien_type = _row_type(row)
        width, height = alien_sizes[alien_type]
        for column in range(ALIEN_COLUMNS):
            aliens.append(
                Alien(
                    alien_type,
                    ALIEN_ORIGIN_X + column * ALIEN_SPACING,
                    ALIEN_ORIGIN_Y + row * ALIEN_SPACING,
                    calculate_health(level, alien_type),
                    width,
                    height,
                )
            )
    return aliens


@dataclass
class HighScoreStore:
    """Keeps the best score in a small text file."""

    path: Path = field(default_factory=lambda: Path("highscore.txt"))

    def load(self) -> int:
        """Read the stored score; 0 when the file is missing or unreadable."""
        try:
            text = Path(self.path).read_text(encoding="utf-8")
        except OSError:
            log.warning("Failed to load highscore from %s", self.path)
            return 0
        tokens = text.split()
        try:
            return int(tokens[0])
        except (IndexError, ValueError):
            return 0

    def save(self, score: int) -> None:
        """Write the score, replacing what was stored."""
        try:
            Path(self.path).write_text(str(score), encoding="utf-8")
        except OSError:
            log.error("Failed to save highscore to %s", self.path)


def _nothing() -> None:
    return None


class Game:
    """The whole state of a running game, advanced one frame at a time."""

    def __init__(
        self,
        *,
        spaceship_size: Size,
        alien_sizes: Mapping[int, Size],
        mystery_size: Size,
        store: HighScoreStore | None = None,
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        now: float = 0.0,
        rng: random.Random | None = None,
        on_explosion: Callable[[], None] | None = None,
        on_laser: Callable[[], None] | None = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.alien_sizes = dict(alien_sizes)
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self._on_explosion = on_explosion or _nothing
        self._on_laser = on_laser or _nothing

        self.spaceship = Spaceship(screen_width, screen_height, *spaceship_size)
        self.mystery_ship = MysteryShip(screen_width, *mystery_size)
        self.aliens: list[Alien] = []
        self.alien_lasers: list[Laser] = []
        self.obstacles: list[Obstacle] = []
        self.aliens_direction = 1
        self.time_last_alien_fired = 0.0
        self.time_last_spawn = 0.0
        self.mystery_interval = 0
        self.lives = STARTING_LIVES
        self.high_score = 0
        self.is_running = False

        self.level = 1
        self.score = 0
        self._init_game(now)

    # -- public controls -------------------------------------------------

    def handle_input(self, left: bool, right: bool, fire: bool, now: float) -> None:
        """Apply the player's controls for this frame."""
        if not self.is_running:
            return
        if left:
            self.spaceship.move_left()
        elif right:
            self.spaceship.move_right()
        if fire and self.spaceship.fire_laser(now):
            self._on_laser()

    def update(self, now: float, restart_pressed: bool = False) -> None:
        """Advance one frame; after game over, restart when asked to."""
        if not self.is_running:
            if restart_pressed:
                self.restart(now)
            return

        if not self.aliens:
            self._next_level(now)
            return

        if now - self.time_last_spawn > self.mystery_interval:
            self.mystery_ship.spawn(self.rng.randint(0, 1))
            self.time_last_spawn = now
            self.mystery_interval = self.rng.randint(*MYSTERY_INTERVAL_RANGE)

        for laser in self.spaceship.lasers:
            laser.update(self.screen_height)
        self._move_aliens()
        self._alien_shoot(now)
        for laser in self.alien_lasers:
            laser.update(self.screen_height)
        self._delete_inactive_lasers()
        self.mystery_ship.update()
        self._check_collisions()

    def restart(self, now: float) -> None:
        """Start again from level 1 with no score."""
        self.level = 1
        self.score = 0
        self._init_game(now)

    # -- setup ------------------------------------------------------------

    def _init_game(self, now: float) -> None:
        self.is_running = False
        self.spaceship.reset()
        self.alien_lasers.clear()
        self.obstacles = self._create_obstacles()
        self.aliens = create_aliens(self.level, self.alien_sizes)
        self.aliens_direction = 1
        self.time_last_alien_fired = now + FIRST_SHOT_DELAY
        self.time_last_spawn = now
        self.mystery_ship.alive = False
        self.mystery_interval = self.rng.randint(*MYSTERY_INTERVAL_RANGE)
        self.lives = STARTING_LIVES
        self.high_score = self.store.load()
        self.is_running = True

    def _next_level(self, now: float) -> None:
        self.is_running = False
        self.level += 1
        self._init_game(now)

    def _create_obstacles(self) -> list[Obstacle]:
        width = obstacle_width()
        gap = (self.screen_width - width * OBSTACLE_COUNT) // OBSTACLE_COUNT + 0
        gap = (self.screen_width - width * OBSTACLE_COUNT) // (OBSTACLE_COUNT + 1)
        y = self.screen_height - OBSTACLE_BOTTOM_OFFSET
        return [Obstacle((i + 1) * gap + i * width, y) for i in range(OBSTACLE_COUNT)]

    # -- per-frame rules --------------------------------------------------

    def _move_aliens(self) -> None:
        right_limit = self.screen_width - EDGE_MARGIN
        for alien in self.aliens:
            if alien.x + alien.width > right_limit:
                self.aliens_direction = -1
                self._move_down_aliens(ALIEN_DROP)
            if alien.x < EDGE_MARGIN:
                self.aliens_direction = 1
                self._move_down_aliens(ALIEN_DROP)
        for alien in self.aliens:
            alien.update(self.aliens_direction)

    def _move_down_aliens(self, distance: int) -> None:
        for alien in self.aliens:
            alien.y += distance

    def _alien_shoot(self, now: float) -> None:
        while self.aliens and now - self.time_last_alien_fired >= ALIEN_LASER_INTERVAL:
            alien = self.aliens[self.rng.randint(0, len(self.aliens) - 1)]
            self.alien_lasers.append(
                Laser(alien.x + int(alien.width) // 2, alien.y + alien.height, ALIEN_LASER_SPEED)
            )
            self.time_last_alien_fired += ALIEN_LASER_INTERVAL

    def _delete_inactive_lasers(self) -> None:
        self.spaceship.lasers[:] = [laser for laser in self.spaceship.lasers if laser.active]
        self.alien_lasers[:] = [laser for laser in self.alien_lasers if laser.active]

    def _erase_blocks(self, area: Rect) -> bool:
        """Remove every shield block overlapping ``area``; return whether any went."""
        hit = False
        for obstacle in self.obstacles:
            kept = [block for block in obstacle.blocks if not block.rect().collides(area)]
            if len(kept) != len(obstacle.blocks):
                hit = True
                obstacle.blocks = kept
        return hit

    def _check_high_score(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)

    def _game_over(self) -> None:
        self.is_running = False

    def _check_collisions(self) -> None:
        for laser in self.spaceship.lasers:
            survivors = []
            for alien in self.aliens:
                if laser.active and alien.rect().collides(laser.rect()):
                    self._on_explosion()
                    alien.health -= 1
                    destroyed = alien.health <= 0
                    if destroyed:
                        self.score += POINTS[alien.alien_type]
                    self._check_high_score()
                    laser.active = False
                    if destroyed:
                        continue
                survivors.append(alien)
            self.aliens = survivors

            if self._erase_blocks(laser.rect()):
                laser.active = False

            if self.mystery_ship.rect().collides(laser.rect()):
                self.mystery_ship.alive = False
                laser.active = False
                self.score += MYSTERY_POINTS
                self._check_high_score()
                self._on_explosion()

        for laser in self.alien_lasers:
            if laser.rect().collides(self.spaceship.rect()):
                laser.active = False
                self.lives -= 1
                if self.lives == 0:
                    self._game_over()
            if self._erase_blocks(laser.rect()):
                laser.active = False

        for alien in self.aliens:
            self._erase_blocks(alien.rect())
            if alien.rect().collides(self.spaceship.rect()):
                self._game_over()