"""The playable window: input, sound and drawing around the game rules."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from spaceinvaders.block import BLOCK_COLOR, BLOCK_SIZE
from spaceinvaders.game import Game, HighScoreStore
from spaceinvaders.laser import LASER_HEIGHT, LASER_WIDTH

GREY = (29, 29, 27)
YELLOW = BLOCK_COLOR
OFFSET = 50
WINDOW_WIDTH = 750
WINDOW_HEIGHT = 700
FPS = 60
AUDIO_BUFFER = 4096


def format_with_leading_zeros(number: int, width: int) -> str:
    """Pad the decimal form of ``number`` with zeros on the left to ``width``."""
    text = str(number)
    missing = width - len(text)
    if missing < 0:
        raise ValueError(f"{number} does not fit in {width} digits")
    return "0" * missing + text


def _draw(screen, game: Game, images: dict, fonts: tuple) -> None:
    big, small = fonts
    screen.fill(GREY)
    pygame.draw.rect(screen, YELLOW, pygame.Rect(10, 10, 780, 780), width=2, border_radius=70)
    pygame.draw.line(screen, YELLOW, (25, 730), (775, 730), 3)

    if game.is_running:
        label = "LEVEL " + format_with_leading_zeros(game.level, 2)
        screen.blit(big.render(label, True, YELLOW), (570, 740))
    else:
        screen.blit(big.render("GAME OVER", True, YELLOW), (570, 740))
        screen.blit(small.render("PRESS ENTER TO RESTART", True, YELLOW), (100, 750))

    for index in range(game.lives):
        screen.blit(images["spaceship"], (50 + 50 * index, 745))

    screen.blit(big.render("SCORE", True, YELLOW), (50, 15))
    screen.blit(big.render(format_with_leading_zeros(game.score, 6), True, YELLOW), (50, 40))
    screen.blit(big.render("HIGH-SCORE", True, YELLOW), (570, 15))
    high = format_with_leading_zeros(game.high_score, 6)
    screen.blit(big.render(high, True, YELLOW), (620, 40))

    ship = game.spaceship
    screen.blit(images["spaceship"], (ship.x, ship.y))
    for laser in ship.lasers + game.alien_lasers:
        if laser.active:
            pygame.draw.rect(screen, YELLOW, pygame.Rect(laser.x, laser.y, LASER_WIDTH, LASER_HEIGHT))
    for obstacle in game.obstacles:
        for block in obstacle.blocks:
            pygame.draw.rect(screen, YELLOW, pygame.Rect(block.x, block.y, BLOCK_SIZE, BLOCK_SIZE))
    for alien in game.aliens:
        screen.blit(images[alien.alien_type], (alien.x, alien.y))
    if game.mystery_ship.alive:
        screen.blit(images["mystery"], (game.mystery_ship.x, game.mystery_ship.y))


def main(argv=None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="spaceinvaders", description="Play Space Invaders.")
    parser.add_argument("--assets", type=Path, default=Path("assets"), help="asset directory")
    parser.add_argument(
        "--highscore", type=Path, default=Path("highscore.txt"), help="high-score file"
    )
    args = parser.parse_args(argv)
    graphics = args.assets / "Graphics"
    sounds = args.assets / "Sounds"

    pygame.mixer.pre_init(buffer=AUDIO_BUFFER)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH + OFFSET, WINDOW_HEIGHT + 2 * OFFSET))
        pygame.display.set_caption("Space Invaders")
        font_path = args.assets / "Font" / "monogram.ttf"
        fonts = (pygame.font.Font(font_path, 34), pygame.font.Font(font_path, 15))

        images = {
            "spaceship": pygame.image.load(graphics / "spaceship.png").convert_alpha(),
            "mystery": pygame.image.load(graphics / "mystery.png").convert_alpha(),
        }
        for alien_type in (1, 2, 3):
            path = graphics / f"alien_{alien_type}.png"
            images[alien_type] = pygame.image.load(path).convert_alpha()

        explosion = pygame.mixer.Sound(sounds / "explosion.ogg")
        laser_sound = pygame.mixer.Sound(sounds / "laser.ogg")
        pygame.mixer.music.load(sounds / "music.ogg")
        pygame.mixer.music.play(-1)

        width, height = screen.get_size()
        game = Game(
            spaceship_size=images["spaceship"].get_size(),
            alien_sizes={t: images[t].get_size() for t in (1, 2, 3)},
            mystery_size=images["mystery"].get_size(),
            store=HighScoreStore(args.highscore),
            screen_width=width,
            screen_height=height,
            now=pygame.time.get_ticks() / 1000,
            on_explosion=explosion.play,
            on_laser=laser_sound.play,
        )

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            keys = pygame.key.get_pressed()
            now = pygame.time.get_ticks() / 1000
            game.handle_input(keys[pygame.K_LEFT], keys[pygame.K_RIGHT], keys[pygame.K_SPACE], now)
            game.update(now, restart_pressed=keys[pygame.K_RETURN])
            _draw(screen, game, images, fonts)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0