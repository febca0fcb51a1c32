# spaceinvaders

A Space Invaders arcade game built on pygame. Clear waves of aliens
level by level, use the four shields for cover, shoot the mystery ship
for a bonus, and try to beat your high score.

## Installing

```
pip install .
```

## Assets

The package does not include any images, sounds or fonts. The game loads
them from an asset directory, which is `assets` in the current directory
unless you name another one with `--assets`. The game expects this layout:

```
assets/
  Graphics/spaceship.png
  Graphics/mystery.png
  Graphics/alien_1.png
  Graphics/alien_2.png
  Graphics/alien_3.png
  Sounds/music.ogg
  Sounds/explosion.ogg
  Sounds/laser.ogg
  Font/monogram.ttf
```

The game reads the sprite sizes from the images and uses them for
collisions.

## Playing

```
spaceinvaders
spaceinvaders --assets path/to/assets --highscore path/to/highscore.txt
```

| Key         | Action                            |
|-------------|-----------------------------------|
| Left arrow  | Move left                         |
| Right arrow | Move right                        |
| Space       | Fire (one shot every 0.2 seconds) |
| Enter       | Restart after game over           |
| Escape      | Quit                              |

Closing the window also quits the game.

## Rules

- There are 55 aliens in five rows of eleven. Each alien in the bottom two
  rows is worth 100 points. Each alien in the middle two rows is worth 200.
  Each alien in the top row is worth 300.
- Once the wave is cleared the next level begins and your score carries
  over. On level 2 the top row takes two hits. On level 3 the top three
  rows take two hits. From level 4 on, every alien takes two hits.
- The mystery ship crosses the top of the screen every 10 to 20 seconds.
  Hitting it is worth 500 points.
- You have three lives. An alien laser that hits your ship costs one life.
  The game ends when all your lives are gone or an alien reaches your ship.
- Your own shots and the aliens' shots wear down the shields. Aliens that
  pass through a shield also destroy it.

The high score is kept in `highscore.txt` in the directory you start the
game from, or in the file you name with `--highscore`.

## Using the pieces

The game logic in `spaceinvaders.game` does not depend on the display.
`Game` takes the sprite sizes and advances with explicit timestamps and
key states, so you can drive it from your own loop or from tests:

```python
from pathlib import Path

from spaceinvaders.game import Game, HighScoreStore, calculate_health

game = Game(
    spaceship_size=(60, 30),
    alien_sizes={1: (40, 30), 2: (40, 30), 3: (40, 30)},
    mystery_size=(70, 30),
    store=HighScoreStore(Path("scores.txt")),
    now=0.0,
)
game.handle_input(left=False, right=True, fire=True, now=0.5)
game.update(now=0.5)
print(game.score, game.lives, game.level, len(game.aliens))

calculate_health(3, 3)  # 2: a top-row alien needs two hits on level 3
```

`HighScoreStore.load()` returns 0 when the file is missing or does not
start with a number. `Game.restart(now)` starts again from level 1 with
no score.

## Running the tests

```
pip install .[test]
pytest
```