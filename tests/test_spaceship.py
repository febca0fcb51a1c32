from spaceinvaders.block import Rect
from spaceinvaders.laser import LASER_WIDTH
from spaceinvaders.spaceship import BOTTOM_OFFSET, FIRE_INTERVAL, MARGIN, SPEED, Spaceship

SCREEN_W, SCREEN_H = 800, 800
SHIP_W, SHIP_H = 60, 40


def make_ship():
    return Spaceship(SCREEN_W, SCREEN_H, SHIP_W, SHIP_H)


def test_starts_centred_above_bottom():
    ship = make_ship()
    assert ship.x == (SCREEN_W - SHIP_W) // 2
    assert ship.y == SCREEN_H - SHIP_H - BOTTOM_OFFSET
    assert ship.lasers == []


def test_moves_by_speed():
    ship = make_ship()
    start = ship.x
    ship.move_left()
    assert ship.x == start - SPEED
    ship.move_right()
    ship.move_right()
    assert ship.x == start + SPEED


def test_left_movement_is_clamped():
    ship = make_ship()
    for _ in range(SCREEN_W):
        ship.move_left()
    assert ship.x == MARGIN


def test_right_movement_is_clamped():
    ship = make_ship()
    for _ in range(SCREEN_W):
        ship.move_right()
    assert ship.x == SCREEN_W - SHIP_W - MARGIN


def test_cannot_fire_right_at_start():
    ship = make_ship()
    assert ship.fire_laser(FIRE_INTERVAL / 2) is False
    assert ship.lasers == []


def test_fired_laser_is_centred_and_moves_up():
    ship = make_ship()
    assert ship.fire_laser(1.0) is True
    assert len(ship.lasers) == 1
    laser = ship.lasers[0]
    assert laser.x + LASER_WIDTH / 2 == ship.x + SHIP_W / 2
    assert laser.y == ship.y
    assert laser.speed < 0


def test_fire_rate_is_limited():
    ship = make_ship()
    assert ship.fire_laser(1.0) is True
    assert ship.fire_laser(1.0 + FIRE_INTERVAL / 2) is False
    assert ship.fire_laser(1.0 + FIRE_INTERVAL) is True
    assert len(ship.lasers) == 2


def test_reset_recentres_and_clears_lasers():
    ship = make_ship()
    start = (ship.x, ship.y)
    ship.fire_laser(1.0)
    ship.move_left()
    ship.reset()
    assert (ship.x, ship.y) == start
    assert ship.lasers == []


def test_rect_matches_position_and_size():
    ship = make_ship()
    assert ship.rect() == Rect(ship.x, ship.y, SHIP_W, SHIP_H)