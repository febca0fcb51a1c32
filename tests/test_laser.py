from spaceinvaders.block import Rect
from spaceinvaders.laser import BOTTOM_MARGIN, LASER_HEIGHT, LASER_WIDTH, TOP_LIMIT, Laser

SCREEN_HEIGHT = 800


def test_update_moves_by_speed():
    start, speed = 300, -6
    laser = Laser(100, start, speed)
    laser.update(SCREEN_HEIGHT)
    assert laser.y == start + speed
    assert laser.active is True


def test_laser_leaving_top_is_deactivated():
    laser = Laser(0, TOP_LIMIT, -6)
    laser.update(SCREEN_HEIGHT)
    assert laser.active is False


def test_laser_leaving_bottom_is_deactivated():
    laser = Laser(0, SCREEN_HEIGHT - BOTTOM_MARGIN, 6)
    laser.update(SCREEN_HEIGHT)
    assert laser.active is False


def test_laser_at_bottom_limit_stays_active():
    laser = Laser(0, SCREEN_HEIGHT - BOTTOM_MARGIN - 6, 6)
    laser.update(SCREEN_HEIGHT)
    assert laser.active is True


def test_inactive_laser_keeps_moving_but_stays_inactive():
    laser = Laser(0, 400, 6, active=False)
    laser.update(SCREEN_HEIGHT)
    assert laser.y == 406
    assert laser.active is False


def test_rect_has_laser_size():
    laser = Laser(12, 34, 6)
    assert laser.rect() == Rect(12, 34, LASER_WIDTH, LASER_HEIGHT)