import pytest

from asciistorm.engine import Engine
from asciistorm.enemy_bullet import EnemyBullet
from asciistorm.vector2 import Color, Vector2


@pytest.fixture
def engine():
    return Engine()


def test_appearance(engine):
    bullet = EnemyBullet(Vector2(10, 10), 0.0)
    assert bullet.image == "*"
    assert bullet.color == Color.RED
    assert bullet.position == Vector2(10, 10)


def test_moves_right_at_angle_zero(engine):
    bullet = EnemyBullet(Vector2(10, 10), 0.0, 10.0)
    bullet.tick(1.0)
    assert bullet.position == Vector2(20, 10)
    assert not bullet.destroy_requested


def test_moves_down_at_ninety_degrees(engine):
    bullet = EnemyBullet(Vector2(10, 10), 90.0, 10.0)
    bullet.tick(1.0)
    assert bullet.position == Vector2(10, 20)


def test_default_speed(engine):
    bullet = EnemyBullet(Vector2(0, 0), 0.0)
    bullet.tick(0.5)
    assert bullet.position == Vector2(30, 0)


def test_half_rounds_away_from_zero(engine):
    bullet = EnemyBullet(Vector2(10, 10), 0.0, 1.0)
    bullet.tick(0.5)
    assert bullet.position.x == 11


def test_leaving_screen_destroys_without_moving(engine):
    bullet = EnemyBullet(Vector2(5, 5), 180.0, 60.0)
    bullet.tick(1.0)
    assert bullet.destroy_requested
    assert bullet.position == Vector2(5, 5)


def test_bottom_edge_destroys(engine):
    bullet = EnemyBullet(Vector2(50, engine.height - 1), 90.0, 10.0)
    bullet.tick(1.0)
    assert bullet.destroy_requested