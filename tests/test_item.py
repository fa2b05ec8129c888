import pytest

from asciistorm.engine import Engine
from asciistorm.item import Item
from asciistorm.vector2 import Color, Vector2


@pytest.fixture
def engine():
    return Engine()


def test_model_types_are_single_cell_items(engine):
    assert Item.MODEL_COUNT == 5
    for model in Item.MODEL_TYPES:
        item = Item(model, 0, 0, 1.0, Color.GREEN)
        assert item.image == model
        assert item.width == 1


def test_initial_state(engine):
    item = Item("+", 3, 4, 2.0, Color.YELLOW)
    assert item.position == Vector2(3, 4)
    assert item.color == Color.YELLOW
    assert item.image == "+"


def test_falls_by_speed(engine):
    item = Item("+", 3, 4, 2.0, Color.YELLOW)
    item.tick(1.0)
    assert item.position == Vector2(3, 6)
    assert not item.destroy_requested


def test_falling_off_screen_destroys(engine):
    item = Item("%", 7, engine.height - 1, 5.0, Color.GREEN)
    item.tick(1.0)
    assert item.destroy_requested
    assert item.position.y >= engine.height


def test_take_damaged_destroys(engine):
    item = Item("&", 1, 1, 1.0, Color.GREEN)
    item.take_damaged()
    assert item.destroy_requested
    assert not item.is_active