import pytest

from asciistorm.background import Background
from asciistorm.enemy import AttackPattern, Enemy
from asciistorm.enemy_bullet import EnemyBullet
from asciistorm.engine import Engine
from asciistorm.input import Key, KeyEvent
from asciistorm.item import Item
from asciistorm.levels import (
    GameLevel,
    MenuOption,
    TitleLevel,
    load_title_lines,
)
from asciistorm.obstacle import Obstacle
from asciistorm.player import Player, WeaponMode
from asciistorm.player_bullet import PlayerBullet
from asciistorm.quadtree import QuadNode
from asciistorm.vector2 import Color, Vector2


@pytest.fixture
def engine():
    return Engine()


def press(engine, key_code):
    engine.input.save_previous_input_states()
    engine.input.process_input([KeyEvent(key_code, True)], engine.width, engine.height)


def release_all(engine, *codes):
    engine.input.process_input([KeyEvent(c, False) for c in codes], engine.width, engine.height)
    engine.input.save_previous_input_states()


@pytest.fixture
def game(engine):
    level = GameLevel()
    level.process_add_and_destroy_actors()
    return level


def add(level, actor):
    level.add_new_actor(actor)
    level.process_add_and_destroy_actors()
    return actor


def test_load_title_lines_reads_file(tmp_path):
    path = tmp_path / "title.txt"
    path.write_text("first\n\nthird\n")
    assert load_title_lines(path) == ["first", "", "third"]


def test_load_title_lines_missing_file(tmp_path):
    lines = load_title_lines(tmp_path / "none.txt")
    assert lines[0] == "FILE NOT FOUND"
    assert len(lines) == 2


def test_load_title_lines_caps_line_count(tmp_path):
    path = tmp_path / "title.txt"
    path.write_text("".join(f"line {i}\n" for i in range(60)))
    lines = load_title_lines(path)
    assert len(lines) == 40
    assert lines[0] == "line 0"


def test_load_title_lines_wraps_long_lines(tmp_path):
    long_line = "x" * 300
    path = tmp_path / "title.txt"
    path.write_text(long_line + "\n")
    lines = load_title_lines(path)
    assert "".join(lines) == long_line
    assert all(len(line) < 256 for line in lines)
    assert len(lines) > 1


def test_title_menu_moves_down(engine, tmp_path):
    level = TitleLevel(tmp_path / "none.txt")
    press(engine, Key.DOWN)
    level.tick(0.016)
    assert level.current_selection == MenuOption.CREDIT.value


def test_title_menu_wraps_up(engine, tmp_path):
    level = TitleLevel(tmp_path / "none.txt")
    press(engine, Key.UP)
    level.tick(0.016)
    assert level.current_selection == MenuOption.EXIT.value


def test_title_exit_quits_engine(engine, tmp_path):
    level = TitleLevel(tmp_path / "none.txt")
    level.current_selection = MenuOption.EXIT.value
    press(engine, Key.RETURN)
    level.tick(0.016)
    assert engine.is_quit is True


def test_title_game_start_switches_level(engine, tmp_path):
    level = TitleLevel(tmp_path / "none.txt")
    assert engine.next_level is None
    press(engine, Key.SPACE)
    level.tick(0.016)
    assert GameLevel.get() is engine.next_level
    assert engine.next_level.score == 0
    assert engine.next_level.coin == 0


def test_title_credit_toggle(engine, tmp_path):
    level = TitleLevel(tmp_path / "none.txt")
    level.current_selection = MenuOption.CREDIT.value
    press(engine, Key.RETURN)
    level.tick(0.016)
    assert level.show_credit is True
    release_all(engine, Key.RETURN)
    press(engine, Key.ESCAPE)
    level.tick(0.016)
    assert level.show_credit is False


def test_game_level_initial_actors(game):
    backgrounds = [a for a in game.actors if isinstance(a, Background)]
    assert len(backgrounds) == 75
    assert sum(isinstance(a, Player) for a in game.actors) == 1
    assert GameLevel.get() is game


def test_kill_all_enemies_scores(game):
    enemies = [add(game, Enemy(";:^:;", 10, AttackPattern.SINGLE)) for _ in range(3)]
    game.kill_all_enemies()
    assert game.score == 2 * len(enemies)
    assert all(e.destroy_requested for e in enemies)


def test_rebuild_quad_tree_skips_untracked(game):
    add(game, Enemy("zZwZz", 10, AttackPattern.SINGLE))
    add(game, PlayerBullet(Vector2(5, 5), 270.0, 150.0))
    game.rebuild_quad_tree()
    assert game.quad_tree.total_actor_count() == 1


def test_enemy_bullet_kills_player_with_no_score(game):
    player = Player.get()
    bullet = add(game, EnemyBullet(player.position, 0.0))
    game.rebuild_quad_tree()
    game.process_collision_player_and_enemy_bullet()
    assert game.is_player_dead is True
    assert game.score == 0
    assert bullet.destroy_requested
    assert player.destroy_requested
    assert game.player_dead_position == player.position


def test_enemy_bullet_costs_score(game):
    player = Player.get()
    game.score = 25
    add(game, EnemyBullet(player.position, 0.0))
    game.rebuild_quad_tree()
    game.process_collision_player_and_enemy_bullet()
    assert game.score == 20
    assert game.is_player_dead is False
    assert player.current_mode is WeaponMode.SERIES_SHOT


def test_obstacle_hits_player(game):
    player = Player.get()
    game.score = 12
    obstacle = add(game, Obstacle("(-O-)", 0, 1.0, 1))
    obstacle.set_position(player.position)
    game.rebuild_quad_tree()
    game.process_collision_player_and_obstacle()
    assert obstacle.destroy_requested
    assert game.score == 7
    assert player.current_mode is WeaponMode.SINGLE_SHOT


def test_player_bullet_hits_enemy(game):
    enemy = add(game, Enemy("oO@Oo", 30, AttackPattern.RADIAL))
    enemy.set_position(Vector2(20, 30))
    bullet = add(game, PlayerBullet(Vector2(21, 30), 270.0, 150.0))
    game.rebuild_quad_tree()
    game.process_collision_player_bullet_and_enemy()
    assert enemy.destroy_requested
    assert bullet.destroy_requested
    assert game.score == 1


def test_player_bullet_damages_obstacle(game):
    obstacle = add(game, Obstacle("<-=->", 0, 1.0, 1))
    obstacle.set_position(Vector2(40, 20))
    bullet = add(game, PlayerBullet(Vector2(40, 20), 270.0, 150.0))
    game.rebuild_quad_tree()
    game.process_collision_player_bullet_and_obstacle()
    assert obstacle.destroy_requested
    assert bullet.destroy_requested
    assert game.score == 1


def test_player_collects_item(game):
    player = Player.get()
    item = add(game, Item("+", player.position.x, player.position.y, 1.0, Color.YELLOW))
    game.rebuild_quad_tree()
    game.process_collision_player_and_item()
    assert item.destroy_requested
    assert game.coin == 5


def test_bullets_cancel_each_other(game):
    player_bullet = add(game, PlayerBullet(Vector2(10, 10), 270.0, 150.0))
    enemy_bullet = add(game, EnemyBullet(Vector2(10, 10), 90.0))
    game.rebuild_quad_tree()
    game.process_collision_player_bullet_and_enemy_bullet()
    assert player_bullet.destroy_requested
    assert enemy_bullet.destroy_requested


def test_dead_player_returns_to_title_after_delay(engine, game):
    game.is_player_dead = True
    game.tick(1.0)
    assert engine.next_level is None
    game.tick(2.0)
    assert isinstance(engine.next_level, TitleLevel)


def test_quad_tree_debug_toggles(engine, game):
    press(engine, ord("G"))
    game.tick(0.0)
    assert game.show_quad_tree is True
    assert game.quad_tree is not None and game.quad_tree.total_node_count() >= 5
    release_all(engine, ord("G"))
    press(engine, ord("H"))
    game.tick(0.0)
    assert QuadNode.show_actor_names is True
    release_all(engine, ord("H"))
    press(engine, ord("G"))
    game.tick(0.0)
    assert game.show_quad_tree is False
    assert QuadNode.show_actor_names is False


def test_score_text(game):
    game.score = 3
    game.coin = 5
    assert game.score_text.startswith("Score: 3")
    assert game.score_text.endswith("Coin: 5")