"""The title menu and the main game level."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import ClassVar, Optional, Union

from asciistorm.actor import Actor
from asciistorm.background import Background
from asciistorm.bounds import Bounds
from asciistorm.enemy import Enemy
from asciistorm.enemy_bullet import EnemyBullet
from asciistorm.enemy_spawner import EnemySpawner
from asciistorm.engine import Engine
from asciistorm.input import Input, Key
from asciistorm.item import Item
from asciistorm.item_spawner import ItemSpawner
from asciistorm.level import Level
from asciistorm.mouse_tester import MouseTester
from asciistorm.obstacle import Obstacle
from asciistorm.obstacle_spawner import ObstacleSpawner
from asciistorm.player import Player
from asciistorm.player_bullet import PlayerBullet
from asciistorm.quadtree import QuadNode, QuadTree
from asciistorm.renderer import Renderer
from asciistorm.util import random_int, random_range
from asciistorm.vector2 import Color, Vector2

DEFAULT_TITLE_PATH = "../Assets/Title.txt"
MAX_TITLE_LINES = 40
MAX_LINE_WIDTH = 256
TITLE_START_Y = 3
MENU_TEXT = ("GAME START", "CREDIT", "EXIT")

RESTART_DELAY = 3.0
HIT_PENALTY = 5
KILL_ALL_REWARD = 2
ITEM_COIN_REWARD = 5

# (count, minimum speed, maximum speed, colour) for each parallax layer
_BACKGROUND_LAYERS = (
    (50, 2.0, 5.0, Color.RED),
    (20, 8.0, 12.0, Color.GREEN),
    (5, 20.0, 30.0, Color.BLUE),
)

# Actors that never take part in quadtree collision lookups as targets.
_UNTRACKED_TYPES = (
    Background,
    Player,
    PlayerBullet,
    MouseTester,
    EnemySpawner,
    ItemSpawner,
    ObstacleSpawner,
)


class MenuOption(Enum):
    """Entries of the title menu, in display order."""

    GAME_START = 0
    CREDIT = 1
    EXIT = 2
    COUNT = 3


def load_title_lines(path: Union[str, Path] = DEFAULT_TITLE_PATH) -> list[str]:
    """Read the title art; lines longer than 255 characters wrap onto the next line.

    At most 40 lines are kept. A missing file yields an error message instead.
    """
    chunk = MAX_LINE_WIDTH - 1
    lines: list[str] = []
    try:
        with open(path, "r") as file:
            for raw in file:
                while raw and len(lines) < MAX_TITLE_LINES:
                    piece, raw = raw[:chunk], raw[chunk:]
                    if piece.endswith("\n"):
                        piece = piece[:-1]
                    lines.append(piece)
                if len(lines) >= MAX_TITLE_LINES:
                    break
    except FileNotFoundError:
        return ["FILE NOT FOUND", f"CHECK PATH: {path}"]
    return lines


class TitleLevel(Level):
    """The title screen with its menu and credit page."""

    def __init__(self, title_path: Union[str, Path] = DEFAULT_TITLE_PATH) -> None:
        super().__init__()
        self.current_selection = 0
        self.show_credit = False
        self.title_lines = load_title_lines(title_path)

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)
        keys = Input.get()

        if self.show_credit:
            if keys.get_key_down(Key.ESCAPE) or keys.get_key_down(Key.RETURN):
                self.show_credit = False
            return

        count = MenuOption.COUNT.value
        if keys.get_key_down(Key.UP):
            self.current_selection = (self.current_selection - 1) % count
        if keys.get_key_down(Key.DOWN):
            self.current_selection = (self.current_selection + 1) % count

        if keys.get_key_down(Key.RETURN) or keys.get_key_down(Key.SPACE):
            option = MenuOption(self.current_selection)
            if option is MenuOption.GAME_START:
                Engine.get().set_new_level(GameLevel())
            elif option is MenuOption.CREDIT:
                self.show_credit = True
            elif option is MenuOption.EXIT:
                Engine.get().quit_engine()

    def draw(self) -> None:
        super().draw()
        engine = Engine.get()
        renderer = Renderer.get()
        width, height = engine.width, engine.height

        if self.show_credit:
            renderer.submit("=== CREDIT ===", Vector2(width // 2 - 7, height // 2 - 4), Color.WHITE, 0)
            renderer.submit(
                "Developer : Jonn Hyung Kang", Vector2(width // 2 - 12, height // 2), Color.WHITE, 0
            )
            renderer.submit("[ Press Enter ]", Vector2(width // 2 - 8, height // 2 + 4), Color.WHITE, 0)
            return

        max_len = max((len(line) for line in self.title_lines), default=0)
        start_x = max(width // 2 - max_len // 2, 0)
        for row, line in enumerate(self.title_lines):
            if line:
                renderer.submit(line, Vector2(start_x, TITLE_START_Y + row), Color.WHITE, 0)

        menu_start_y = TITLE_START_Y + len(self.title_lines) + 3
        for index, text in enumerate(MENU_TEXT):
            label = f"> {text} <" if index == self.current_selection else f"  {text}  "
            text_x = width // 2 - len(label) // 2
            renderer.submit(label, Vector2(text_x, menu_start_y + index * 2), Color.WHITE, 0)


class GameLevel(Level):
    """The playing field: spawners, the player, collisions and the score."""

    _instance: ClassVar[Optional[GameLevel]] = None

    def __init__(self) -> None:
        super().__init__()
        GameLevel._instance = self
        self.score = 0
        self.coin = 0
        self.restart_delay_time = 0.0
        self.is_player_dead = False
        self.player_dead_position = Vector2()
        self.quad_tree: Optional[QuadTree] = None
        self.show_quad_tree = False

        engine = Engine.get()
        for count, low, high, color in _BACKGROUND_LAYERS:
            for _ in range(count):
                x = random_int(0, engine.width - 1)
                y = random_int(0, engine.height - 1)
                self.add_new_actor(Background(x, y, random_range(low, high), ".", color))

        self.add_new_actor(Player())
        self.add_new_actor(EnemySpawner())
        self.add_new_actor(MouseTester())
        self.add_new_actor(ObstacleSpawner())
        self.add_new_actor(ItemSpawner())

    @classmethod
    def get(cls) -> GameLevel:
        """The most recently created game level."""
        if cls._instance is None:
            raise RuntimeError("GameLevel has not been created")
        return cls._instance

    def tick(self, delta_time: float) -> None:
        super().tick(delta_time)

        if self.is_player_dead:
            self.restart_delay_time += delta_time
            if self.restart_delay_time >= RESTART_DELAY:
                self.return_to_title()
            return

        keys = Input.get()
        if keys.get_key_down(ord("G")):
            self.show_quad_tree = not self.show_quad_tree
            if not self.show_quad_tree:
                QuadNode.show_actor_names = False
        if self.show_quad_tree and keys.get_key_down(ord("H")):
            QuadNode.show_actor_names = not QuadNode.show_actor_names

        self.rebuild_quad_tree()

        self.process_collision_player_bullet_and_enemy()
        self.process_collision_player_and_enemy_bullet()
        self.process_collision_player_bullet_and_obstacle()
        self.process_collision_player_and_obstacle()
        self.process_collision_player_and_item()
        self.process_collision_player_bullet_and_enemy_bullet()

    def draw(self) -> None:
        super().draw()
        renderer = Renderer.get()

        if self.show_quad_tree and self.quad_tree is not None:
            self.quad_tree.debug_draw()
            renderer.submit("QUADTREE DEBUG : ON", Vector2(1, 2), Color.GREEN, 200)
            renderer.submit("ACTOR INFO : SHOW", Vector2(1, 3), Color.GREEN, 200)

        if self.is_player_dead:
            engine = Engine.get()
            x = engine.width // 2 - 5
            y = engine.height // 2
            renderer.submit("!GAME OVER!", Vector2(x, y), Color.WHITE, 0)
            renderer.submit("Wait 3 Seconds...", Vector2(x - 2, y + 2), Color.WHITE, 0)

        self.show_score()

    def return_to_title(self) -> None:
        """Ask the engine to switch back to the title screen."""
        Engine.get().set_new_level(TitleLevel())

    def kill_all_enemies(self) -> None:
        """Destroy every enemy, enemy bullet and obstacle, scoring for each."""
        for actor in self.actors:
            if isinstance(actor, (Enemy, EnemyBullet, Obstacle)):
                actor.destroy()
                self.score += KILL_ALL_REWARD

    def rebuild_quad_tree(self) -> None:
        """Build a fresh quadtree over the screen from the active actors."""
        engine = Engine.get()
        self.quad_tree = QuadTree(Bounds(0, 0, engine.width, engine.height))
        for actor in self.actors:
            if actor.is_active and not isinstance(actor, _UNTRACKED_TYPES):
                self.quad_tree.insert(actor)

    def _active_of(self, kind: type) -> list[Actor]:
        return [actor for actor in self.actors if isinstance(actor, kind) and actor.is_active]

    def _find_player(self) -> Optional[Player]:
        players = self._active_of(Player)
        return players[0] if players else None  # type: ignore[return-value]

    def _reward_hit(self) -> None:
        self.score += 1
        if not self.is_player_dead:
            Player.get().update_weapon_by_score(self.score)

    def _player_hit(self, player: Player) -> None:
        self.score -= HIT_PENALTY
        if self.score < 0:
            self.score = 0
            self.is_player_dead = True
            self.player_dead_position = player.position
            player.on_damaged()
        else:
            player.update_weapon_by_score(self.score)

    def process_collision_player_bullet_and_enemy(self) -> None:
        if self.quad_tree is None:
            return
        for bullet in self._active_of(PlayerBullet):
            for near in self.quad_tree.query(bullet):
                if isinstance(near, Enemy) and bullet.test_intersect(near):
                    near.on_damaged()
                    bullet.destroy()
                    self._reward_hit()
                    break

    def process_collision_player_and_enemy_bullet(self) -> None:
        if self.quad_tree is None:
            return
        player = self._find_player()
        if player is None:
            return
        for near in self.quad_tree.query(player):
            if isinstance(near, EnemyBullet) and near.test_intersect(player):
                near.destroy()
                self._player_hit(player)
                break

    def process_collision_player_bullet_and_obstacle(self) -> None:
        if self.quad_tree is None:
            return
        for bullet in self._active_of(PlayerBullet):
            for near in self.quad_tree.query(bullet):
                if isinstance(near, Obstacle) and bullet.test_intersect(near):
                    near.take_damaged()
                    bullet.destroy()
                    self._reward_hit()
                    break

    def process_collision_player_and_obstacle(self) -> None:
        if self.quad_tree is None:
            return
        player = self._find_player()
        if player is None:
            return
        for near in self.quad_tree.query(player):
            if isinstance(near, Obstacle) and near.test_intersect(player):
                near.destroy()
                self._player_hit(player)
                break

    def process_collision_player_and_item(self) -> None:
        if self.quad_tree is None:
            return
        player = self._find_player()
        if player is None:
            return
        # Several items may be picked up in the same frame.
        for near in self.quad_tree.query(player):
            if isinstance(near, Item) and player.test_intersect(near):
                near.take_damaged()
                self.coin += ITEM_COIN_REWARD

    def process_collision_player_bullet_and_enemy_bullet(self) -> None:
        if self.quad_tree is None:
            return
        for bullet in self._active_of(PlayerBullet):
            for near in self.quad_tree.query(bullet):
                if isinstance(near, EnemyBullet) and bullet.test_intersect(near):
                    bullet.destroy()
                    near.destroy()
                    break

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}             Coin: {self.coin}"

    def show_score(self) -> None:
        """Submit the score line and, while boosted, the speed boost notice."""
        renderer = Renderer.get()
        renderer.submit(self.score_text, Vector2(1, Engine.get().height - 1), Color.WHITE, 200)
        player = Player.current()
        if not self.is_player_dead and player is not None and player.is_speed_buff_active:
            renderer.submit("!!! SPEED BOOST ACTIVE !!!", Vector2(1, 1), Color.WHITE, 0)