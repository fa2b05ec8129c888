"""A quadtree that narrows collision checks to nearby actors."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Iterator, Optional

from asciistorm.bounds import Bounds
from asciistorm.engine import Engine
from asciistorm.renderer import Renderer
from asciistorm.vector2 import Color, Vector2

if TYPE_CHECKING:
    from asciistorm.actor import Actor

MAX_DEPTH = 5
SPLIT_THRESHOLD = 2


class NodeIndex(Enum):
    """Which quadrant a rectangle falls in, or that it straddles or misses them."""

    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3
    STRADDLING = 4
    OUT_OF_AREA = 5


def _actor_bounds(actor: Actor) -> Bounds:
    return Bounds(actor.position.x, actor.position.y, actor.width, 1)


class QuadNode:
    """One region of the tree, holding actors that do not fit a single child."""

    show_actor_names: ClassVar[bool] = False

    def __init__(self, bounds: Bounds, depth: int = 0) -> None:
        self.bounds = bounds
        self.depth = depth
        self.actors: list[Actor] = []
        self.top_left: Optional[QuadNode] = None
        self.top_right: Optional[QuadNode] = None
        self.bottom_left: Optional[QuadNode] = None
        self.bottom_right: Optional[QuadNode] = None

    @property
    def is_divided(self) -> bool:
        return self.top_left is not None

    def _children(self) -> Iterator[QuadNode]:
        for child in (self.top_left, self.top_right, self.bottom_left, self.bottom_right):
            if child is not None:
                yield child

    def _child(self, index: NodeIndex) -> QuadNode:
        child = {
            NodeIndex.TOP_LEFT: self.top_left,
            NodeIndex.TOP_RIGHT: self.top_right,
            NodeIndex.BOTTOM_LEFT: self.bottom_left,
            NodeIndex.BOTTOM_RIGHT: self.bottom_right,
        }[index]
        assert child is not None
        return child

    def insert(self, actor: Optional[Actor]) -> None:
        """Place an actor in the deepest node that wholly contains it."""
        if actor is None:
            return
        if self.is_divided:
            region = self._test_region(_actor_bounds(actor))
            if region is NodeIndex.STRADDLING:
                self.actors.append(actor)
            elif region is not NodeIndex.OUT_OF_AREA:
                self._child(region).insert(actor)
                return
        self.actors.append(actor)

        if len(self.actors) > SPLIT_THRESHOLD and self.depth < MAX_DEPTH and self._subdivide():
            kept = []
            for existing in self.actors:
                region = self._test_region(_actor_bounds(existing))
                if region in (NodeIndex.STRADDLING, NodeIndex.OUT_OF_AREA):
                    kept.append(existing)
                else:
                    self._child(region).insert(existing)
            self.actors = kept

    def query(self, search_range: Bounds) -> list[QuadNode]:
        """This node and every descendant whose quadrant overlaps the range."""
        nodes = [self]
        if not self.is_divided:
            return nodes
        for index in self._get_quads(search_range):
            nodes.extend(self._child(index).query(search_range))
        return nodes

    def clear(self) -> None:
        """Forget the actors held directly by this node."""
        self.actors.clear()

    def total_actor_count(self) -> int:
        """Actors held by this node and all its descendants."""
        return len(self.actors) + sum(child.total_actor_count() for child in self._children())

    def total_node_count(self) -> int:
        """This node plus all its descendants."""
        return 1 + sum(child.total_node_count() for child in self._children())

    def initial_subdivide(self) -> None:
        self._subdivide()

    def debug_draw(self) -> None:
        """Submit this node's outline and, optionally, its actors' names."""
        if self.depth > 1 and self.total_actor_count() == 0:
            return
        x, y = self.bounds.x, self.bounds.y
        w, h = self.bounds.width, self.bounds.height
        engine = Engine.get()
        screen_w, screen_h = engine.width, engine.height
        renderer = Renderer.get()

        active = bool(self.actors)
        color = Color.GREEN if active else Color.DARK_GRAY
        order = 100 if active else 80

        for cur_x in range(x, x + w + 1):
            if not 0 <= cur_x < screen_w:
                continue
            if 0 <= y < screen_h:
                renderer.submit("-", Vector2(cur_x, y), color, order)
            if 0 <= y + h < screen_h:
                renderer.submit("-", Vector2(cur_x, y + h), color, order)

        for cur_y in range(y, y + h + 1):
            if not 0 <= cur_y < screen_h:
                continue
            if 0 <= x < screen_w:
                renderer.submit("|", Vector2(x, cur_y), color, order)
            if 0 <= x + w < screen_w:
                renderer.submit("|", Vector2(x + w, cur_y), color, order)

        if active:
            for corner_x, corner_y in ((x, y), (x + w, y), (x, y + h), (x + w, y + h)):
                renderer.submit("+", Vector2(corner_x, corner_y), Color.WHITE, 81)

        if QuadNode.show_actor_names and self.actors:
            for row, actor in enumerate(self.actors):
                renderer.submit(actor.image, Vector2(x + 1, y + 1 + row), Color.YELLOW, 110)

        for child in self._children():
            child.debug_draw()

    def _subdivide(self) -> bool:
        if self.depth == MAX_DEPTH:
            return False
        if not self.is_divided:
            x, y = self.bounds.x, self.bounds.y
            half_w = self.bounds.width // 2
            half_h = self.bounds.height // 2
            depth = self.depth + 1
            self.top_left = QuadNode(Bounds(x, y, half_w, half_h), depth)
            self.top_right = QuadNode(Bounds(x + half_w, y, half_w, half_h), depth)
            self.bottom_left = QuadNode(Bounds(x, y + half_h, half_w, half_h), depth)
            self.bottom_right = QuadNode(Bounds(x + half_w, y + half_h, half_w, half_h), depth)
        return True

    def _test_region(self, bounds: Bounds) -> NodeIndex:
        quads = self._get_quads(bounds)
        if not quads:
            return NodeIndex.OUT_OF_AREA
        if len(quads) == 1:
            return quads[0]
        return NodeIndex.STRADDLING

    def _get_quads(self, bounds: Bounds) -> list[NodeIndex]:
        own = self.bounds
        center_x = own.x + own.width // 2
        center_y = own.y + own.height // 2

        left = bounds.x < center_x and bounds.max_x >= own.x
        right = bounds.max_x >= center_x and bounds.x < own.max_x
        top = bounds.y < center_y and bounds.max_y >= own.y
        bottom = bounds.max_y >= center_y and bounds.y < own.max_y

        quads = []
        if top and left:
            quads.append(NodeIndex.TOP_LEFT)
        if top and right:
            quads.append(NodeIndex.TOP_RIGHT)
        if bottom and left:
            quads.append(NodeIndex.BOTTOM_LEFT)
        if bottom and right:
            quads.append(NodeIndex.BOTTOM_RIGHT)
        return quads


class QuadTree:
    """A quadtree over a screen region, split once on creation."""

    def __init__(self, bounds: Bounds) -> None:
        self.root = QuadNode(bounds)
        self.root.initial_subdivide()

    def insert(self, actor: Optional[Actor]) -> None:
        if actor is None:
            return
        self.root.insert(actor)

    def query(self, query_actor: Optional[Actor]) -> list[Actor]:
        """Other actors whose one-row bounds overlap the given actor's."""
        if query_actor is None:
            return []
        query_bounds = _actor_bounds(query_actor)
        found = []
        for node in self.root.query(query_bounds):
            for actor in node.actors:
                if actor is query_actor:
                    continue
                if _actor_bounds(actor).intersects(query_bounds):
                    found.append(actor)
        return found

    def total_actor_count(self) -> int:
        return self.root.total_actor_count()

    def total_node_count(self) -> int:
        return self.root.total_node_count()

    def debug_draw(self) -> None:
        self.root.debug_draw()