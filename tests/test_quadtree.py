import pytest

from asciistorm.actor import Actor
from asciistorm.bounds import Bounds
from asciistorm.engine import Engine
from asciistorm.quadtree import NodeIndex, QuadNode, QuadTree
from asciistorm.vector2 import Color, Vector2

SCREEN = Bounds(0, 0, 200, 120)


@pytest.fixture
def engine():
    return Engine()


def make_actor(x, y, image="#"):
    return Actor(image, Vector2(x, y))


def test_new_tree_is_split_once():
    tree = QuadTree(SCREEN)
    assert tree.root.is_divided
    assert tree.total_node_count() == 5
    assert tree.total_actor_count() == 0


def test_query_finds_overlapping_actor_only():
    tree = QuadTree(SCREEN)
    near = make_actor(10, 10, "abc")
    far = make_actor(150, 100)
    probe = make_actor(11, 10)
    for actor in (near, far, probe):
        tree.insert(actor)
    assert tree.query(probe) == [near]


def test_query_excludes_itself():
    tree = QuadTree(SCREEN)
    alone = make_actor(30, 30)
    tree.insert(alone)
    assert tree.query(alone) == []


def test_query_none_returns_empty():
    tree = QuadTree(SCREEN)
    tree.insert(make_actor(1, 1))
    assert tree.query(None) == []


def test_insert_none_is_ignored():
    tree = QuadTree(SCREEN)
    tree.insert(None)
    assert tree.total_actor_count() == 0


def test_actor_in_one_quadrant_goes_to_child():
    tree = QuadTree(SCREEN)
    actor = make_actor(5, 5)
    tree.insert(actor)
    assert actor in tree.root.top_left.actors
    assert actor not in tree.root.actors


def test_straddling_actor_stays_in_root():
    tree = QuadTree(SCREEN)
    actor = make_actor(99, 59, "<o>")
    tree.insert(actor)
    assert actor in tree.root.actors
    for child in (tree.root.top_left, tree.root.top_right,
                  tree.root.bottom_left, tree.root.bottom_right):
        assert actor not in child.actors


def test_crowded_child_splits_and_keeps_actors():
    tree = QuadTree(SCREEN)
    before = tree.total_node_count()
    actors = [make_actor(5, 5), make_actor(60, 5), make_actor(5, 40)]
    for actor in actors:
        tree.insert(actor)
    assert tree.root.top_left.is_divided
    assert tree.total_node_count() == before + 4
    assert tree.total_actor_count() == len(actors)
    assert tree.root.top_left.actors == []


def test_node_at_max_depth_does_not_split():
    node = QuadNode(Bounds(0, 0, 64, 64), depth=5)
    for x in (1, 40, 50):
        node.insert(make_actor(x, 1))
    assert not node.is_divided
    assert len(node.actors) == 3


def test_undivided_node_query_returns_itself():
    node = QuadNode(Bounds(0, 0, 10, 10))
    assert node.query(Bounds(1, 1)) == [node]


def test_node_query_descends_into_matching_quadrant():
    node = QuadNode(SCREEN)
    node.initial_subdivide()
    nodes = node.query(Bounds(5, 5))
    assert nodes == [node, node.top_left]


def test_node_query_spanning_centre_visits_all_children():
    node = QuadNode(SCREEN)
    node.initial_subdivide()
    nodes = node.query(Bounds(99, 59, 3, 1))
    assert nodes[0] is node
    assert set(map(id, nodes[1:])) == {
        id(node.top_left), id(node.top_right),
        id(node.bottom_left), id(node.bottom_right),
    }


def test_children_split_bounds_in_half():
    node = QuadNode(SCREEN)
    node.initial_subdivide()
    assert node.top_left.bounds == Bounds(0, 0, 100, 60)
    assert node.bottom_right.bounds == Bounds(100, 60, 100, 60)
    assert node.top_left.depth == node.depth + 1


def test_clear_empties_node():
    node = QuadNode(Bounds(0, 0, 10, 10), depth=5)
    node.insert(make_actor(1, 1))
    node.clear()
    assert node.actors == []
    assert node.total_actor_count() == 0


def test_node_index_members_are_distinct():
    looked_up = {NodeIndex(member.value) for member in NodeIndex}
    assert len(looked_up) == 6


def test_debug_draw_empty_tree_uses_dark_gray(engine):
    tree = QuadTree(SCREEN)
    tree.debug_draw()
    engine.renderer.draw()
    cell = engine.renderer.frame.cells[0]
    assert cell.char == "|"
    assert cell.color == Color.DARK_GRAY


def test_debug_draw_active_root_uses_green(engine):
    tree = QuadTree(SCREEN)
    tree.insert(make_actor(99, 59, "<o>"))
    tree.debug_draw()
    engine.renderer.draw()
    assert engine.renderer.frame.cells[0].color == Color.GREEN