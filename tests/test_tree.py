import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from quadtree32.geometry import Point, Rect
from quadtree32.tree import MAX_ITEMS_PER_NODE, Internal, Leaf, QuadTree


def test_new_quadtree():
    tree = QuadTree()
    assert tree.bbox() is None
    assert tree.root is None
    assert tree.get_all_ids() == []


def test_insert_single_point():
    tree = QuadTree()
    point = Point(5.0, 5.0)
    tree.insert(1, point)
    assert tree.get_item_by_id(1) == point
    assert len(tree.get_all_items()) == 1
    assert tree.get_all_ids() == [1]
    assert tree.bbox() == Rect(5.0, 5.0, 5.0, 5.0)


def test_insert_causes_subdivision():
    tree = QuadTree()
    expected = []
    for i in range(MAX_ITEMS_PER_NODE + 1):
        expected.append(i)
        tree.insert(i, Point(1.0 + i * 0.01, 1.0 + i * 0.01))
    assert isinstance(tree.root, Internal)
    assert tree.get_all_ids() == expected


def test_insert_item_spanning_center_then_subdivide():
    tree = QuadTree()
    spanning = Rect(min_x=40.0, min_y=40.0, max_x=60.0, max_y=60.0)
    tree.insert(0, spanning)
    for i in range(1, MAX_ITEMS_PER_NODE + 2):
        tree.insert(i, Point(10.0 + i * 0.01, 10.0 + i * 0.01))
    assert tree.get_item_by_id(0) == spanning
    assert len(tree.get_all_ids()) == MAX_ITEMS_PER_NODE + 2
    assert tree.get_rects_that_overlap(spanning) == [spanning]


def test_query_empty_tree():
    tree = QuadTree()
    assert tree.get_ids_that_overlap(Rect(0.0, 0.0, 5.0, 5.0)) == []


def test_query_no_overlap():
    tree = QuadTree()
    tree.insert(1, Point(1.0, 1.0))
    assert tree.get_ids_that_overlap(Rect(5.0, 5.0, 10.0, 10.0)) == []


def test_query_multiple_overlaps():
    tree = QuadTree()
    tree.insert(1, Point(10.0, 10.0))
    tree.insert(2, Rect(min_x=15.0, min_y=15.0, max_x=25.0, max_y=25.0))
    tree.insert(3, Point(50.0, 50.0))
    assert tree.get_ids_that_overlap(Rect(5.0, 5.0, 20.0, 20.0)) == [1, 2]


def test_points_and_rects_queries():
    tree = QuadTree()
    tree.insert(1, Point(10.0, 10.0))
    rect = Rect(min_x=15.0, min_y=15.0, max_x=25.0, max_y=25.0)
    tree.insert(2, rect)
    tree.insert(3, Point(50.0, 50.0))
    query = Rect(5.0, 5.0, 20.0, 20.0)
    assert tree.get_points_contained_by(query) == [Point(10.0, 10.0)]
    assert tree.get_rects_that_overlap(query) == [rect]


def test_remove_single_point_from_leaf_check_empty():
    tree = QuadTree()
    point = Point(1.0, 1.0)
    tree.insert(1, point)
    assert tree.remove(1, point) is True
    assert tree.get_item_by_id(1) is None
    assert tree.get_all_items() == []
    assert tree.root is None or (isinstance(tree.root, Leaf) and tree.root.items == [])


def test_remove_item_causes_merge():
    tree = QuadTree()
    points = [
        Point(1.0, 1.0),
        Point(10.0, 10.0),
        Point(1.0, 10.0),
        Point(10.0, 1.0),
        Point(20.0, 20.0),
    ]
    for i, point in enumerate(points):
        tree.insert(i, point)
    assert isinstance(tree.root, Internal)

    assert tree.remove(0, points[0]) is True
    assert len(tree.get_all_ids()) == MAX_ITEMS_PER_NODE
    assert isinstance(tree.root, Leaf)
    assert tree.get_all_ids() == [1, 2, 3, 4]


def test_remove_from_empty_tree_returns_false():
    tree = QuadTree()
    assert tree.remove(1, Point(0.0, 0.0)) is False


def test_remove_outside_bounds_returns_false():
    tree = QuadTree()
    tree.insert(1, Point(0.0, 0.0))
    tree.insert(2, Point(5.0, 5.0))
    assert tree.remove(1, Point(100.0, 100.0)) is False
    assert tree.get_all_ids() == [1, 2]


def test_remove_unknown_id_returns_false():
    tree = QuadTree()
    tree.insert(1, Point(0.0, 0.0))
    tree.insert(2, Point(5.0, 5.0))
    assert tree.remove(7, Point(0.0, 0.0)) is False
    assert tree.get_all_ids() == [1, 2]


def test_issue2_endless_loop_rects():
    tree = QuadTree()
    item_rect = Rect(min_x=-1.0, min_y=-1.0, max_x=1.0, max_y=1.0)
    tree.insert(0, item_rect)
    assert tree.get_ids_that_overlap(Rect(-1.5, -1.5, 1.5, 1.5)) == [0]


def test_simple_example_query():
    tree = QuadTree()
    tree.insert(
        0,
        Rect(min_x=195.27501, min_y=136.79999, max_x=196.27501, max_y=137.79999),
    )
    query = Rect(
        min_x=194.15001 - 1.0,
        min_y=136.0 - 1.0,
        max_x=195.15001 + 1.0,
        max_y=137.0 + 1.0,
    )
    assert tree.get_ids_that_overlap(query) == [0]


def test_bounds_grow_on_insert():
    tree = QuadTree()
    tree.insert(1, Point(0.0, 0.0))
    tree.insert(2, Point(10.0, 4.0))
    assert tree.bbox() == Rect(min_x=0.0, min_y=0.0, max_x=10.0, max_y=4.0)


def test_containment_rule_keeps_bounds_for_tall_item():
    # The containment test compares the upper x edge with max_y, so a point
    # with a small x but a large y is treated as inside.
    tree = QuadTree()
    tree.insert(1, Point(0.0, 0.0))
    tree.insert(2, Point(10.0, 10.0))
    tree.insert(3, Point(1.0, 20.0))
    assert tree.bbox() == Rect(0.0, 0.0, 10.0, 10.0)
    assert tree.get_item_by_id(3) == Point(1.0, 20.0)


def test_get_all_items_with_ids():
    tree = QuadTree()
    tree.insert(1, Point(1.0, 1.0))
    tree.insert(2, Point(2.0, 2.0))
    assert sorted(tree.get_all_items_with_ids(), key=lambda e: e[0]) == [
        (1, Point(1.0, 1.0)),
        (2, Point(2.0, 2.0)),
    ]


@pytest.mark.parametrize(
    "query, expected",
    [
        (Rect(0.0, 0.0, 2.0, 2.0), [0, 1, 2]),
        (Rect(1.5, 1.5, 3.0, 3.0), [2, 3]),
        (Rect(10.0, 10.0, 20.0, 20.0), []),
    ],
)
def test_query_edges_inclusive(query, expected):
    tree = QuadTree()
    for i in range(4):
        tree.insert(i, Point(float(i), float(i)))
    assert tree.get_ids_that_overlap(query) == expected