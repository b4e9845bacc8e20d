# quadtree32

A small, dependency-free quadtree that stores points and axis-aligned
rectangles under integer IDs, with DBSCAN clustering over the stored items.

The tree has no fixed bounds: the first item sets its bounding box, and an
item that does not fit causes the box to grow to the union of the two and the
whole tree to be rebuilt. Leaves hold up to four entries
(`MAX_ITEMS_PER_NODE` in `quadtree32.tree`) and split into four quadrants
when a fifth arrives. On removal, an internal node whose quadrants are all
leaves (or empty) holding four entries or fewer in total merges back into a
single leaf.

## Installation

```
pip install quadtree32
```

Python 3.10 or later. No third-party dependencies.

## Usage

```python
from quadtree32.geometry import Point, Rect
from quadtree32.tree import QuadTree

tree = QuadTree()
tree.insert(1, Point(10.0, 15.0))
tree.insert(2, Rect(min_x=50.0, min_y=50.0, max_x=60.0, max_y=60.0))

tree.get_ids_that_overlap(Rect(min_x=5.0, min_y=5.0, max_x=55.0, max_y=55.0))
# -> [1, 2]

tree.get_item_by_id(1)      # Point(x=10.0, y=15.0)
tree.get_item_by_id(99)     # None
tree.bbox()                 # Rect(min_x=10.0, min_y=15.0, max_x=60.0, max_y=60.0)

tree.remove(1, Point(10.0, 15.0))   # True
tree.remove(1, Point(10.0, 15.0))   # False, already gone
```

### `QuadTree`

- `insert(item_id, item)` – store a `Point` or `Rect` under an integer ID.
- `remove(item_id, item)` – remove the entry for `item_id`; `item` is used
  only for its bounds, to find the leaves to search. Returns whether anything
  was removed. When the tree becomes empty its bounding box goes back to
  `None`; otherwise the box never shrinks.
- `get_ids_that_overlap(query_rect)` – sorted, unique IDs of items whose
  bounding boxes touch or overlap the query.
- `get_item_by_id(item_id)` – the stored item, or `None`.
- `get_points_contained_by(query_rect)` – point items inside the query,
  edges included.
- `get_rects_that_overlap(query_rect)` – rectangle items overlapping the
  query.
- `get_all_ids()` – sorted, unique IDs of every stored item.
- `get_all_items()` and `get_all_items_with_ids()` – every entry as held in
  the leaves. A rectangle (or a point on a quadrant edge) that falls into
  several quadrants is stored in each of them and appears once per leaf.
- `bbox()` – the overall bounding box, or `None` for an empty tree.

IDs are not checked for uniqueness; give each item its own ID.

### Geometry

`quadtree32.geometry` holds the item types, both frozen dataclasses:

- `Point(x, y)` with `distance(other)`, `bbox()` (a zero-size `Rect`) and
  `center()` (the point itself).
- `Rect(min_x, min_y, max_x, max_y)` with `width()`, `height()`, `center()`,
  `bbox()`, `contains_point(p)`, `contains_rect(r)`, `overlaps_rect(r)`,
  `union(r)`, `quarter()` (top left, top right, bottom left, bottom right)
  and `Rect.zero()`.

`overlaps_rect` counts touching edges as overlap. `contains_rect` compares the
other rectangle's `max_x` against both this rectangle's `max_x` and its
`max_y`; the tree uses this test to decide when to grow its bounds.

### Clustering

```python
from quadtree32.clustering import get_clusters, get_neighbors
from quadtree32.geometry import Point
from quadtree32.tree import QuadTree

tree = QuadTree()
for item_id, (x, y) in enumerate([(10, 10), (10.5, 10.5), (11, 11), (9.5, 9.5), (50, 50)]):
    tree.insert(item_id, Point(x, y))

get_clusters(tree, 2.0, 3)
# -> [[0, 1, 2, 3]]   (item 4 is noise)

get_neighbors(tree, Point(10.0, 10.0), 2.0)
# -> [0, 1, 2, 3]
```

`get_clusters(tree, eps, min_items_in_cluster)` runs DBSCAN over the centres
of the stored items. An item is a core item when at least
`min_items_in_cluster` items, itself included, have their centres within
`eps` of its centre. Each cluster is a list of IDs, starting with the core
item it grew from; items in no cluster are left out.

`get_neighbors(tree, center, eps)` returns, in ID order, the IDs of items
whose centre lies within `eps` of `center`.

## What it does not do

This is a library only: there is no command-line tool, and trees live in
memory with no way to save or load them.

## Running the tests

```
pip install -e ".[test]"
pytest
```