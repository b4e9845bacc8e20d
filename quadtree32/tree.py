"""A dynamic quadtree that stores points and rectangles under integer ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from quadtree32.geometry import Item, Point, Rect

MAX_ITEMS_PER_NODE = 4
"""How many entries a leaf holds before it is split into quadrants."""


@dataclass
class Leaf:
    """A node holding up to ``MAX_ITEMS_PER_NODE`` entries directly."""

    items: list[tuple[int, Item]]
    bbox: Rect


@dataclass
class Internal:
    """A node split into four quadrants; an empty quadrant is ``None``."""

    bbox: Rect
    child_bboxes: tuple[Rect, Rect, Rect, Rect]
    children: list[Optional[Node]] = field(default_factory=lambda: [None] * 4)

    @classmethod
    def split(cls, bbox: Rect) -> Internal:
        """An internal node over ``bbox`` with four empty quadrants."""
        return cls(bbox=bbox, child_bboxes=bbox.quarter())


Node = Union[Leaf, Internal]


def _insert(node: Optional[Node], item_id: int, item: Item, node_bbox: Rect) -> Node:
    match node:
        case None:
            return Leaf(items=[(item_id, item)], bbox=node_bbox)
        case Leaf(items=items, bbox=leaf_bbox):
            if len(items) < MAX_ITEMS_PER_NODE:
                items.append((item_id, item))
                return node
            split: Node = Internal.split(leaf_bbox)
            for old_id, old_item in items:
                split = _insert(split, old_id, old_item, leaf_bbox)
            return _insert(split, item_id, item, leaf_bbox)
        case Internal():
            item_bbox = item.bbox()
            for index, child_bbox in enumerate(node.child_bboxes):
                if child_bbox.overlaps_rect(item_bbox):
                    node.children[index] = _insert(
                        node.children[index], item_id, item, child_bbox
                    )
            return node
    raise TypeError(f"not a quadtree node: {node!r}")


def _remove(
    node: Optional[Node], item_id: int, item_bbox: Rect
) -> tuple[Optional[Node], bool]:
    """Remove ``item_id`` below ``node``; return the replacement node and success."""
    match node:
        case None:
            return None, False
        case Leaf(items=items, bbox=leaf_bbox):
            if not item_bbox.overlaps_rect(leaf_bbox):
                return node, False
            kept = [entry for entry in items if entry[0] != item_id]
            removed = len(kept) < len(items)
            node.items = kept
            return node, removed
        case Internal():
            if not item_bbox.overlaps_rect(node.bbox):
                return node, False
            modified = False
            for index, child_bbox in enumerate(node.child_bboxes):
                if child_bbox.overlaps_rect(item_bbox):
                    child, removed = _remove(node.children[index], item_id, item_bbox)
                    node.children[index] = child
                    modified = modified or removed
            if not modified:
                return node, False
            merged = _try_merge(node)
            if merged is not _NO_MERGE:
                return merged, True
            return node, True
    raise TypeError(f"not a quadtree node: {node!r}")


_NO_MERGE = object()


def _try_merge(node: Internal):
    """Collapse ``node`` into a leaf (or nothing) if its children are small leaves."""
    collected: list[tuple[int, Item]] = []
    for child in node.children:
        match child:
            case None:
                continue
            case Leaf(items=child_items):
                if len(collected) + len(child_items) > MAX_ITEMS_PER_NODE:
                    return _NO_MERGE
                collected.extend(child_items)
            case _:
                return _NO_MERGE
    if not collected:
        return None
    return Leaf(items=collected, bbox=node.bbox)


def _entries(node: Optional[Node]) -> Iterator[tuple[int, Item]]:
    match node:
        case Leaf(items=items):
            yield from items
        case Internal(children=children):
            for child in children:
                yield from _entries(child)


def _query(node: Optional[Node], query_rect: Rect) -> Iterator[int]:
    match node:
        case Leaf(items=items, bbox=leaf_bbox):
            if leaf_bbox.overlaps_rect(query_rect):
                yield from (
                    item_id
                    for item_id, item in items
                    if item.bbox().overlaps_rect(query_rect)
                )
        case Internal():
            if node.bbox.overlaps_rect(query_rect):
                for child, child_bbox in zip(node.children, node.child_bboxes):
                    if child_bbox.overlaps_rect(query_rect):
                        yield from _query(child, query_rect)


class QuadTree:
    """Spatial index of points and rectangles keyed by integer ids.

    The tree's bounds start out empty and grow to cover inserted items;
    leaves split into quadrants once they hold more than ``MAX_ITEMS_PER_NODE``
    entries, and sparse quadrants merge back on removal.
    """

    def __init__(self) -> None:
        self.root: Optional[Node] = None
        self._bbox: Optional[Rect] = None

    def __repr__(self) -> str:
        return f"QuadTree(bbox={self._bbox!r}, root={self.root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuadTree):
            return NotImplemented
        return self._bbox == other._bbox and self.root == other.root

    def bbox(self) -> Optional[Rect]:
        """The overall bounds of the tree, or ``None`` if nothing was inserted."""
        return self._bbox

    def insert(self, item_id: int, item: Item) -> None:
        """Insert ``item`` under ``item_id``, growing the tree's bounds if needed."""
        item_bbox = item.bbox()
        current = self._bbox
        if current is None:
            self._bbox = item_bbox
            self.root = _insert(self.root, item_id, item, item_bbox)
        elif current.contains_rect(item_bbox):
            self.root = _insert(self.root, item_id, item, current)
        else:
            grown = current.union(item_bbox)
            existing = self.get_all_items_with_ids()
            self._bbox = grown
            self.root = None
            for old_id, old_item in existing:
                self.root = _insert(self.root, old_id, old_item, grown)
            self.root = _insert(self.root, item_id, item, grown)

    def remove(self, item_id: int, item: Item) -> bool:
        """Remove the entry for ``item_id``, located by the bounds of ``item``.

        Returns whether anything was removed.
        """
        item_bbox = item.bbox()
        if self._bbox is None or not self._bbox.overlaps_rect(item_bbox):
            return False
        self.root, removed = _remove(self.root, item_id, item_bbox)
        if removed and self.root is None:
            self._bbox = None
        return removed

    def get_ids_that_overlap(self, query_rect: Rect) -> list[int]:
        """Sorted, unique ids of items whose bounds overlap ``query_rect``."""
        return sorted(set(_query(self.root, query_rect)))

    def get_item_by_id(self, item_id: int) -> Optional[Item]:
        """The item stored under ``item_id``, or ``None``."""
        return next(
            (item for found_id, item in _entries(self.root) if found_id == item_id),
            None,
        )

    def get_points_contained_by(self, query_rect: Rect) -> list[Point]:
        """Point items lying inside ``query_rect``."""
        points = []
        for item_id in self.get_ids_that_overlap(query_rect):
            item = self.get_item_by_id(item_id)
            if isinstance(item, Point) and query_rect.contains_point(item):
                points.append(item)
        return points

    def get_rects_that_overlap(self, query_rect: Rect) -> list[Rect]:
        """Rectangle items overlapping ``query_rect``."""
        rects = []
        for item_id in self.get_ids_that_overlap(query_rect):
            item = self.get_item_by_id(item_id)
            if isinstance(item, Rect):
                rects.append(item)
        return rects

    def get_all_items(self) -> list[Item]:
        """Every stored item; one spanning several quadrants appears once per leaf."""
        return [item for _, item in _entries(self.root)]

    def get_all_items_with_ids(self) -> list[tuple[int, Item]]:
        """Every stored ``(id, item)`` entry, as held in the leaves."""
        return list(_entries(self.root))

    def get_all_ids(self) -> list[int]:
        """Sorted, unique ids of all stored items."""
        return sorted({item_id for item_id, _ in _entries(self.root)})