"""Density-based clustering (DBSCAN) over the items of a quadtree."""

from __future__ import annotations

from collections import deque
from enum import Enum, auto

from quadtree32.geometry import Point, Rect
from quadtree32.tree import QuadTree


class _Status(Enum):
    UNVISITED = auto()
    VISITED = auto()
    NOISE = auto()


def get_neighbors(tree: QuadTree, center: Point, eps: float) -> list[int]:
    """Ids of items whose centers lie within ``eps`` of ``center``, in id order."""
    query = Rect(
        min_x=center.x - eps,
        min_y=center.y - eps,
        max_x=center.x + eps,
        max_y=center.y + eps,
    )
    neighbors = []
    for item_id in tree.get_ids_that_overlap(query):
        item = tree.get_item_by_id(item_id)
        if item is not None and center.distance(item.center()) <= eps:
            neighbors.append(item_id)
    return neighbors


def _expand_cluster(
    tree: QuadTree,
    core_id: int,
    statuses: dict[int, _Status],
    eps: float,
    min_items: int,
) -> list[int] | None:
    """Grow a cluster from ``core_id``; ``None`` if it is not a core item."""
    core_item = tree.get_item_by_id(core_id)
    if core_item is None:
        statuses[core_id] = _Status.NOISE
        return None

    neighbors = get_neighbors(tree, core_item.center(), eps)
    if len(neighbors) < min_items:
        statuses[core_id] = _Status.NOISE
        return None

    statuses[core_id] = _Status.VISITED
    cluster = [core_id]
    members = {core_id}
    queue = deque(neighbors)

    while queue:
        q_id = queue.popleft()
        previous = statuses.get(q_id, _Status.UNVISITED)
        if previous is _Status.VISITED:
            continue

        statuses[q_id] = _Status.VISITED
        if q_id not in members:
            members.add(q_id)
            cluster.append(q_id)

        if previous is _Status.NOISE:
            # A border item: it joins the cluster but does not extend it.
            continue

        q_item = tree.get_item_by_id(q_id)
        if q_item is None:
            statuses[q_id] = _Status.NOISE
            continue

        q_neighbors = get_neighbors(tree, q_item.center(), eps)
        if len(q_neighbors) >= min_items:
            queue.extend(
                n_id
                for n_id in q_neighbors
                if statuses.get(n_id, _Status.UNVISITED) is not _Status.VISITED
            )
    return cluster


def get_clusters(
    tree: QuadTree, eps: float, min_items_in_cluster: int
) -> list[list[int]]:
    """Run DBSCAN over the tree's items and return the clusters of ids.

    An item is a core item when at least ``min_items_in_cluster`` items
    (itself included) have their centers within ``eps`` of its center.
    Items that belong to no cluster are noise and are left out.
    """
    all_ids = tree.get_all_ids()
    statuses = {item_id: _Status.UNVISITED for item_id in all_ids}
    clusters: list[list[int]] = []
    for item_id in all_ids:
        if statuses.get(item_id) is not _Status.UNVISITED:
            continue
        cluster = _expand_cluster(tree, item_id, statuses, eps, min_items_in_cluster)
        if cluster is not None:
            clusters.append(cluster)
    return clusters