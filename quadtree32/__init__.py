"""An ID-based quadtree for points and rectangles, with DBSCAN clustering."""

__version__ = "0.5.0"
__all__ = ["geometry", "tree", "clustering"]