"""Graph traversal, shortest paths, spanning trees and a B-tree."""

__version__ = "0.1.0"
__all__ = ["btree", "graph", "weighted", "cli"]