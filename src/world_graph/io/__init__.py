"""Graph input for world-graph."""

from .loader import load_graph, parse_graph

__all__ = ["load_graph", "parse_graph"]
