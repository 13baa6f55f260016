"""Core functionality for world-graph."""

from .exceptions import (
    ConfigError,
    EventScriptError,
    GraphLoadError,
    SessionClosedError,
    SessionError,
    WorldGraphError,
)
from .models import Graph, GraphEdge, GraphNode, NodeCategory, PositionedNode

__all__ = [
    # Exceptions
    "ConfigError",
    "EventScriptError",
    "GraphLoadError",
    "SessionClosedError",
    "SessionError",
    "WorldGraphError",
    # Models
    "Graph",
    "GraphEdge",
    "GraphNode",
    "NodeCategory",
    "PositionedNode",
]
