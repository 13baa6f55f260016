"""world-graph - tiered layout and pan/zoom rendering for entity-relationship graphs."""

__version__ = "0.3.1"
__author__ = "world-graph contributors"

from loguru import logger

from .core.exceptions import WorldGraphError
from .core.models import Graph, GraphEdge, GraphNode, NodeCategory
from .core.session import ViewportSession, render_graph

# Library logging stays quiet unless a caller opts in (the CLI does on --verbose)
logger.disable("world_graph")

__all__ = [
    "Graph",
    "GraphEdge",
    "GraphNode",
    "NodeCategory",
    "ViewportSession",
    "WorldGraphError",
    "__version__",
    "render_graph",
]
