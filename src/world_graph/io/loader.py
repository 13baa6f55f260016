"""Load graphs from analysis payloads.

The analysis service returns a result object whose optional
``knowledgeGraph`` key carries ``{nodes, edges}``. Both that payload and a
bare ``{nodes, edges}`` object are accepted.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from ..core.exceptions import GraphLoadError
from ..core.models import Graph

GRAPH_KEY = "knowledgeGraph"


def parse_graph(payload: Any) -> Graph | None:
    """Build a Graph from a decoded payload.

    Args:
        payload: Decoded JSON (analysis result or bare graph)

    Returns:
        Graph, or None when an analysis result carries no graph

    Raises:
        GraphLoadError: If the payload is not an object or fails validation
    """
    if not isinstance(payload, dict):
        raise GraphLoadError(
            f"Graph payload must be a JSON object, got {type(payload).__name__}"
        )

    if "nodes" in payload or "edges" in payload:
        data = payload
    elif payload.get(GRAPH_KEY) is not None:
        data = payload[GRAPH_KEY]
    else:
        logger.debug("Analysis payload has no knowledge graph")
        return None

    try:
        graph = Graph.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(
            f"Invalid graph data: {e.error_count()} error(s)",
            {"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(f"Loaded graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
    return graph


def load_graph(path: Path) -> Graph | None:
    """Read and parse a graph JSON file.

    Raises:
        GraphLoadError: If the file cannot be read, decoded or validated
    """
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise GraphLoadError(f"Graph file not found: {path}", {"path": str(path)}) from e
    except (OSError, json.JSONDecodeError) as e:
        raise GraphLoadError(f"Cannot read graph file {path}: {e}") from e

    return parse_graph(payload)
