"""Hover state shared by both presentation modes."""

from __future__ import annotations

from collections.abc import Collection

from loguru import logger

from .models import GraphEdge


class InteractionState:
    """Tracks which node, if any, is under the pointer.

    Hover is independent from dragging: the viewport never touches this
    state and this state never interrupts a drag.
    """

    def __init__(self) -> None:
        self.hovered_node_id: str | None = None

    @property
    def has_hover(self) -> bool:
        return self.hovered_node_id is not None

    def on_node_enter(self, node_id: str) -> None:
        self.hovered_node_id = node_id

    def on_node_leave(self, node_id: str) -> None:
        """Clear hover, unless the leave event belongs to another node.

        When the pointer moves directly between two overlapping nodes the
        enter of the second can arrive before the leave of the first; that
        stale leave must not clear the new hover.
        """
        if self.hovered_node_id == node_id:
            self.hovered_node_id = None
        else:
            logger.debug(
                f"Ignoring stale leave for {node_id!r} "
                f"(hovered={self.hovered_node_id!r})"
            )

    def is_hovered(self, node_id: str) -> bool:
        return self.hovered_node_id == node_id

    def is_dimmed(self, node_id: str) -> bool:
        return self.hovered_node_id is not None and self.hovered_node_id != node_id

    def touches(self, edge: GraphEdge) -> bool:
        """True if the edge connects to the hovered node."""
        return edge.touches(self.hovered_node_id)

    def prune(self, known_ids: Collection[str]) -> None:
        """Drop a hover that no longer names a positioned node."""
        if self.hovered_node_id is not None and self.hovered_node_id not in known_ids:
            logger.debug(f"Clearing hover on vanished node {self.hovered_node_id!r}")
            self.hovered_node_id = None

    def clear(self) -> None:
        self.hovered_node_id = None
