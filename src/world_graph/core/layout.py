"""Tiered concentric layout for world graphs.

Nodes are placed on three concentric rings chosen by category:
    - Tier 0: entities (center, or a small ring when there are several)
    - Tier 1: actions (middle ring, phase +0.5 rad)
    - Tier 2: risks, outcomes and everything else (outer ring, phase +1.0 rad)

Design Principles:
    - Deterministic: Same input → same output (no randomness)
    - Edge-independent: Positions depend only on the category partition
    - Parameterized: Compact and full-screen views share this algorithm and
      differ only in the RadiiTable/CanvasSize they pass in
    - Performance: O(n) time complexity
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from loguru import logger

from ..config.defaults import TIER_PHASES
from ..config.settings import CanvasSize, PresentationConfig, RadiiTable
from .models import Graph, GraphNode, NodeCategory, Point, PositionedNode

Tiers = tuple[list[GraphNode], list[GraphNode], list[GraphNode]]

# Tier 2 ordering: risks, then outcomes, then any other category
_TIER2_ORDER = {NodeCategory.RISK: 0, NodeCategory.OUTCOME: 1}


def tier_of(category: NodeCategory) -> int:
    """Placement tier for a category: entity 0, action 1, anything else 2."""
    if category is NodeCategory.ENTITY:
        return 0
    if category is NodeCategory.ACTION:
        return 1
    return 2


def partition_tiers(nodes: Sequence[GraphNode]) -> Tiers:
    """Split nodes into the three placement tiers.

    Every node lands in exactly one tier. Input order is kept within a
    category; tier 2 is ordered risk, outcome, other.

    Args:
        nodes: Graph nodes in input order

    Returns:
        (tier0, tier1, tier2) node lists
    """
    tiers: Tiers = ([], [], [])
    for node in nodes:
        tiers[tier_of(node.category)].append(node)

    # Stable sort: input order is kept within each category
    tiers[2].sort(key=lambda n: _TIER2_ORDER.get(n.category, 2))
    return tiers


def distribute(
    nodes: Sequence[GraphNode],
    center: Point,
    radius: Point,
    phase: float = 0.0,
) -> dict[str, Point]:
    """Distribute nodes evenly around an ellipse.

    Node ``i`` of ``n`` sits at angle ``phase + i * 2π/n - π/2``: the first
    node is at the top (before the phase offset) and the rest follow
    clockwise in screen coordinates.

    Args:
        nodes: Nodes to place
        center: (cx, cy) ellipse center
        radius: (rx, ry) ellipse radii
        phase: Phase offset in radians

    Returns:
        Dictionary mapping node_id -> (x, y) position
    """
    count = len(nodes)
    if count == 0:
        return {}

    cx, cy = center
    rx, ry = radius
    step = 2 * math.pi / count

    positions: dict[str, Point] = {}
    for i, node in enumerate(nodes):
        angle = phase + i * step - math.pi / 2
        positions[node.id] = (cx + rx * math.cos(angle), cy + ry * math.sin(angle))
    return positions


def calculate_tiered_layout(
    nodes: Sequence[GraphNode], canvas: CanvasSize, radii: RadiiTable
) -> dict[str, Point]:
    """Calculate positions for all nodes.

    A lone entity is pinned to the canvas center; otherwise every tier is
    distributed on its own ring. Duplicate ids overwrite earlier entries
    (last write wins).

    Args:
        nodes: Graph nodes
        canvas: Canvas size (its center is the layout center)
        radii: Radius table for the three tiers

    Returns:
        Dictionary mapping node_id -> (x, y) position

    Example:
        >>> nodes = [GraphNode(id="a", type="entity"), GraphNode(id="b", type="action")]
        >>> positions = calculate_tiered_layout(nodes, COMPACT.canvas, COMPACT.radii)
        >>> positions["a"]
        (200.0, 150.0)
    """
    if not nodes:
        logger.debug("No nodes to layout")
        return {}

    center = canvas.center
    tiers = partition_tiers(nodes)
    positions: dict[str, Point] = {}

    for tier, members in enumerate(tiers):
        if tier == 0 and len(members) == 1:
            positions[members[0].id] = center
            continue
        positions.update(
            distribute(members, center, radii.for_tier(tier), TIER_PHASES[tier])
        )

    logger.debug(
        f"Tiered layout: {len(positions)} positions, "
        f"tiers={[len(t) for t in tiers]}, "
        f"canvas={canvas.width:g}x{canvas.height:g}"
    )
    return positions


def position_nodes(
    nodes: Sequence[GraphNode], canvas: CanvasSize, radii: RadiiTable
) -> list[PositionedNode]:
    """Attach layout positions to nodes, preserving input order.

    Nodes missing from the layout map fall back to the canvas center.
    """
    positions = calculate_tiered_layout(nodes, canvas, radii)
    center = canvas.center
    positioned = []
    for node in nodes:
        x, y = positions.get(node.id, center)
        positioned.append(PositionedNode(node=node, x=x, y=y))
    return positioned


class LayoutCache:
    """Memoizes layout on graph identity.

    The layout is recomputed exactly when a different Graph object is
    passed in; an equal but distinct Graph still triggers a recompute.
    """

    def __init__(self, config: PresentationConfig) -> None:
        self.config = config
        self._graph: Graph | None = None
        self._positioned: list[PositionedNode] = []
        self._node_ids: frozenset[str] = frozenset()
        self.computations = 0

    def get(self, graph: Graph) -> list[PositionedNode]:
        """Return positioned nodes for ``graph``, recomputing on a new reference."""
        if graph is not self._graph:
            self._positioned = position_nodes(
                graph.nodes, self.config.canvas, self.config.radii
            )
            self._node_ids = frozenset(pn.id for pn in self._positioned)
            self._graph = graph
            self.computations += 1
        return self._positioned

    def node_ids(self, graph: Graph) -> frozenset[str]:
        """Ids of the positioned nodes for ``graph`` (shares the memo)."""
        self.get(graph)
        return self._node_ids

    def clear(self) -> None:
        self._graph = None
        self._positioned = []
        self._node_ids = frozenset()
