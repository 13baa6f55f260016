"""Drawable scene produced by the render pipeline.

A Scene is plain data: renderers turn it into SVG or JSON. Coordinates of
nodes, edges and labels are in scene space and sit under ``transform``;
the tooltip is in screen space and is never transformed.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class SceneNode(_Frozen):
    node_id: str
    label: str
    category: str = Field(..., description="Raw node type, kept for display")
    x: float
    y: float
    radius: float
    fill: str
    stroke: str
    stroke_width: float
    opacity: float = 1.0
    hovered: bool = False
    ring_radius: float | None = Field(
        default=None, description="Decorative outer ring, present only on hover"
    )
    ring_stroke_width: float = 1.0
    ring_opacity: float = 0.0
    glow: bool = False


class SceneEdge(_Frozen):
    source: str
    target: str
    label: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float
    opacity: float = 1.0
    highlighted: bool = False
    arrow: bool = False


class SceneLabel(_Frozen):
    """Text placed in scene space (edge midpoint or below a node)."""

    kind: str = Field(..., description="'edge' or 'node'")
    owner: str = Field(..., description="Node id, or 'source->target' for edges")
    text: str
    x: float
    y: float
    font_size: float
    color: str
    opacity: float = 1.0
    dy: float = 0.0


class Tooltip(_Frozen):
    """Screen-space panel describing the hovered node."""

    node_id: str
    label: str
    category: str
    x: float
    y: float
    width: float
    height: float
    stroke: str
    anchored: bool = False
    show_category: bool = True
    hint: str | None = None


class Scene(_Frozen):
    mode: str
    width: float
    height: float
    transform: str | None = None
    scale: float = 1.0
    background_grid: bool = False
    nodes: tuple[SceneNode, ...] = ()
    edges: tuple[SceneEdge, ...] = ()
    labels: tuple[SceneLabel, ...] = ()
    tooltip: Tooltip | None = None

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def node(self, node_id: str) -> SceneNode | None:
        """Return the last drawn node with this id."""
        for scene_node in reversed(self.nodes):
            if scene_node.node_id == node_id:
                return scene_node
        return None

    def labels_of(self, kind: str) -> list[SceneLabel]:
        return [label for label in self.labels if label.kind == kind]
