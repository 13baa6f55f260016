"""Render pipeline: positioned nodes + state → Scene.

``render_scene`` is a pure function of its inputs. It is called after every
input event; calling it twice with the same state yields equal scenes.

Rules applied per frame:
    - Dangling edges (an endpoint without a position) are dropped silently
    - Hover dims every node but the hovered one and every edge not touching it
    - Hovered nodes grow, invert their fill and get a decorative outer ring
    - With scale compensation, strokes and fonts are divided by the zoom
      scale so their on-screen size stays roughly constant
    - LOD: edge labels need scale > lod.edge_labels and a non-dimmed edge,
      node labels need scale > lod.node_labels; otherwise they are omitted
    - The tooltip lives in screen space, outside the viewport transform
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from ..config import defaults
from ..config.settings import PresentationConfig
from .colors import node_color
from .interaction import InteractionState
from .models import GraphEdge, PositionedNode
from .scene import Scene, SceneEdge, SceneLabel, SceneNode, Tooltip
from .viewport import ViewportState


def render_scene(
    positioned: Sequence[PositionedNode],
    edges: Sequence[GraphEdge],
    config: PresentationConfig,
    interaction: InteractionState,
    viewport: ViewportState | None = None,
) -> Scene:
    """Compose a drawable scene.

    Args:
        positioned: Laid-out nodes
        edges: Graph edges (may reference unknown nodes)
        config: Presentation config for the active mode
        interaction: Current hover state
        viewport: Current viewport transform, None for a static camera

    Returns:
        Scene ready for a renderer
    """
    scale = viewport.scale if viewport is not None else 1.0
    divisor = scale if config.scale_compensation else 1.0
    position_map = {pn.id: pn for pn in positioned}

    scene_edges, edge_labels = _render_edges(
        edges, position_map, config, interaction, scale, divisor
    )
    scene_nodes, node_labels = _render_nodes(
        positioned, config, interaction, scale, divisor
    )

    return Scene(
        mode=str(config.mode),
        width=config.canvas.width,
        height=config.canvas.height,
        transform=viewport.transform if viewport is not None else None,
        scale=scale,
        background_grid=config.background_grid,
        nodes=tuple(scene_nodes),
        edges=tuple(scene_edges),
        labels=tuple(edge_labels + node_labels),
        tooltip=_render_tooltip(position_map, config, interaction, viewport),
    )


def _lod_visible(threshold: float | None, scale: float) -> bool:
    return threshold is not None and scale > threshold


def _render_edges(
    edges: Sequence[GraphEdge],
    position_map: dict[str, PositionedNode],
    config: PresentationConfig,
    interaction: InteractionState,
    scale: float,
    divisor: float,
) -> tuple[list[SceneEdge], list[SceneLabel]]:
    style = config.edge
    lod = config.lod
    scene_edges: list[SceneEdge] = []
    labels: list[SceneLabel] = []
    dropped = 0

    for edge in edges:
        start = position_map.get(edge.source)
        end = position_map.get(edge.target)
        if start is None or end is None:
            dropped += 1
            continue

        connected = interaction.touches(edge)
        dimmed = interaction.has_hover and not connected
        width = style.highlight_stroke_width if connected else style.stroke_width

        scene_edges.append(
            SceneEdge(
                source=edge.source,
                target=edge.target,
                label=edge.label,
                x1=start.x,
                y1=start.y,
                x2=end.x,
                y2=end.y,
                stroke_width=width / divisor,
                opacity=style.dim_opacity if dimmed else 1.0,
                highlighted=connected,
                arrow=style.arrows,
            )
        )

        if edge.label and not dimmed and _lod_visible(lod.edge_labels, scale):
            labels.append(
                SceneLabel(
                    kind="edge",
                    owner=f"{edge.source}->{edge.target}",
                    text=edge.label,
                    x=(start.x + end.x) / 2,
                    y=(start.y + end.y) / 2,
                    font_size=lod.edge_label_font / divisor + lod.font_padding,
                    color=(
                        defaults.HIGHLIGHT_EDGE_COLOR
                        if connected
                        else defaults.EDGE_LABEL_COLOR
                    ),
                    dy=-8.0,
                )
            )

    if dropped:
        logger.debug(f"Dropped {dropped} dangling edge(s) of {len(edges)}")
    return scene_edges, labels


def _render_nodes(
    positioned: Sequence[PositionedNode],
    config: PresentationConfig,
    interaction: InteractionState,
    scale: float,
    divisor: float,
) -> tuple[list[SceneNode], list[SceneLabel]]:
    style = config.node
    lod = config.lod
    scene_nodes: list[SceneNode] = []
    labels: list[SceneLabel] = []

    for pn in positioned:
        hovered = interaction.is_hovered(pn.id)
        opacity = style.dim_opacity if interaction.is_dimmed(pn.id) else 1.0

        scene_nodes.append(
            SceneNode(
                node_id=pn.id,
                label=pn.label,
                category=pn.type,
                x=pn.x,
                y=pn.y,
                radius=style.hover_radius if hovered else style.radius,
                fill=defaults.NODE_FILL_HOVER if hovered else defaults.NODE_FILL,
                stroke=node_color(pn.category, style.fallback_color),
                stroke_width=0.0 if hovered else style.stroke_width,
                opacity=opacity,
                hovered=hovered,
                ring_radius=style.ring_radius if hovered else None,
                ring_stroke_width=1.0 / divisor,
                ring_opacity=style.ring_opacity if hovered else 0.0,
                glow=hovered,
            )
        )

        if _lod_visible(lod.node_labels, scale):
            font = lod.node_label_font_hover if hovered else lod.node_label_font
            labels.append(
                SceneLabel(
                    kind="node",
                    owner=pn.id,
                    text=pn.label,
                    x=pn.x,
                    y=pn.y + lod.node_label_offset,
                    font_size=font / divisor + lod.font_padding,
                    color=(
                        defaults.NODE_LABEL_COLOR_HOVER
                        if hovered
                        else defaults.NODE_LABEL_COLOR
                    ),
                    opacity=opacity,
                )
            )

    return scene_nodes, labels


def _truncate(text: str, limit: int | None) -> str:
    if limit is None or len(text) <= limit:
        return text
    return text[: limit - 1] + ".."


def _render_tooltip(
    position_map: dict[str, PositionedNode],
    config: PresentationConfig,
    interaction: InteractionState,
    viewport: ViewportState | None,
) -> Tooltip | None:
    if interaction.hovered_node_id is None:
        return None
    active = position_map.get(interaction.hovered_node_id)
    if active is None:
        return None

    style = config.tooltip
    if style.anchored:
        ax, ay = viewport.to_screen(active.position) if viewport else active.position
        x = ax - style.width / 2
        y = ay + style.offset_y - style.height
    else:
        x, y = style.x, style.y

    return Tooltip(
        node_id=active.id,
        label=_truncate(active.label, style.max_label_chars),
        category=active.type or str(active.category),
        x=x,
        y=y,
        width=style.width,
        height=style.height,
        stroke=node_color(active.category, config.node.fallback_color),
        anchored=style.anchored,
        show_category=style.show_category,
        hint=style.hint,
    )
