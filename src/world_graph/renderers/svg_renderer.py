"""SVG renderer for scenes.

Produces a standalone SVG document. Scene-space elements (grid, edges,
nodes, labels) go inside one transformed group; the tooltip is drawn after
it, at the root, so pan and zoom never move or scale it.
"""

from __future__ import annotations

from html import escape
from pathlib import Path

from ..config import defaults
from ..core.scene import Scene, SceneEdge, SceneLabel, SceneNode, Tooltip

_EDGE_GRADIENT = "url(#edgeGradient)"


def render_svg(scene: Scene, output_path: Path | None = None) -> str:
    """Render a Scene as SVG markup.

    Args:
        scene: The Scene to render
        output_path: If provided, write to this file

    Returns:
        SVG string
    """
    svg = _build_svg(scene)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(svg, encoding="utf-8")

    return svg


def _num(value: float) -> str:
    return f"{value:g}"


def _build_svg(scene: Scene) -> str:
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {_num(scene.width)} {_num(scene.height)}" '
        f'width="{_num(scene.width)}" height="{_num(scene.height)}" '
        f'data-mode="{escape(scene.mode)}">',
        _defs(scene),
    ]

    transform = f' transform="{scene.transform}"' if scene.transform else ""
    parts.append(f'<g class="scene"{transform}>')
    if scene.background_grid:
        parts.append(
            '<rect x="-4000" y="-4000" width="8000" height="8000" fill="url(#grid)"/>'
        )
    parts.extend(_edge(edge) for edge in scene.edges)
    parts.extend(_label(label) for label in scene.labels_of("edge"))
    parts.extend(_node(node) for node in scene.nodes)
    parts.extend(_label(label) for label in scene.labels_of("node"))
    parts.append("</g>")

    if scene.tooltip is not None:
        parts.append(_tooltip(scene.tooltip))

    parts.append("</svg>")
    return "\n".join(parts)


def _defs(scene: Scene) -> str:
    grid = ""
    if scene.background_grid:
        grid = (
            '<pattern id="grid" width="40" height="40" patternUnits="userSpaceOnUse">'
            '<path d="M 40 0 L 0 0 0 40" fill="none" '
            'stroke="rgba(255,255,255,0.03)" stroke-width="1"/></pattern>'
        )
    return f"""<defs>
<marker id="arrowhead" markerWidth="14" markerHeight="10" refX="28" refY="5" orient="auto">
<path d="M0 0 L14 5 L0 10" fill="#64748b" opacity="0.8"/></marker>
<filter id="glow"><feGaussianBlur stdDeviation="3" result="coloredBlur"/>
<feMerge><feMergeNode in="coloredBlur"/><feMergeNode in="SourceGraphic"/></feMerge></filter>
<linearGradient id="edgeGradient" gradientUnits="userSpaceOnUse">
<stop offset="0%" stop-color="#475569" stop-opacity="0.4"/>
<stop offset="100%" stop-color="#94a3b8" stop-opacity="0.8"/></linearGradient>
{grid}</defs>"""


def _edge(edge: SceneEdge) -> str:
    stroke = defaults.HIGHLIGHT_EDGE_COLOR if edge.highlighted else _EDGE_GRADIENT
    marker = ' marker-end="url(#arrowhead)"' if edge.arrow else ""
    return (
        f'<g class="edge" data-source="{escape(edge.source)}" '
        f'data-target="{escape(edge.target)}" opacity="{_num(edge.opacity)}">'
        f'<line x1="{_num(edge.x1)}" y1="{_num(edge.y1)}" '
        f'x2="{_num(edge.x2)}" y2="{_num(edge.y2)}" stroke="{stroke}" '
        f'stroke-width="{_num(edge.stroke_width)}"{marker}/></g>'
    )


def _node(node: SceneNode) -> str:
    ring = ""
    if node.ring_radius is not None:
        ring = (
            f'<circle class="ring" cx="{_num(node.x)}" cy="{_num(node.y)}" '
            f'r="{_num(node.ring_radius)}" fill="none" stroke="{node.stroke}" '
            f'stroke-width="{_num(node.ring_stroke_width)}" '
            f'opacity="{_num(node.ring_opacity)}"/>'
        )
    glow = ' filter="url(#glow)"' if node.glow else ""
    return (
        f'<g class="node" data-node-id="{escape(node.node_id)}" '
        f'data-category="{escape(node.category)}" opacity="{_num(node.opacity)}">'
        f"{ring}"
        f'<circle cx="{_num(node.x)}" cy="{_num(node.y)}" r="{_num(node.radius)}" '
        f'fill="{node.fill}" stroke="{node.stroke}" '
        f'stroke-width="{_num(node.stroke_width)}"{glow}/></g>'
    )


def _label(label: SceneLabel) -> str:
    dy = f' dy="{_num(label.dy)}"' if label.dy else ""
    return (
        f'<text class="{label.kind}-label" x="{_num(label.x)}" y="{_num(label.y)}"{dy} '
        f'fill="{label.color}" font-size="{_num(label.font_size)}" '
        f'opacity="{_num(label.opacity)}" text-anchor="middle" font-weight="bold">'
        f"{escape(label.text)}</text>"
    )


def _tooltip(tooltip: Tooltip) -> str:
    rect = (
        f'<rect width="{_num(tooltip.width)}" height="{_num(tooltip.height)}" '
        f'rx="{4 if tooltip.anchored else 12}" fill="#0f172a" fill-opacity="0.9" '
        f'stroke="{tooltip.stroke}" stroke-width="1"/>'
    )
    if tooltip.anchored:
        lines = [
            f'<text x="{_num(tooltip.width / 2)}" y="{_num(tooltip.height - 11)}" '
            f'text-anchor="middle" fill="white" font-size="9" font-weight="bold">'
            f"{escape(tooltip.label)}</text>"
        ]
    else:
        lines = [
            f'<text x="20" y="35" fill="white" font-size="18" font-weight="bold">'
            f"{escape(tooltip.label)}</text>"
        ]
        if tooltip.show_category:
            lines.append(
                f'<text x="20" y="60" fill="#94a3b8" font-size="12">'
                f"{escape(tooltip.category.upper())}</text>"
            )
        if tooltip.hint:
            lines.append(
                f'<text x="20" y="75" fill="#64748b" font-size="10">'
                f"{escape(tooltip.hint)}</text>"
            )
    return (
        f'<g class="tooltip" data-node-id="{escape(tooltip.node_id)}" '
        f'transform="translate({_num(tooltip.x)}, {_num(tooltip.y)})">'
        f"{rect}{''.join(lines)}</g>"
    )
