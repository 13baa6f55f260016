"""Category to color mapping for graph nodes."""

from __future__ import annotations

from ..config import defaults
from .models import NodeCategory


def node_color(
    category: NodeCategory | str,
    fallback: str = defaults.COMPACT_FALLBACK_COLOR,
) -> str:
    """Get the stroke color for a node category.

    Total over all inputs: raw type strings are parsed first, and anything
    outside the four known categories gets the neutral ``fallback``.

    Args:
        category: NodeCategory or raw node type string
        fallback: Color for unrecognized categories

    Returns:
        Hex color code
    """
    if not isinstance(category, NodeCategory):
        category = NodeCategory.parse(category)

    match category:
        case NodeCategory.ENTITY | NodeCategory.ACTION | NodeCategory.RISK | NodeCategory.OUTCOME:
            return defaults.CATEGORY_COLORS[category.value]
        case _:
            return fallback
