"""Tests for the category color policy."""

import pytest

from world_graph.config import defaults
from world_graph.core.colors import node_color
from world_graph.core.models import NodeCategory


@pytest.mark.parametrize(
    ("category", "color"),
    [
        (NodeCategory.ENTITY, "#06b6d4"),
        (NodeCategory.ACTION, "#10b981"),
        (NodeCategory.RISK, "#ef4444"),
        (NodeCategory.OUTCOME, "#f59e0b"),
    ],
)
def test_known_categories(category, color):
    assert node_color(category) == color
    assert node_color(category.value) == color


def test_other_uses_fallback():
    assert node_color(NodeCategory.OTHER) == defaults.COMPACT_FALLBACK_COLOR
    assert node_color("stakeholder") == defaults.COMPACT_FALLBACK_COLOR


def test_custom_fallback():
    assert node_color("mystery", fallback="#123456") == "#123456"
    assert node_color("risk", fallback="#123456") == "#ef4444"
