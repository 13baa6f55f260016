"""Tests for graph data models and category parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from world_graph.core.models import Graph, GraphEdge, GraphNode, NodeCategory


class TestNodeCategory:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("entity", NodeCategory.ENTITY),
            ("action", NodeCategory.ACTION),
            ("risk", NodeCategory.RISK),
            ("outcome", NodeCategory.OUTCOME),
            ("stakeholder", NodeCategory.OTHER),
            ("Entity", NodeCategory.OTHER),
            ("", NodeCategory.OTHER),
            (None, NodeCategory.OTHER),
        ],
    )
    def test_parse(self, raw, expected):
        assert NodeCategory.parse(raw) is expected


class TestGraphNode:
    def test_label_defaults_to_id(self):
        node = GraphNode.model_validate({"id": "n1", "type": "entity"})
        assert node.label == "n1"

    def test_other_category_keeps_raw_type(self):
        node = GraphNode(id="n", label="N", type="stakeholder")

        assert node.category is NodeCategory.OTHER
        assert node.type == "stakeholder"

    def test_missing_id_is_rejected(self):
        with pytest.raises(ValidationError):
            GraphNode.model_validate({"label": "orphan", "type": "risk"})

    def test_frozen(self):
        node = GraphNode(id="n", type="risk")
        with pytest.raises(ValidationError):
            node.label = "changed"


class TestGraphEdge:
    def test_wire_aliases(self):
        edge = GraphEdge.model_validate({"from": "a", "to": "b", "label": "x"})

        assert (edge.source, edge.target) == ("a", "b")
        assert edge.model_dump(by_alias=True) == {"from": "a", "to": "b", "label": "x"}

    def test_python_names_accepted(self):
        edge = GraphEdge(source="a", target="b")
        assert edge.label == ""

    def test_touches(self):
        edge = GraphEdge(source="a", target="b")

        assert edge.touches("a")
        assert edge.touches("b")
        assert not edge.touches("c")
        assert not edge.touches(None)


class TestGraph:
    def test_lists_become_tuples(self, scenario_a):
        assert isinstance(scenario_a.nodes, tuple)
        assert isinstance(scenario_a.edges, tuple)

    def test_empty_graph(self):
        graph = Graph()

        assert graph.is_empty
        assert graph.node_ids() == set()

    def test_node_ids(self, scenario_a):
        assert scenario_a.node_ids() == {"a", "b", "c"}
