"""Tests for graph payload loading."""

from __future__ import annotations

import json

import pytest

from world_graph.core.exceptions import GraphLoadError
from world_graph.core.models import NodeCategory
from world_graph.io.loader import load_graph, parse_graph


class TestParseGraph:
    def test_bare_graph(self):
        graph = parse_graph(
            {
                "nodes": [{"id": "a", "label": "A", "type": "entity"}],
                "edges": [{"from": "a", "to": "a", "label": "self"}],
            }
        )

        assert graph.nodes[0].category == NodeCategory.ENTITY
        assert (graph.edges[0].source, graph.edges[0].target) == ("a", "a")

    def test_analysis_result(self):
        graph = parse_graph(
            {
                "category": "PROBLEM",
                "knowledgeGraph": {"nodes": [{"id": "x", "type": "risk"}], "edges": []},
            }
        )

        assert [n.id for n in graph.nodes] == ["x"]
        assert graph.nodes[0].label == "x"

    @pytest.mark.parametrize(
        "payload", [{"category": "PROBLEM"}, {"knowledgeGraph": None}]
    )
    def test_no_graph(self, payload):
        assert parse_graph(payload) is None

    def test_empty_graph_is_not_none(self):
        graph = parse_graph({"nodes": [], "edges": []})
        assert graph is not None
        assert graph.is_empty

    def test_non_object_payload(self):
        with pytest.raises(GraphLoadError, match="JSON object"):
            parse_graph([1, 2, 3])

    def test_node_without_id(self):
        with pytest.raises(GraphLoadError) as exc_info:
            parse_graph({"nodes": [{"label": "nameless"}]})
        assert exc_info.value.context["errors"]


class TestLoadGraph:
    def test_load_analysis_file(self, graph_file):
        graph = load_graph(graph_file)

        assert [n.id for n in graph.nodes] == ["a", "b", "c"]
        assert len(graph.edges) == 3
        assert graph.edges[2].target == "ghost"

    def test_missing_file(self, tmp_path):
        with pytest.raises(GraphLoadError, match="not found"):
            load_graph(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{nodes:")

        with pytest.raises(GraphLoadError):
            load_graph(path)

    def test_file_without_graph(self, tmp_path):
        path = tmp_path / "result.json"
        path.write_text(json.dumps({"summary": "nothing here"}))

        assert load_graph(path) is None
