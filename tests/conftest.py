"""Shared fixtures for world-graph tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from world_graph.core.models import Graph


def make_graph(
    nodes: list[tuple[str, str]] | list[dict[str, Any]],
    edges: list[tuple[str, str, str]] | None = None,
) -> Graph:
    """Build a Graph from (id, type) tuples and (from, to, label) tuples."""
    node_data = [
        n if isinstance(n, dict) else {"id": n[0], "label": n[0].upper(), "type": n[1]}
        for n in nodes
    ]
    edge_data = [{"from": s, "to": t, "label": label} for s, t, label in edges or []]
    return Graph.model_validate({"nodes": node_data, "edges": edge_data})


@pytest.fixture
def graph_factory() -> Callable[..., Graph]:
    return make_graph


@pytest.fixture
def scenario_a() -> Graph:
    """Entity → action → risk chain with both edges resolvable."""
    return make_graph(
        [("a", "entity"), ("b", "action"), ("c", "risk")],
        [("a", "b", "leads to"), ("b", "c", "causes")],
    )


@pytest.fixture
def scenario_b() -> Graph:
    """Same nodes as scenario A, single dangling edge."""
    return make_graph(
        [("a", "entity"), ("b", "action"), ("c", "risk")],
        [("a", "zzz", "x")],
    )


@pytest.fixture
def mixed_graph() -> Graph:
    """Several nodes per tier, including unknown categories."""
    return make_graph(
        [
            ("e1", "entity"),
            ("o1", "outcome"),
            ("x1", "stakeholder"),
            ("e2", "entity"),
            ("a1", "action"),
            ("r1", "risk"),
            ("a2", "action"),
            ("r2", "risk"),
            ("a3", "action"),
        ],
        [
            ("e1", "a1", "does"),
            ("a1", "r1", "risks"),
            ("a2", "o1", "yields"),
            ("e2", "x1", "informs"),
        ],
    )


@pytest.fixture
def graph_file(tmp_path: Path) -> Path:
    """Analysis result payload on disk, graph under 'knowledgeGraph'."""
    payload = {
        "category": "PROBLEM",
        "summary": "Test analysis",
        "knowledgeGraph": {
            "nodes": [
                {"id": "a", "label": "Team", "type": "entity"},
                {"id": "b", "label": "Ship feature", "type": "action"},
                {"id": "c", "label": "Burnout", "type": "risk"},
            ],
            "edges": [
                {"from": "a", "to": "b", "label": "leads to"},
                {"from": "b", "to": "c", "label": "causes"},
                {"from": "c", "to": "ghost", "label": "dangles"},
            ],
        },
    }
    path = tmp_path / "analysis.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
