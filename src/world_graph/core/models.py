"""Data models for world graphs.

Graph, GraphNode and GraphEdge are the input contract handed over by the
analysis pipeline. They are frozen: the engine reads them and never writes
back. PositionedNode is the derived, engine-owned result of layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

Point = tuple[float, float]


class NodeCategory(StrEnum):
    """Closed category variant for the open ``type`` string of a node."""

    ENTITY = "entity"
    ACTION = "action"
    RISK = "risk"
    OUTCOME = "outcome"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> NodeCategory:
        """Map a raw node type to a category, falling back to OTHER."""
        if not value:
            return cls.OTHER
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class GraphNode(BaseModel):
    """A node of the world graph."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Node identifier, unique within a graph")
    label: str = Field(default="", description="Display label (defaults to id)")
    type: str = Field(
        default="",
        description="Raw category tag: entity, action, risk, outcome or anything else",
    )

    @model_validator(mode="before")
    @classmethod
    def _default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label") and data.get("id"):
            data = {**data, "label": str(data["id"])}
        return data

    @property
    def category(self) -> NodeCategory:
        return NodeCategory.parse(self.type)


class GraphEdge(BaseModel):
    """A directed, labeled edge. Endpoints may reference unknown nodes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: str = Field(..., alias="from")
    target: str = Field(..., alias="to")
    label: str = ""

    def touches(self, node_id: str | None) -> bool:
        """True if either endpoint is ``node_id``."""
        return node_id is not None and node_id in (self.source, self.target)


class Graph(BaseModel):
    """Immutable node/edge list supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def node_ids(self) -> set[str]:
        return {node.id for node in self.nodes}


@dataclass(frozen=True)
class PositionedNode:
    """A graph node with its computed canvas position."""

    node: GraphNode
    x: float
    y: float

    @property
    def id(self) -> str:
        return self.node.id

    @property
    def label(self) -> str:
        return self.node.label

    @property
    def type(self) -> str:
        return self.node.type

    @property
    def category(self) -> NodeCategory:
        return self.node.category

    @property
    def position(self) -> Point:
        return (self.x, self.y)
