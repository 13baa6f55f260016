"""Typed exception hierarchy for world-graph.

Hierarchy
---------
WorldGraphError (base)
├── GraphLoadError       – unreadable or invalid graph payloads
├── EventScriptError     – unreadable or invalid event scripts
├── ConfigError          – presentation configuration errors
└── SessionError         – rendering session misuse
    └── SessionClosedError

The layout and render core never raises: dangling edges, unknown categories
and out-of-range zoom are all absorbed. These exceptions only surface at the
package edges (loading, configuration, session lifecycle).
"""

from typing import Any


class WorldGraphError(Exception):
    """Base exception for world-graph."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Input layer ─────────────────────────────────────────────────────────


class GraphLoadError(WorldGraphError):
    """Graph payload could not be read or validated."""

    pass


class EventScriptError(WorldGraphError):
    """Event script could not be read or contains unknown events."""

    pass


# ── Configuration layer ─────────────────────────────────────────────────


class ConfigError(WorldGraphError):
    """Configuration / validation errors."""

    pass


# ── Session layer ───────────────────────────────────────────────────────


class SessionError(WorldGraphError):
    """Rendering session errors."""

    pass


class SessionClosedError(SessionError):
    """Operation attempted on a session that was already closed."""

    pass
