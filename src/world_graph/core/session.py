"""Rendering session: owns per-view state and turns events into scenes.

A ViewportSession is created for one view of one graph and discarded when
the view goes away. It holds the only mutable state of the engine (hover,
and for interactive modes the viewport); nothing is shared between
sessions. Every ``dispatch`` applies one event synchronously and returns
the freshly rendered scene.

Usage::

    with ViewportSession(graph, "full-screen") as session:
        session.dispatch(NodeEnter(node_id="a"))
        scene = session.dispatch(WheelEvent(delta_y=-200))
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ..config.settings import PresentationConfig, PresentationMode, get_presentation
from .events import (
    VIEWPORT_EVENTS,
    InputEvent,
    NodeEnter,
    NodeLeave,
    PointerDown,
    PointerLeave,
    PointerMove,
    PointerUp,
    ResetView,
    WheelEvent,
    ZoomIn,
    ZoomOut,
)
from .exceptions import SessionClosedError
from .interaction import InteractionState
from .layout import LayoutCache
from .models import Graph, PositionedNode
from .render import render_scene
from .scene import Scene
from .viewport import ViewportController


class ViewportSession:
    """Interactive rendering session for a single graph view."""

    def __init__(
        self,
        graph: Graph,
        config: PresentationConfig | PresentationMode | str = PresentationMode.COMPACT,
    ) -> None:
        if not isinstance(config, PresentationConfig):
            config = get_presentation(config)
        self.config = config
        self.graph = graph
        self.layout = LayoutCache(config)
        self.interaction = InteractionState()
        self.viewport: ViewportController | None = (
            ViewportController(config.viewport) if config.interactive else None
        )
        self._closed = False
        logger.debug(
            f"Session opened: mode={config.mode}, nodes={len(graph.nodes)}, "
            f"edges={len(graph.edges)}"
        )

    # ── Lifecycle ───────────────────────────────────────────────────────

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the session and discard its state."""
        if self._closed:
            return
        self.interaction.clear()
        self.layout.clear()
        self.viewport = None
        self._closed = True
        logger.debug(f"Session closed: mode={self.config.mode}")

    def __enter__(self) -> ViewportSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError(
                "Rendering session is closed", {"mode": str(self.config.mode)}
            )

    # ── Graph ───────────────────────────────────────────────────────────

    @property
    def positioned(self) -> list[PositionedNode]:
        """Positioned nodes for the current graph (memoized on identity)."""
        self._ensure_open()
        return self.layout.get(self.graph)

    def set_graph(self, graph: Graph) -> Scene:
        """Switch to a new graph reference and re-render.

        A hover on a node the new graph no longer has is cleared.
        """
        self._ensure_open()
        self.graph = graph
        self.interaction.prune(self.layout.node_ids(graph))
        return self.render()

    # ── Events ──────────────────────────────────────────────────────────

    def dispatch(self, event: InputEvent) -> Scene:
        """Apply one input event and return the re-rendered scene."""
        self._ensure_open()
        self._apply(event)
        return self.render()

    def replay(self, events: Iterable[InputEvent]) -> Scene:
        """Apply a sequence of events, rendering once at the end."""
        self._ensure_open()
        count = 0
        for event in events:
            self._apply(event)
            count += 1
        logger.debug(f"Replayed {count} event(s)")
        return self.render()

    def _apply(self, event: InputEvent) -> None:
        if isinstance(event, VIEWPORT_EVENTS):
            self._apply_viewport(event)
        elif isinstance(event, NodeEnter):
            if event.node_id in self.layout.node_ids(self.graph):
                self.interaction.on_node_enter(event.node_id)
            else:
                logger.debug(f"Ignoring hover on unknown node {event.node_id!r}")
        elif isinstance(event, NodeLeave):
            self.interaction.on_node_leave(event.node_id)

    def _apply_viewport(self, event: InputEvent) -> None:
        viewport = self.viewport
        if viewport is None:
            logger.debug(
                f"Ignoring {event.kind} event: {self.config.mode} view has no viewport"
            )
            return

        match event:
            case WheelEvent():
                viewport.on_wheel(event.delta_y)
            case PointerDown():
                viewport.on_pointer_down(event.pos)
            case PointerMove():
                viewport.on_pointer_move(event.pos)
            case PointerUp():
                viewport.on_pointer_up()
            case PointerLeave():
                viewport.on_pointer_leave_canvas()
            case ZoomIn():
                viewport.zoom_in()
            case ZoomOut():
                viewport.zoom_out()
            case ResetView():
                viewport.reset_view()

    # ── Rendering ───────────────────────────────────────────────────────

    def render(self) -> Scene:
        """Render the current state. Idempotent for unchanged state."""
        self._ensure_open()
        return render_scene(
            self.positioned,
            self.graph.edges,
            self.config,
            self.interaction,
            self.viewport.state if self.viewport is not None else None,
        )


def render_graph(
    graph: Graph,
    config: PresentationConfig | PresentationMode | str = PresentationMode.COMPACT,
    hover: str | None = None,
    events: Iterable[InputEvent] = (),
) -> Scene:
    """One-shot render: open a session, apply events, render, close.

    Args:
        graph: Graph to render
        config: Presentation config or mode name
        hover: Optional node id to hover before the events are replayed
        events: Input events to replay

    Returns:
        Rendered scene
    """
    with ViewportSession(graph, config) as session:
        if hover is not None:
            session.dispatch(NodeEnter(node_id=hover))
        return session.replay(events)
