"""Pan/zoom camera for the full-screen view.

The controller owns the viewport transform (offset + scale) and the
transient drag state. Every mutation clamps ``scale`` to the configured
bounds, so the state is valid after each call no matter the input.

Zoom is anchored at the canvas origin: the transform is
``translate(offset) scale(s)`` and zooming only touches ``s``, so the
point under the cursor drifts as the scale changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..config.settings import ViewportLimits
from .models import Point


@dataclass(frozen=True)
class ViewportState:
    """Snapshot of the viewport transform."""

    offset_x: float = 0.0
    offset_y: float = 0.0
    scale: float = 1.0

    @property
    def transform(self) -> str:
        """SVG transform attribute for the scene group."""
        return (
            f"translate({self.offset_x:g}, {self.offset_y:g}) scale({self.scale:g})"
        )

    def to_screen(self, point: Point) -> Point:
        """Map a scene-space point to screen space."""
        x, y = point
        return (self.offset_x + x * self.scale, self.offset_y + y * self.scale)


class ViewportController:
    """Owns pan offset, zoom scale and drag state for one rendering session."""

    def __init__(self, limits: ViewportLimits | None = None) -> None:
        self.limits = limits or ViewportLimits()
        self.offset_x = 0.0
        self.offset_y = 0.0
        self._set_scale(1.0)
        self.is_dragging = False
        self.last_pointer_pos: Point = (0.0, 0.0)

    @property
    def state(self) -> ViewportState:
        return ViewportState(self.offset_x, self.offset_y, self.scale)

    def _set_scale(self, scale: float) -> None:
        self.scale = self.limits.clamp(scale)

    # ── Wheel / buttons ─────────────────────────────────────────────────

    def on_wheel(self, delta_y: float) -> bool:
        """Zoom by wheel delta (positive delta zooms out).

        Returns:
            True: the wheel event is consumed and default scrolling suppressed
        """
        self._set_scale(self.scale - delta_y * self.limits.wheel_sensitivity)
        logger.debug(f"Wheel zoom: delta_y={delta_y:g} → scale={self.scale:.3f}")
        return True

    def zoom_in(self) -> None:
        self._set_scale(self.scale + self.limits.zoom_step)

    def zoom_out(self) -> None:
        self._set_scale(self.scale - self.limits.zoom_step)

    def reset_view(self) -> None:
        self.offset_x = 0.0
        self.offset_y = 0.0
        self._set_scale(1.0)

    # ── Pointer / drag ──────────────────────────────────────────────────

    def on_pointer_down(self, pos: Point) -> None:
        self.is_dragging = True
        self.last_pointer_pos = pos

    def on_pointer_move(self, pos: Point) -> None:
        """Pan by the pointer delta while dragging; no-op otherwise."""
        if not self.is_dragging:
            return
        last_x, last_y = self.last_pointer_pos
        self.offset_x += pos[0] - last_x
        self.offset_y += pos[1] - last_y
        self.last_pointer_pos = pos

    def on_pointer_up(self) -> None:
        self.is_dragging = False

    def on_pointer_leave_canvas(self) -> None:
        self.is_dragging = False
