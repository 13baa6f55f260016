"""Input events consumed by a rendering session.

Events mirror what the UI layer receives (wheel, pointer, node hover and the
zoom/reset buttons). A list of them, serialized as JSON, forms an event
script that can be replayed against a session.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .exceptions import EventScriptError
from .models import Point


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)


class _PointerEvent(_Event):
    x: float
    y: float

    @property
    def pos(self) -> Point:
        return (self.x, self.y)


class WheelEvent(_Event):
    kind: Literal["wheel"] = "wheel"
    delta_y: float


class PointerDown(_PointerEvent):
    kind: Literal["pointer_down"] = "pointer_down"


class PointerMove(_PointerEvent):
    kind: Literal["pointer_move"] = "pointer_move"


class PointerUp(_Event):
    kind: Literal["pointer_up"] = "pointer_up"


class PointerLeave(_Event):
    kind: Literal["pointer_leave"] = "pointer_leave"


class NodeEnter(_Event):
    kind: Literal["node_enter"] = "node_enter"
    node_id: str


class NodeLeave(_Event):
    kind: Literal["node_leave"] = "node_leave"
    node_id: str


class ZoomIn(_Event):
    kind: Literal["zoom_in"] = "zoom_in"


class ZoomOut(_Event):
    kind: Literal["zoom_out"] = "zoom_out"


class ResetView(_Event):
    kind: Literal["reset_view"] = "reset_view"


InputEvent = Annotated[
    WheelEvent
    | PointerDown
    | PointerMove
    | PointerUp
    | PointerLeave
    | NodeEnter
    | NodeLeave
    | ZoomIn
    | ZoomOut
    | ResetView,
    Field(discriminator="kind"),
]

VIEWPORT_EVENTS = (
    WheelEvent,
    PointerDown,
    PointerMove,
    PointerUp,
    PointerLeave,
    ZoomIn,
    ZoomOut,
    ResetView,
)

_script_adapter = TypeAdapter(list[InputEvent])


def parse_events(data: Any) -> list[InputEvent]:
    """Validate a decoded event script.

    Raises:
        EventScriptError: If any entry is not a known event
    """
    try:
        return _script_adapter.validate_python(data)
    except ValidationError as e:
        raise EventScriptError(
            f"Invalid event script: {e.error_count()} error(s)",
            {"errors": e.errors(include_url=False)},
        ) from e


def load_events(path: Path) -> list[InputEvent]:
    """Load an event script from a JSON file."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise EventScriptError(f"Cannot read event script {path}: {e}") from e
    return parse_events(data)
