"""JSON renderer for scenes."""

from __future__ import annotations

from pathlib import Path

from ..core.scene import Scene


def render_json(scene: Scene, output_path: Path | None = None) -> str:
    """Render a Scene as formatted JSON.

    Args:
        scene: The Scene to render
        output_path: If provided, write to this file

    Returns:
        JSON string
    """
    json_str = scene.model_dump_json(indent=2)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str, encoding="utf-8")

    return json_str
