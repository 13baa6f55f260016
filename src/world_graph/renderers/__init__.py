"""Scene renderers for converting a Scene to output formats."""

from .json_renderer import render_json
from .svg_renderer import render_svg

__all__ = ["render_json", "render_svg"]
