"""Configuration for world-graph."""

from .settings import (
    COMPACT,
    FULL_SCREEN,
    CanvasSize,
    PresentationConfig,
    PresentationMode,
    RadiiTable,
    ViewportLimits,
    get_presentation,
)

__all__ = [
    "COMPACT",
    "FULL_SCREEN",
    "CanvasSize",
    "PresentationConfig",
    "PresentationMode",
    "RadiiTable",
    "ViewportLimits",
    "get_presentation",
]
