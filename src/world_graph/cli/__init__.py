"""CLI for world-graph."""
