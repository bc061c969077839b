"""Shared utilities for layout and highlight."""

from .graph import build_dependency_graph, connection_id, has_cycle

__all__ = ["build_dependency_graph", "connection_id", "has_cycle"]
