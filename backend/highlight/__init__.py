"""Highlight - upstream/downstream closure of the focused task."""

from .reachability import HighlightContext, IDLE, compute_highlight, connection_emphasis, node_emphasis

__all__ = ["HighlightContext", "IDLE", "compute_highlight", "connection_emphasis", "node_emphasis"]
