"""
Reachability highlighting for a focused task.

Walks dependencies upstream (ancestors) and dependents downstream
(descendants) from the focus. Every traversed edge is marked; a node is only
expanded the first time it is seen in a direction, which is what stops the
walk on cycles and diamonds. Both walks use an explicit stack.
"""

from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

import networkx as nx
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_serializer

from layout.styles import Emphasis
from shared.graph import build_dependency_graph, connection_id
from tasks import Task


class HighlightContext(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    focus_id: Optional[str] = Field(None, alias="focusId")
    related_nodes: FrozenSet[str] = Field(default_factory=frozenset, alias="relatedNodes")
    related_connections: FrozenSet[str] = Field(default_factory=frozenset, alias="relatedConnections")

    @property
    def is_idle(self) -> bool:
        return not self.focus_id

    @field_serializer("related_nodes", "related_connections")
    def _sorted(self, v: FrozenSet[str]) -> List[str]:
        return sorted(v)


IDLE = HighlightContext()


def _walk(G: nx.DiGraph, focus_id: str, upstream: bool) -> Tuple[Set[str], Set[str]]:
    """Return (nodes seen, edge ids) walking one direction from focus_id."""
    seen: Set[str] = {focus_id}
    edges: Set[str] = set()
    stack = [focus_id]
    while stack:
        current = stack.pop()
        neighbours = G.predecessors(current) if upstream else G.successors(current)
        for other in neighbours:
            if upstream:
                edges.add(connection_id(other, current))
            else:
                edges.add(connection_id(current, other))
            if other not in seen:
                seen.add(other)
                stack.append(other)
    return seen, edges


def compute_highlight(
    tasks: Iterable[Task],
    focus_id: Optional[str],
    graph: Optional[nx.DiGraph] = None,
) -> HighlightContext:
    """
    Full upstream + downstream closure of focus_id.
    No focus -> idle context. An unknown focus only relates to itself.
    """
    if not focus_id:
        return IDLE

    G = graph if graph is not None else build_dependency_graph(tasks)
    if focus_id not in G:
        return HighlightContext(focus_id=focus_id, related_nodes=frozenset({focus_id}))

    up_nodes, up_edges = _walk(G, focus_id, upstream=True)
    down_nodes, down_edges = _walk(G, focus_id, upstream=False)
    nodes = up_nodes | down_nodes
    edges = up_edges | down_edges
    logger.debug("Highlight {}: {} node(s), {} edge(s)", focus_id, len(nodes), len(edges))
    return HighlightContext(
        focus_id=focus_id,
        related_nodes=frozenset(nodes),
        related_connections=frozenset(edges),
    )


def node_emphasis(ctx: HighlightContext, node_id: str) -> Emphasis:
    if ctx.is_idle:
        return Emphasis.NORMAL
    if node_id == ctx.focus_id:
        return Emphasis.FOCUSED
    if node_id in ctx.related_nodes:
        return Emphasis.RELATED
    return Emphasis.DIMMED


def connection_emphasis(ctx: HighlightContext, conn_id: str) -> Emphasis:
    if ctx.is_idle:
        return Emphasis.NORMAL
    if conn_id in ctx.related_connections:
        return Emphasis.HIGHLIGHTED
    return Emphasis.DIMMED
