"""
Graph utilities for task dependencies.
Shared by layout (routing) and highlight (reachability).
"""

from typing import Iterable, List

import networkx as nx

from tasks import Task


def connection_id(parent_id: str, child_id: str) -> str:
    """Edge key used by connections and highlight sets, e.g. 'a' + 'b' -> 'a-b'."""
    return f"{parent_id}-{child_id}"


def build_dependency_graph(tasks: Iterable[Task]) -> nx.DiGraph:
    """
    Build dependency graph from tasks: edge dep -> task for each known dependency.
    Dangling ids are dropped; self-references stay as self-loops.
    """
    task_list: List[Task] = list(tasks or [])
    ids = {t.id for t in task_list}
    G = nx.DiGraph()
    for t in task_list:
        G.add_node(t.id)
    for t in task_list:
        for dep in t.dependencies:
            if dep in ids:
                G.add_edge(dep, t.id)
    return G


def has_cycle(G: nx.DiGraph) -> bool:
    """True if the dependency graph contains a cycle (self-loops included)."""
    return not nx.is_directed_acyclic_graph(G)
