"""
Project Map Module
Builds the dependency map for one project's tasks: positioned nodes, routed
connectors and the highlight closure of the focused task.
"""

from typing import Any, Callable, Dict, Iterable, Optional

from loguru import logger

from highlight import compute_highlight, connection_emphasis, node_emphasis
from layout import DEFAULT_LAYOUT, LayoutConfig, compute_map_layout
from layout.styles import NODE_STYLES, Emphasis, connector_style, node_tone
from shared.graph import build_dependency_graph, has_cycle
from tasks import Task, blocked_task_ids, coerce_tasks
from tasks.models import TaskLike

from .models import GraphNode, ProjectMap

# Field names and aliases computed here; a stored record must not override them
_ENGINE_KEYS = frozenset(
    key
    for name, field in GraphNode.model_fields.items()
    for key in (name, field.alias)
    if key
)


def _record_fields(task: Task) -> Dict[str, Any]:
    """Declared task fields plus extras that do not collide with computed node fields."""
    extras = task.model_extra or {}
    kept = {k: v for k, v in extras.items() if k not in _ENGINE_KEYS}
    return {**kept, **task.model_dump(exclude=set(extras))}


def build_project_map(
    tasks: Optional[Iterable[TaskLike]],
    focus_id: Optional[str] = None,
    config: Optional[LayoutConfig] = None,
) -> ProjectMap:
    """
    One full recompute: levels, geometry, blocked state, connectors, highlight.
    Never raises on dangling ids or cycles; empty input gives an empty map.
    """
    config = config or DEFAULT_LAYOUT
    task_list = coerce_tasks(tasks)
    layout = compute_map_layout(task_list, config)

    G = build_dependency_graph(task_list)
    if has_cycle(G):
        logger.debug("Dependency cycle present among {} tasks; cycle levels are best-effort", len(task_list))

    ctx = compute_highlight(task_list, focus_id, graph=G)
    blocked = blocked_task_ids(task_list)
    by_id = {t.id: t for t in task_list}

    nodes = []
    for tid in layout["order"]:
        task = by_id[tid]
        pos = layout["nodes"][tid]
        is_blocked = tid in blocked
        tone = node_tone(task.status, is_blocked, task.priority)
        nodes.append(GraphNode.model_validate({
            **_record_fields(task),
            "level": pos["level"],
            "x": pos["x"],
            "y": pos["y"],
            "width": pos["w"],
            "height": pos["h"],
            "is_blocked": is_blocked,
            "tone": tone,
            "style": NODE_STYLES[tone],
            "emphasis": node_emphasis(ctx, tid),
        }))

    connections = []
    for conn in layout["edges"]:
        emphasis = connection_emphasis(ctx, conn.id)
        connections.append(conn.model_copy(update={
            "emphasis": emphasis,
            "style": connector_style(conn.is_blocked, emphasis == Emphasis.HIGHLIGHTED),
        }))

    logger.debug("Project map: {} node(s), {} connection(s)", len(nodes), len(connections))
    return ProjectMap(
        nodes=nodes,
        connections=connections,
        highlight=ctx,
        width=layout["width"],
        height=layout["height"],
        task_count=len(task_list),
        tasks=task_list,
    )


def activate_node(
    project_map: ProjectMap,
    task_id: str,
    on_activate: Callable[[Task], None],
) -> Optional[Task]:
    """Hand the original task record of a clicked node to on_activate. Unknown ids are ignored."""
    task = project_map.task(task_id)
    if task is None:
        logger.debug("Activation for unknown task {} ignored", task_id)
        return None
    on_activate(task)
    return task


__all__ = ["GraphNode", "ProjectMap", "activate_node", "build_project_map"]
