"""
Geometry for the layered project map.

Layers become columns (left to right by level). Within a column, tasks are
ordered by title and the stack is centered vertically in a shared canvas
height, so short columns line up with the middle of tall ones.
"""

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from tasks import Task

from .constants import DEFAULT_LAYOUT, LayoutConfig


def _title_sort_key(task: Task) -> Tuple[str, str, str]:
    """Title ascending (case-insensitive first), id as final tie-break."""
    title = task.title or ""
    return (title.casefold(), title, task.id)


def group_by_level(tasks: Sequence[Task], levels: Mapping[str, int]) -> Dict[int, List[Task]]:
    """{level: [tasks sorted by title]}, keys ascending."""
    buckets: Dict[int, List[Task]] = {}
    for t in tasks or []:
        buckets.setdefault(levels.get(t.id, 0), []).append(t)
    return {lvl: sorted(buckets[lvl], key=_title_sort_key) for lvl in sorted(buckets)}


def plan_geometry(
    tasks: Sequence[Task],
    levels: Mapping[str, int],
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> Dict[str, Any]:
    """
    Position every task.

    Returns {nodes: {id: {x, y, w, h, level}}, order: [ids], width, height}.
    `order` is column by column, top to bottom; x/y are top-left corners.
    """
    buckets = group_by_level(tasks, levels)
    w, h = config.node_width, config.node_height
    pad = config.padding

    max_rows = max((len(b) for b in buckets.values()), default=0)
    canvas_h = max(max_rows * config.row_step, config.min_canvas_height)

    nodes: Dict[str, Dict[str, Any]] = {}
    order: List[str] = []
    for level, bucket in buckets.items():
        x = pad + level * config.column_step
        column_h = len(bucket) * config.row_step - config.y_gap
        start_y = (canvas_h - column_h) / 2 + pad
        for idx, task in enumerate(bucket):
            nodes[task.id] = {
                "x": x,
                "y": start_y + idx * config.row_step,
                "w": w,
                "h": h,
                "level": level,
            }
            order.append(task.id)

    max_x = max((p["x"] for p in nodes.values()), default=0)
    max_y = max((p["y"] for p in nodes.values()), default=0)
    width = max_x + w + pad * 2
    height = max_y + h + pad * 2

    return {"nodes": nodes, "order": order, "width": width, "height": height}
