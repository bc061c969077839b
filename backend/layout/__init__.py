"""Layout module - computes the layered project map (levels, geometry, connectors)."""

from typing import Any, Dict, Sequence

from tasks import Task

from .connectors import Connection, CurvePath, build_curve, route_connections
from .constants import DEFAULT_LAYOUT, LayoutConfig
from .geometry import group_by_level, plan_geometry
from .levels import assign_levels, max_relaxation_passes


def compute_map_layout(tasks: Sequence[Task], config: LayoutConfig = DEFAULT_LAYOUT) -> Dict[str, Any]:
    """
    Levels -> geometry -> connectors for coerced tasks.
    Returns {levels, nodes: {id: {x,y,w,h,level}}, order, edges: [Connection], width, height}.
    """
    levels = assign_levels(tasks)
    geometry = plan_geometry(tasks, levels, config)
    edges = route_connections(geometry["nodes"], geometry["order"], tasks, config)
    return {**geometry, "levels": levels, "edges": edges}


__all__ = [
    "Connection",
    "CurvePath",
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "assign_levels",
    "build_curve",
    "compute_map_layout",
    "group_by_level",
    "max_relaxation_passes",
    "plan_geometry",
    "route_connections",
]
