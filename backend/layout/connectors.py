"""
Connector routing between positioned tasks.

Each known dependency becomes one S-shaped cubic curve from the dependency's
right-center to the dependent's left-center. Control points sit half an X gap
out from each anchor, keeping the curve clear of neighbouring columns.
"""

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from shared.graph import connection_id
from tasks import Task, index_tasks, is_dependency_blocking

from .constants import DEFAULT_LAYOUT, LayoutConfig
from .styles import ConnectorStyle, Emphasis, connector_style

Point = Tuple[float, float]


class CurvePath(BaseModel):
    """Cubic Bezier: start, two control points, end."""
    model_config = ConfigDict(frozen=True)
    start: Point
    c1: Point
    c2: Point
    end: Point

    @property
    def midpoint(self) -> Point:
        return ((self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2)

    def to_svg(self) -> str:
        """SVG path data, e.g. 'M 380 200 C 430 200, 430 360, 480 360'."""
        sx, sy = _fmt(self.start[0]), _fmt(self.start[1])
        ex, ey = _fmt(self.end[0]), _fmt(self.end[1])
        return f"M {sx} {sy} C {_fmt(self.c1[0])} {sy}, {_fmt(self.c2[0])} {ey}, {ex} {ey}"


class Connection(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    source_id: str = Field(..., alias="sourceId")
    target_id: str = Field(..., alias="targetId")
    curve: CurvePath
    path: str
    is_blocked: bool = Field(..., alias="isBlocked")
    start_x: float = Field(..., alias="startX")
    start_y: float = Field(..., alias="startY")
    end_x: float = Field(..., alias="endX")
    end_y: float = Field(..., alias="endY")
    mid_x: float = Field(..., alias="midX")
    mid_y: float = Field(..., alias="midY")
    emphasis: Emphasis = Emphasis.NORMAL
    style: ConnectorStyle


def _fmt(v: float) -> str:
    """Drop a trailing .0 so paths read like hand-written SVG."""
    return str(int(v)) if float(v).is_integer() else str(round(v, 2))


def build_curve(parent_pos: Mapping[str, Any], child_pos: Mapping[str, Any], x_gap: float) -> CurvePath:
    """Curve from parent's right-center anchor to child's left-center anchor."""
    sx = parent_pos["x"] + parent_pos["w"]
    sy = parent_pos["y"] + parent_pos["h"] / 2
    ex = child_pos["x"]
    ey = child_pos["y"] + child_pos["h"] / 2
    return CurvePath(
        start=(sx, sy),
        c1=(sx + x_gap / 2, sy),
        c2=(ex - x_gap / 2, ey),
        end=(ex, ey),
    )


def route_connections(
    positions: Mapping[str, Mapping[str, Any]],
    order: Sequence[str],
    tasks: Sequence[Task],
    config: LayoutConfig = DEFAULT_LAYOUT,
) -> List[Connection]:
    """
    One Connection per known dependency edge, children in render order and
    dependencies in declared order. Blocked state is read from the dependency's
    current status; dangling ids and repeated ids are skipped.
    """
    by_id: Dict[str, Task] = index_tasks(tasks)
    connections: List[Connection] = []

    for child_id in order:
        child = by_id.get(child_id)
        if child is None or child_id not in positions:
            continue
        seen = set()
        for dep_id in child.dependencies:
            if dep_id in seen:
                continue
            seen.add(dep_id)
            parent = by_id.get(dep_id)
            if parent is None or dep_id not in positions:
                continue
            curve = build_curve(positions[dep_id], positions[child_id], config.x_gap)
            blocked = is_dependency_blocking(parent)
            mid_x, mid_y = curve.midpoint
            connections.append(Connection(
                id=connection_id(dep_id, child_id),
                source_id=dep_id,
                target_id=child_id,
                curve=curve,
                path=curve.to_svg(),
                is_blocked=blocked,
                start_x=curve.start[0],
                start_y=curve.start[1],
                end_x=curve.end[0],
                end_y=curve.end[1],
                mid_x=mid_x,
                mid_y=mid_y,
                style=connector_style(blocked),
            ))

    logger.debug("Routed {} connection(s)", len(connections))
    return connections
