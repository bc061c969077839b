"""
Style descriptors for nodes and connectors.

Status, blocked state and priority map onto a small closed set of tones; each
tone has a fixed token set the renderer applies as-is.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from tasks import DONE_STATUS

IN_PROGRESS_STATUS = "In Progress"
HIGH_PRIORITY = "High"


class NodeTone(str, Enum):
    BLOCKED = "blocked"
    DONE = "done"
    ACTIVE = "active"
    TODO_HIGH = "todo_high"
    TODO = "todo"


class Emphasis(str, Enum):
    """How a node or connector is drawn relative to the current focus."""
    NORMAL = "normal"
    FOCUSED = "focused"
    RELATED = "related"
    HIGHLIGHTED = "highlighted"
    DIMMED = "dimmed"


class NodeStyle(BaseModel):
    model_config = ConfigDict(frozen=True)
    bg: str
    border: str
    text: str
    shadow: str
    glow: str = ""


class ConnectorStyle(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    stroke: str
    stroke_width: int = Field(..., alias="strokeWidth")
    dash: Optional[str] = None
    badge: str
    pulse: bool = False


NODE_STYLES: Dict[NodeTone, NodeStyle] = {
    NodeTone.BLOCKED: NodeStyle(
        bg="bg-slate-50 dark:bg-slate-900/50",
        border="border-red-300 dark:border-red-900/50",
        text="text-slate-500",
        shadow="shadow-none",
        glow="ring-1 ring-red-200 dark:ring-red-900/30",
    ),
    NodeTone.DONE: NodeStyle(
        bg="bg-emerald-50 dark:bg-emerald-900/20",
        border="border-emerald-500",
        text="text-emerald-900 dark:text-emerald-100",
        shadow="shadow-sm",
    ),
    NodeTone.ACTIVE: NodeStyle(
        bg="bg-blue-50 dark:bg-blue-900/20",
        border="border-blue-500",
        text="text-blue-900 dark:text-blue-100",
        shadow="shadow-md shadow-blue-100 dark:shadow-blue-900/20",
    ),
    NodeTone.TODO_HIGH: NodeStyle(
        bg="bg-white dark:bg-slate-800",
        border="border-rose-400",
        text="text-slate-900 dark:text-white",
        shadow="shadow-sm",
    ),
    NodeTone.TODO: NodeStyle(
        bg="bg-white dark:bg-slate-800",
        border="border-slate-300 dark:border-slate-600",
        text="text-slate-900 dark:text-white",
        shadow="shadow-sm",
    ),
}

# (blocked, highlighted) -> stroke color
_STROKES = {
    (True, True): "#f87171",
    (True, False): "#94a3b8",
    (False, True): "#10b981",
    (False, False): "#cbd5e1",
}


def node_tone(status: str, is_blocked: bool, priority: str) -> NodeTone:
    """Blocked overrides status; priority only matters for not-started work."""
    if is_blocked:
        return NodeTone.BLOCKED
    if status == DONE_STATUS:
        return NodeTone.DONE
    if status == IN_PROGRESS_STATUS:
        return NodeTone.ACTIVE
    if priority == HIGH_PRIORITY:
        return NodeTone.TODO_HIGH
    return NodeTone.TODO


def node_style(status: str, is_blocked: bool, priority: str) -> NodeStyle:
    return NODE_STYLES[node_tone(status, is_blocked, priority)]


def connector_style(is_blocked: bool, highlighted: bool = False) -> ConnectorStyle:
    return ConnectorStyle(
        stroke=_STROKES[(is_blocked, highlighted)],
        stroke_width=3 if highlighted else 2,
        dash="5,5" if is_blocked else None,
        badge="lock" if is_blocked else "check",
        pulse=highlighted and not is_blocked,
    )
