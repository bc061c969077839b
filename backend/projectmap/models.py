"""Derived project map models. Rebuilt from scratch on every input change."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from highlight import IDLE, HighlightContext
from layout import Connection
from layout.styles import Emphasis, NodeStyle, NodeTone
from tasks import Task


class GraphNode(Task):
    """A task placed on the canvas: level, top-left corner, box size and styling."""
    level: int = Field(..., ge=0)
    x: float
    y: float
    width: float
    height: float
    is_blocked: bool = Field(False, alias="isBlocked")
    tone: NodeTone
    style: NodeStyle
    emphasis: Emphasis = Emphasis.NORMAL


class ProjectMap(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nodes: List[GraphNode] = Field(default_factory=list)
    connections: List[Connection] = Field(default_factory=list)
    highlight: HighlightContext = IDLE
    width: float = 0
    height: float = 0
    task_count: int = Field(0, alias="taskCount")
    # Coerced input records, handed back on activation
    tasks: List[Task] = Field(default_factory=list, exclude=True)

    _node_index: Dict[str, GraphNode] = PrivateAttr(default_factory=dict)
    _task_index: Dict[str, Task] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._node_index = {n.id: n for n in self.nodes}
        self._task_index = {t.id: t for t in self.tasks}

    def node(self, task_id: str) -> Optional[GraphNode]:
        return self._node_index.get(task_id)

    def task(self, task_id: str) -> Optional[Task]:
        return self._task_index.get(task_id)
