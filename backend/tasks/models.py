"""
Task record as consumed by the project map.
Tasks are owned by the external task store; the map reads them, never writes.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DONE_STATUS = "Done"
DEFAULT_STATUS = "To Do"
DEFAULT_PRIORITY = "Medium"


class Task(BaseModel):
    """One task record. Unknown fields of the stored record are kept as extras."""
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: str = Field(..., min_length=1)
    title: str = ""
    status: str = DEFAULT_STATUS
    priority: str = DEFAULT_PRIORITY
    dependencies: List[str] = Field(default_factory=list)
    assignee: Optional[str] = None
    assignee_avatar: Optional[str] = Field(None, alias="assigneeAvatar")
    due_date: Optional[str] = Field(None, alias="dueDate")

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v):
        return v if v is None else str(v)

    @field_validator("title", "assignee", "assignee_avatar", "due_date", mode="before")
    @classmethod
    def _display_as_str(cls, v, info):
        # display-only fields: coerce, never reject
        if v is None:
            return "" if info.field_name == "title" else None
        return v if isinstance(v, str) else str(v)

    @field_validator("status", mode="before")
    @classmethod
    def _status_or_default(cls, v):
        if v is None:
            return DEFAULT_STATUS
        return v if isinstance(v, str) else str(v)

    @field_validator("priority", mode="before")
    @classmethod
    def _priority_or_default(cls, v):
        if v is None:
            return DEFAULT_PRIORITY
        return v if isinstance(v, str) else str(v)

    @field_validator("dependencies", mode="before")
    @classmethod
    def _deps_or_empty(cls, v):
        if v is None:
            return []
        if not isinstance(v, (list, tuple, set, frozenset)):
            return [str(v)]
        return [str(d) for d in v if d is not None]


TaskLike = Union[Task, Mapping[str, Any]]


def is_done(task: Task) -> bool:
    return task.status == DONE_STATUS


def coerce_tasks(records: Optional[Iterable[TaskLike]]) -> List[Task]:
    """
    Turn raw records into Task models, in input order.
    Records without an id are skipped; for a duplicated id the first record wins.
    """
    result: List[Task] = []
    seen = set()
    for rec in records or []:
        if isinstance(rec, Task):
            task = rec
        elif isinstance(rec, Mapping) and rec.get("id"):
            try:
                task = Task.model_validate(rec)
            except ValidationError as e:
                logger.warning("Skipping malformed task {}: {}", rec.get("id"), e)
                continue
        else:
            continue
        if task.id in seen:
            logger.warning("Duplicate task id {} ignored", task.id)
            continue
        seen.add(task.id)
        result.append(task)
    return result


def index_tasks(tasks: Iterable[Task]) -> Dict[str, Task]:
    """id -> Task. Expects already-coerced tasks."""
    return {t.id: t for t in tasks}
