"""Tasks - read-only task model and blocked-state rules for the project map."""

from .blocked import blocked_task_ids, is_dependency_blocking, is_task_blocked
from .models import DONE_STATUS, Task, coerce_tasks, index_tasks, is_done

__all__ = [
    "DONE_STATUS",
    "Task",
    "blocked_task_ids",
    "coerce_tasks",
    "index_tasks",
    "is_dependency_blocking",
    "is_done",
    "is_task_blocked",
]
