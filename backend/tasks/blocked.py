"""
Blocked-state evaluation.

A dependency blocks while its task is not "Done". Dangling ids (deleted or
unknown tasks) never block; unrecognized statuses always do.
"""

from typing import Dict, Iterable, Mapping, Set, Union

from .models import Task, index_tasks, is_done

TaskLookup = Union[Mapping[str, Task], Iterable[Task]]


def _as_index(tasks: TaskLookup) -> Mapping[str, Task]:
    if isinstance(tasks, Mapping):
        return tasks
    return index_tasks(tasks)


def is_dependency_blocking(parent: Task) -> bool:
    """True iff the dependency task has not reached Done."""
    return not is_done(parent)


def is_task_blocked(task: Task, tasks: TaskLookup) -> bool:
    by_id = _as_index(tasks)
    for dep_id in task.dependencies:
        parent = by_id.get(dep_id)
        if parent is not None and is_dependency_blocking(parent):
            return True
    return False


def blocked_task_ids(tasks: Iterable[Task]) -> Set[str]:
    """Ids of every task that currently has an unfinished known dependency."""
    task_list = list(tasks)
    by_id: Dict[str, Task] = index_tasks(task_list)
    return {t.id for t in task_list if is_task_blocked(t, by_id)}
