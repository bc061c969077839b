"""
Level assignment (longest path by fixed-point relaxation).

Every task starts at level 0. Each pass raises a task to one above its highest
known dependency. A DAG converges in at most N passes (N = task count), so N is
also the hard pass bound that keeps cyclic input from looping forever.
"""

from typing import Dict, List, Sequence

from loguru import logger

from tasks import Task


def max_relaxation_passes(task_count: int) -> int:
    """Upper bound on relaxation passes: the longest simple path has < N edges."""
    return max(task_count, 0)


def assign_levels(tasks: Sequence[Task]) -> Dict[str, int]:
    """
    Return {task_id: level}. Dangling and self-referencing dependencies are ignored.
    Levels are capped at N - 1; only cyclic input ever reaches the cap, and
    levels inside a cycle carry no meaning beyond being bounded.
    """
    task_list: List[Task] = list(tasks or [])
    levels: Dict[str, int] = {t.id: 0 for t in task_list}
    if not task_list:
        return levels

    cap = len(task_list) - 1
    bound = max_relaxation_passes(len(task_list))
    converged = False
    passes = 0

    for _ in range(bound):
        passes += 1
        changed = False
        for task in task_list:
            if not task.dependencies:
                continue
            max_parent = -1
            for dep in task.dependencies:
                if dep == task.id or dep not in levels:
                    continue
                max_parent = max(max_parent, levels[dep])
            new_level = min(max_parent + 1, cap)
            if new_level > levels[task.id]:
                levels[task.id] = new_level
                changed = True
        if not changed:
            converged = True
            break

    if not converged:
        logger.warning("Level relaxation stopped at pass bound {} without converging (dependency cycle)", bound)
    else:
        logger.debug("Levels converged after {} pass(es) for {} tasks", passes, len(task_list))
    return levels
