from typing import List, Optional

import pytest

from tasks import Task


@pytest.fixture
def make_task():
    def _make(task_id: str, deps: Optional[List[str]] = None, status: str = "To Do", title: Optional[str] = None, **extra) -> Task:
        return Task(id=task_id, title=title if title is not None else task_id, status=status, dependencies=deps or [], **extra)

    return _make


@pytest.fixture
def chain(make_task):
    """A <- B <- C, titled so render order matches id order."""
    return [
        make_task("A", title="Alpha", status="Done"),
        make_task("B", ["A"], title="Bravo", priority="High"),
        make_task("C", ["B"], title="Charlie"),
    ]


@pytest.fixture(autouse=True)
def settings_dir(tmp_path, monkeypatch):
    """Keep settings.json writes inside the test's tmp dir."""
    monkeypatch.setenv("TASKMAP_DB_DIR", str(tmp_path))
    return tmp_path
