"""Pydantic request schemas for API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MapRequest(BaseModel):
    """Tasks of one project, as held by the task store, plus the hovered task."""
    model_config = ConfigDict(populate_by_name=True)
    tasks: List[Dict[str, Any]] = Field(default_factory=list, description="Raw task records")
    focus_id: Optional[str] = Field(default=None, alias="focusId")


class ActivateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    tasks: List[Dict[str, Any]] = Field(default_factory=list)
    task_id: str = Field(..., alias="taskId")
