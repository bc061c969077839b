"""Project map API - layout, highlight, activate."""

import asyncio

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from db import get_layout_config
from highlight import compute_highlight
from projectmap import activate_node, build_project_map
from tasks import Task, coerce_tasks

from .. import state as api_state
from ..schemas import ActivateRequest, MapRequest

router = APIRouter()


@router.post("/layout")
async def map_layout(body: MapRequest):
    """Positioned nodes, routed connectors and highlight sets for the given tasks."""
    try:
        config = await get_layout_config()
        project_map = build_project_map(body.tasks, body.focus_id, config)
    except Exception as e:
        logger.exception("Error building project map")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to build project map"})
    return project_map.model_dump(mode="json", by_alias=True)


@router.post("/highlight")
async def map_highlight(body: MapRequest):
    """Highlight sets only; the client keeps its last layout while hovering."""
    try:
        ctx = compute_highlight(coerce_tasks(body.tasks), body.focus_id)
    except Exception as e:
        logger.exception("Error computing highlight")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to compute highlight"})
    return ctx.model_dump(mode="json", by_alias=True)


@router.post("/activate")
async def map_activate(body: ActivateRequest):
    """Notify the host app that a node was clicked, with the original task record."""

    def on_activate(task: Task):
        if api_state.sio is not None:
            payload = {"task": task.model_dump(mode="json", by_alias=True)}
            asyncio.create_task(api_state.sio.emit("map-node-activated", payload))

    try:
        project_map = build_project_map(body.tasks)
        task = activate_node(project_map, body.task_id, on_activate)
    except Exception as e:
        logger.exception("Error activating task {}", body.task_id)
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to activate task"})
    if task is None:
        return JSONResponse(status_code=404, content={"error": f"Unknown task: {body.task_id}"})
    logger.info("Task {} activated from project map", task.id)
    return {"task": task.model_dump(mode="json", by_alias=True)}
