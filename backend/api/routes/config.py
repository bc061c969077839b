"""Config API routes. Backend maintains settings.json; frontend fetches and overwrites on save."""

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from db import get_layout_config, get_settings, resolve_layout_config, save_settings

router = APIRouter()


@router.get("")
async def get_config():
    """Return settings.json contents and the effective project map layout."""
    settings = await get_settings()
    layout = await get_layout_config()
    return {"config": settings, "layout": layout.model_dump(by_alias=True)}


@router.post("")
async def save_config(body: dict = Body(...)):
    """Validate project map overrides, then overwrite settings.json with request body."""
    try:
        layout = resolve_layout_config(body)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    await save_settings(body)
    return {"success": True, "layout": layout.model_dump(by_alias=True)}
