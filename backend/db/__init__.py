"""
Database Module
File-based settings store: {DB_DIR}/settings.json. Task records live in the
external task store; only project map preferences are kept here.
Uses orjson for faster JSON parsing.
"""

import os
from pathlib import Path

import aiofiles
import orjson
from loguru import logger

from layout import LayoutConfig

SETTINGS_FILE = "settings.json"
LAYOUT_KEY = "projectMap"


def get_db_dir() -> Path:
    """TASKMAP_DB_DIR overrides the default db/ folder next to this module."""
    override = os.environ.get("TASKMAP_DB_DIR")
    return Path(override) if override else Path(__file__).parent


def _settings_path() -> Path:
    return get_db_dir() / SETTINGS_FILE


async def get_settings() -> dict:
    """Get full settings from db/settings.json. Missing or corrupt file -> {}."""
    file_path = _settings_path()
    try:
        async with aiofiles.open(file_path, "rb") as f:
            data = await f.read()
            result = orjson.loads(data)
    except FileNotFoundError:
        return {}
    except orjson.JSONDecodeError as e:
        logger.warning("Invalid JSON in {}: {}", file_path, e)
        return {}
    if not isinstance(result, dict):
        logger.warning("Ignoring non-object settings in {}", file_path)
        return {}
    return result


async def save_settings(settings: dict) -> dict:
    """Save settings to db/settings.json. Atomic write to avoid corruption."""
    file_path = _settings_path()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
    content = orjson.dumps(settings or {}, option=orjson.OPT_INDENT_2).decode("utf-8")
    async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
        await f.write(content)
    tmp_path.replace(file_path)
    return {"success": True}


def resolve_layout_config(raw: dict) -> LayoutConfig:
    """Settings dict -> LayoutConfig. Raises pydantic.ValidationError on bad values."""
    overrides = (raw or {}).get(LAYOUT_KEY) or {}
    return LayoutConfig.model_validate(overrides)


async def get_layout_config() -> LayoutConfig:
    """Effective layout config; stored values that fail validation fall back to defaults."""
    raw = await get_settings()
    try:
        return resolve_layout_config(raw)
    except ValueError as e:
        logger.warning("Invalid project map settings, using defaults: {}", e)
        return LayoutConfig()
