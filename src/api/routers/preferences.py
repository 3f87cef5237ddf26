import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from api.dependencies import get_preferences_store
from storage.preferences_store import PreferencesStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/preferences")
async def get_preferences(
    store: PreferencesStore = Depends(get_preferences_store),
) -> dict:
    """Default scheduling preferences applied to every schedule request."""
    return store.load().model_dump(by_alias=True, mode="json")


@router.put("/preferences")
async def update_preferences(
    payload: Dict[str, Any] = Body(...),
    store: PreferencesStore = Depends(get_preferences_store),
) -> dict:
    """Merge a partial preferences object into the stored defaults."""
    try:
        prefs = store.load().with_overrides(payload)
    except ValidationError as e:
        logger.warning(f"Rejected preferences update: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    store.save(prefs)
    logger.info(f"Default preferences updated: {sorted(payload.keys())}")
    return prefs.model_dump(by_alias=True, mode="json")
