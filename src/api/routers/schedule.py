import asyncio
import logging
import time
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from api.dependencies import Clock, get_clock, get_preferences_store
from api.metrics import (
    REQUESTS_TOTAL,
    REQUEST_LATENCY_SECONDS,
    TASKS_SCHEDULED_TOTAL,
    LOW_CONFIDENCE_PLACEMENTS_TOTAL,
)
from schedule_planner.models import ScheduleResult
from scheduling.confidence import is_low_confidence
from scheduling.scheduler import InvalidScheduleInput, plan
from scheduling.summary import summarize
from storage.preferences_store import PreferencesStore

router = APIRouter()
logger = logging.getLogger(__name__)

ENDPOINT = "/ai/schedule"


def _plan_with_defaults(store: PreferencesStore, overrides, tasks: list, now):
    prefs = store.load().with_overrides(overrides)
    return plan(tasks, prefs, now)


def _reject(detail: str) -> HTTPException:
    REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="rejected").inc()
    logger.warning(f"Rejected schedule request: {detail}")
    return HTTPException(status_code=400, detail=detail)


@router.post("/ai/schedule")
async def generate_schedule(
    # shape is checked by hand so bad input maps to 400, not 422
    payload: Any = Body(None),
    store: PreferencesStore = Depends(get_preferences_store),
    clock: Clock = Depends(get_clock),
) -> dict:
    """
    Build a schedule for the submitted tasks.
    Request preferences are merged over the stored defaults.
    """
    start = time.time()
    try:
        tasks = payload.get("tasks") if isinstance(payload, dict) else None
        overrides = payload.get("preferences") if isinstance(payload, dict) else None
        if not isinstance(tasks, list):
            raise _reject("Tasks array is required")
        if overrides is not None and not isinstance(overrides, dict):
            raise _reject("Preferences must be an object")

        try:
            now = clock()
            placements = await asyncio.to_thread(
                _plan_with_defaults, store, overrides, tasks, now
            )
        except (InvalidScheduleInput, ValidationError) as e:
            raise _reject(str(e))
        except Exception as e:
            REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="error").inc()
            logger.error(f"Schedule generation failed: {e}")
            raise HTTPException(status_code=500, detail="Failed to generate schedule")

        TASKS_SCHEDULED_TOTAL.inc(len(placements))
        low = sum(1 for p in placements if is_low_confidence(p.confidence))
        if low:
            LOW_CONFIDENCE_PLACEMENTS_TOTAL.inc(low)
        REQUESTS_TOTAL.labels(endpoint=ENDPOINT, status="ok").inc()

        result = ScheduleResult(schedule=placements, metadata=summarize(placements, now))
        logger.info(
            f"Smart schedule generated: {len(tasks)} tasks, "
            f"{low} at reduced confidence"
        )
        return result.model_dump(by_alias=True, mode="json")
    finally:
        REQUEST_LATENCY_SECONDS.labels(endpoint=ENDPOINT).observe(time.time() - start)
