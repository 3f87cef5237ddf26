import logging
import os

from fastapi import FastAPI

from api.routers import ops, preferences, schedule

# Logging configuration
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Schedule Planner")

app.include_router(schedule.router)
app.include_router(preferences.router)
app.include_router(ops.router)


@app.on_event("startup")
async def startup() -> None:
    logger.info("Schedule planner API started")
