import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Query

from larder.api.routes import cook, match, pantry, recipes
from larder.events.web_observers import start as start_event_observers, get_events as get_web_events

# Logging
logger = logging.getLogger("larder_app")


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Register event bus subscribers for web alerts when the app starts."""
    start_event_observers()
    logger.info("Web observers for pantry events started")
    yield


# Initialize FastAPI app
app = FastAPI(title="Larder: Pantry & Recipe Matching API", lifespan=lifespan)

# Include routers
app.include_router(pantry.router)
app.include_router(recipes.router)
app.include_router(match.router)
app.include_router(cook.router)


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.get("/api/events")
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    """Recent pantry / cooking events newer than ``since``."""
    return get_web_events(since)
