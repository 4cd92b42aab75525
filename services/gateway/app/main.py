"""FastAPI entry point for the cats gateway."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .deps import get_settings
from .routers import cats, health

logger = logging.getLogger(__name__)

app = FastAPI(title="Cats Gateway", version="1.0.0")


@app.on_event("startup")
async def startup_event() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    app.state.settings = settings
    logger.info("Starting %s (%s)", app.title, settings.environment)


app.include_router(health.router)
app.include_router(cats.router, prefix="/cats", tags=["cats"])


@app.get("/")
async def root() -> dict[str, str]:
    settings = get_settings()
    return {"service": app.title, "environment": settings.environment}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("services.gateway.app.main:app", host=settings.host, port=settings.port)
