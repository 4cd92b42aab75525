"""Health check router."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from services.cats.cats import CatsService

from ..deps import get_cats_service

router = APIRouter()


@router.get("/health")
async def health(service: CatsService = Depends(get_cats_service)) -> dict[str, str | int]:
    return {"status": "ok", "cats": len(service)}
