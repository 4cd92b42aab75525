"""Cats API router."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from services.cats.cats import CatNotFoundError, CatsService

from ..deps import get_cats_service
from ..schemas.cat import Cat

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=Cat, status_code=status.HTTP_201_CREATED)
async def create_cat(cat: Cat, service: CatsService = Depends(get_cats_service)) -> Cat:
    service.create(cat)
    logger.info("Created cat %s", cat.name)
    return cat


@router.get("", response_model=list[Cat])
async def list_cats(service: CatsService = Depends(get_cats_service)) -> list[Cat]:
    return service.find_all()


@router.get("/{name:path}", response_model=Cat)
async def get_cat(name: str, service: CatsService = Depends(get_cats_service)) -> Cat:
    try:
        return service.find_one(name)
    except CatNotFoundError as exc:
        logger.warning("Lookup failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
