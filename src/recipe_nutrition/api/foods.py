"""FoodData Central lookup endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from fastapi import APIRouter, HTTPException, Request, status

from recipe_nutrition.api.deps import get_container, require_fdc
from recipe_nutrition.api.schemas import NutritionLookup  # noqa: TC001

if TYPE_CHECKING:
    from recipe_nutrition.containers import AppContainer

router = APIRouter(tags=["foods"])
_logger = logging.getLogger(__name__)


@router.get("/foods/search")
async def search_foods(request: Request, q: str | None = None) -> dict[str, object]:
    """Search FDC foods for the ingredient picker."""
    if not q or not q.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Query parameter "q" is required',
        )
    container: AppContainer = get_container(request)
    require_fdc(container)
    try:
        foods = await container.nutrition_service.search(
            q.strip(), limit=container.settings.fdc_search_page_size
        )
    except httpx.HTTPStatusError as exc:
        raise HTTPException(
            status_code=exc.response.status_code,
            detail="USDA API rejected the search",
        ) from exc
    except httpx.HTTPError as exc:
        _logger.exception("FDC search failed", extra={"query": q})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching data from USDA API",
        ) from exc
    return {"foods": foods}


@router.post("/nutrition")
async def nutrition_lookup(
    payload: NutritionLookup, request: Request
) -> dict[str, object]:
    """Fetch nutrition records for a batch of FDC ids."""
    if not any(fdc_id is not None for fdc_id in payload.fdc_ids):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Valid fdcIds array is required",
        )
    container: AppContainer = get_container(request)
    require_fdc(container)
    try:
        records = await container.nutrition_service.get_foods(payload.fdc_ids)
    except httpx.HTTPError as exc:
        _logger.exception("FDC nutrition lookup failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching nutrition data",
        ) from exc
    return {"data": records}
