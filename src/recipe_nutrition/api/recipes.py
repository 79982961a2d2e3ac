"""Recipe CRUD and nutrition endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from recipe_nutrition.api.deps import (
    get_container,
    require_fdc,
    require_user,
    to_http_error,
)
from recipe_nutrition.api.schemas import (  # noqa: TC001
    RecipeCreate,
    RecipeQuantitiesUpdate,
)
from recipe_nutrition.domain.errors import RecipeError
from recipe_nutrition.domain.view_modes import (
    MIN_SCALE_FACTOR,
    Converting,
    mode_from_name,
)

if TYPE_CHECKING:
    from recipe_nutrition.containers import AppContainer

router = APIRouter(prefix="/recipes", tags=["recipes"])
_logger = logging.getLogger(__name__)


@router.get("")
async def list_recipes(request: Request) -> dict[str, object]:
    """Return all recipes ordered by id."""
    container: AppContainer = get_container(request)
    return {"data": container.recipe_service.list_recipes()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: RecipeCreate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Create a recipe owned by the calling user."""
    container: AppContainer = get_container(request)
    try:
        recipe = container.recipe_service.create_recipe(
            user_id, [item.to_domain() for item in payload.ingredients]
        )
    except RecipeError as exc:
        raise to_http_error(exc) from exc
    return {"data": recipe}


@router.patch("/{recipe_id}")
async def update_recipe(
    recipe_id: int,
    payload: RecipeQuantitiesUpdate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Replace the amounts and units of a recipe."""
    container: AppContainer = get_container(request)
    try:
        recipe = container.recipe_service.update_quantities(
            recipe_id, user_id, payload.amounts, payload.units
        )
    except RecipeError as exc:
        raise to_http_error(exc) from exc
    return {"data": recipe}


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: int,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, bool]:
    """Delete a recipe owned by the calling user."""
    container: AppContainer = get_container(request)
    try:
        container.recipe_service.delete_recipe(recipe_id, user_id)
    except RecipeError as exc:
        raise to_http_error(exc) from exc
    return {"success": True}


@router.get("/{recipe_id}/nutrition")
async def recipe_nutrition(
    recipe_id: int,
    request: Request,
    scale: float = Query(default=1.0, ge=MIN_SCALE_FACTOR),
) -> dict[str, object]:
    """Return the aggregated nutrition panel for a recipe."""
    container: AppContainer = get_container(request)
    require_fdc(container)
    try:
        facts = await container.facts_service.facts_for_recipe(recipe_id, scale)
    except RecipeError as exc:
        raise to_http_error(exc) from exc
    except httpx.HTTPError as exc:
        _logger.exception("Failed to fetch nutrition for recipe %s", recipe_id)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error fetching nutrition data",
        ) from exc
    return {"data": facts}


@router.get("/{recipe_id}/view")
async def recipe_view(
    recipe_id: int,
    request: Request,
    mode: str = "viewing",
    scale: float = Query(default=1.0, ge=MIN_SCALE_FACTOR),
) -> dict[str, object]:
    """Render ingredient lines for a display mode."""
    container: AppContainer = get_container(request)
    try:
        display_mode = mode_from_name(mode, scale)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    if isinstance(display_mode, Converting):
        require_fdc(container)
    try:
        lines = await container.facts_service.render(recipe_id, display_mode)
    except RecipeError as exc:
        raise to_http_error(exc) from exc
    except httpx.HTTPError as exc:
        _logger.exception("Failed to fetch foods for recipe %s", recipe_id)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Error fetching nutrition data",
        ) from exc
    return {"mode": mode.strip().lower(), "ingredients": lines}
