"""Shared FastAPI dependencies and error translation."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, HTTPException, Request, status

from recipe_nutrition.domain.errors import (
    AuthenticationError,
    InvalidScaleFactorError,
    NoNutritionDataError,
    RecipeError,
    RecipeNotFoundError,
    RecipeNotOwnedError,
    RecipeValidationError,
)

if TYPE_CHECKING:
    from recipe_nutrition.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def require_fdc(container: AppContainer) -> None:
    """Reject FDC-backed requests when no API key is configured."""
    if not container.settings.fdc_configured:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="USDA API key is not configured",
        )


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the calling user from the bearer token."""
    container = get_container(request)
    try:
        return container.auth_service.require_user(authorization)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)
        ) from exc


def to_http_error(exc: RecipeError) -> HTTPException:
    """Map a domain error to the HTTP error returned to clients."""
    if isinstance(exc, RecipeNotFoundError | NoNutritionDataError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, RecipeNotOwnedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, RecipeValidationError | InvalidScaleFactorError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
