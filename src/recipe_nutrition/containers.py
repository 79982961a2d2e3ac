"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_nutrition.adapters.fdc_client import HttpxFdcClient
from recipe_nutrition.adapters.supabase_auth_client import SupabaseAuthClient
from recipe_nutrition.adapters.supabase_recipe_repository import (
    SupabaseRecipeRepository,
)
from recipe_nutrition.config import Settings
from recipe_nutrition.services.auth import AuthService
from recipe_nutrition.services.cache import InMemoryCache
from recipe_nutrition.services.facts import NutritionFactsService
from recipe_nutrition.services.nutrition import NutritionService
from recipe_nutrition.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    recipe_service: RecipeService
    nutrition_service: NutritionService
    facts_service: NutritionFactsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    recipe_service = RecipeService(SupabaseRecipeRepository(supabase_client))
    auth_service = AuthService(SupabaseAuthClient(supabase_client))
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key or "",
        base_url=resolved_settings.fdc_base_url,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
        debug=resolved_settings.environment == "local",
    )
    facts_service = NutritionFactsService(
        recipe_service=recipe_service,
        nutrition_service=nutrition_service,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        recipe_service=recipe_service,
        nutrition_service=nutrition_service,
        facts_service=facts_service,
        close_resources=close_resources,
    )
