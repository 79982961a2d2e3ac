"""Nutrition facts for stored recipes."""

import logging
from dataclasses import dataclass

from recipe_nutrition.domain.errors import (
    InvalidScaleFactorError,
    NoNutritionDataError,
)
from recipe_nutrition.domain.nutrition import FoodRecord, NutritionFacts
from recipe_nutrition.domain.recipes import Recipe
from recipe_nutrition.domain.view_modes import (
    Converting,
    RecipeMode,
    parse_scale_factor,
)
from recipe_nutrition.services.aggregation import build_nutrition_facts
from recipe_nutrition.services.display import IngredientLine, render_ingredients
from recipe_nutrition.services.nutrition import NutritionService
from recipe_nutrition.services.recipes import RecipeService

_logger = logging.getLogger(__name__)


@dataclass
class NutritionFactsService:
    """Fetches food data for a recipe and aggregates its nutrition panel."""

    recipe_service: RecipeService
    nutrition_service: NutritionService

    async def facts_for_recipe(
        self, recipe_id: int, scale_factor: float = 1.0
    ) -> NutritionFacts:
        """Return the nutrition panel of a recipe at the given scale."""
        factor = parse_scale_factor(scale_factor)
        if factor is None:
            raise InvalidScaleFactorError(
                f"Scale factor must be at least 0.1, got {scale_factor}."
            )
        recipe = self.recipe_service.get_recipe(recipe_id)
        if not recipe.food_reference_ids:
            raise NoNutritionDataError(recipe_id)
        foods = await self.fetch_foods(recipe)
        facts = build_nutrition_facts(recipe, foods, factor)
        if facts.approximate_ingredients:
            _logger.info(
                "Recipe %s nutrition uses approximate conversions for %s",
                recipe_id,
                facts.approximate_ingredients,
            )
        return facts

    async def render(self, recipe_id: int, mode: RecipeMode) -> list[IngredientLine]:
        """Render a recipe's ingredient lines, fetching foods only to convert."""
        recipe = self.recipe_service.get_recipe(recipe_id)
        foods: list[FoodRecord] = []
        if isinstance(mode, Converting) and recipe.food_reference_ids:
            foods = await self.fetch_foods(recipe)
        return render_ingredients(recipe, mode, foods)

    async def fetch_foods(self, recipe: Recipe) -> list[FoodRecord]:
        """Fetch food records for every referenced ingredient."""
        return await self.nutrition_service.get_foods(recipe.food_reference_ids)
