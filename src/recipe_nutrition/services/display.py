"""Ingredient lines rendered for each recipe display mode."""

from collections.abc import Iterable
from dataclasses import dataclass

from recipe_nutrition.domain.nutrition import FoodRecord
from recipe_nutrition.domain.recipes import Recipe
from recipe_nutrition.domain.view_modes import (
    Converting,
    Editing,
    RecipeMode,
    Scaling,
)
from recipe_nutrition.services.conversion import convert_to_grams


@dataclass(frozen=True)
class IngredientLine:
    """Display values for one ingredient."""

    name: str
    amount: str
    unit: str
    original_amount: str | None = None
    exact: bool = True


def render_ingredients(
    recipe: Recipe,
    mode: RecipeMode,
    food_records: Iterable[FoodRecord] = (),
) -> list[IngredientLine]:
    """Render the recipe's ingredient lines for the active mode."""
    if isinstance(mode, Editing):
        return [
            IngredientLine(name=ingredient.name, amount=f"{amount:.2f}", unit=unit)
            for ingredient, amount, unit in zip(
                recipe.ingredients, mode.amounts, mode.units, strict=True
            )
        ]

    if isinstance(mode, Scaling):
        lines = []
        for ingredient in recipe.ingredients:
            original = f"{ingredient.amount:.2f}"
            lines.append(
                IngredientLine(
                    name=ingredient.name,
                    amount=f"{ingredient.amount * mode.scale_factor:.2f}",
                    unit=ingredient.unit,
                    original_amount=original if mode.scale_factor != 1 else None,
                )
            )
        return lines

    if isinstance(mode, Converting):
        foods = {record.fdc_id: record for record in food_records}
        lines = []
        for ingredient in recipe.ingredients:
            conversion = convert_to_grams(
                ingredient.amount,
                ingredient.unit,
                foods.get(ingredient.food_reference_id),
            )
            lines.append(
                IngredientLine(
                    name=ingredient.name,
                    amount=f"{conversion.value:.2f}",
                    unit="g",
                    original_amount=f"{ingredient.amount:.2f} {ingredient.unit}",
                    exact=conversion.exact,
                )
            )
        return lines

    return [
        IngredientLine(
            name=ingredient.name,
            amount=f"{ingredient.amount:.2f}",
            unit=ingredient.unit,
        )
        for ingredient in recipe.ingredients
    ]
