"""Aggregation of per-100g nutrient values across recipe ingredients."""

from collections.abc import Iterable
from dataclasses import dataclass

from recipe_nutrition.domain.nutrition import (
    FoodRecord,
    GramConversion,
    NutrientTotal,
    NutritionFacts,
)
from recipe_nutrition.domain.recipes import Recipe
from recipe_nutrition.services.conversion import convert_to_grams


@dataclass(frozen=True)
class TrackedNutrient:
    """Nutrient shown on the nutrition panel."""

    name: str
    label: str
    unit_name: str


DEFAULT_NUTRIENTS: tuple[TrackedNutrient, ...] = (
    TrackedNutrient("Energy", "Calories", "kcal"),
    TrackedNutrient("Protein", "Protein", "g"),
    TrackedNutrient("Total lipid (fat)", "Fat", "g"),
    TrackedNutrient("Carbohydrate, by difference", "Carbohydrates", "g"),
    TrackedNutrient("Fiber, total dietary", "Fiber", "g"),
    TrackedNutrient("Total Sugars", "Sugars", "g"),
    TrackedNutrient("Sodium, Na", "Sodium", "mg"),
)


def total_for(
    nutrient_name: str,
    recipe: Recipe,
    food_records: Iterable[FoodRecord],
    scale_factor: float = 1.0,
) -> str:
    """Return the recipe total of a nutrient formatted to two decimals."""
    lines = _convert_lines(recipe, _index(food_records), scale_factor)
    amount, _ = _sum_nutrient(nutrient_name, lines)
    return f"{amount:.2f}"


def nutrient_total(
    nutrient: TrackedNutrient,
    recipe: Recipe,
    food_records: Iterable[FoodRecord],
    scale_factor: float = 1.0,
) -> NutrientTotal:
    """Aggregate one nutrient and report whether every conversion was exact."""
    lines = _convert_lines(recipe, _index(food_records), scale_factor)
    return _to_total(nutrient, lines)


def build_nutrition_facts(
    recipe: Recipe,
    food_records: Iterable[FoodRecord],
    scale_factor: float = 1.0,
    nutrients: tuple[TrackedNutrient, ...] = DEFAULT_NUTRIENTS,
) -> NutritionFacts:
    """Compute the nutrition panel for a recipe."""
    foods = _index(food_records)
    lines = _convert_lines(recipe, foods, scale_factor)
    return NutritionFacts(
        recipe_id=recipe.id,
        scale_factor=scale_factor,
        totals=[_to_total(nutrient, lines) for nutrient in nutrients],
        approximate_ingredients=[
            line.name for line in lines if not line.conversion.exact
        ],
        unlinked_ingredients=[
            ingredient.name
            for ingredient in recipe.ingredients
            if ingredient.food_reference_id not in foods
        ],
    )


@dataclass(frozen=True)
class _ConvertedLine:
    name: str
    food: FoodRecord
    conversion: GramConversion


def _convert_lines(
    recipe: Recipe, foods: dict[int, FoodRecord], scale_factor: float
) -> list[_ConvertedLine]:
    """Convert every ingredient with a fetched food record to grams."""
    lines: list[_ConvertedLine] = []
    for ingredient in recipe.ingredients:
        food = foods.get(ingredient.food_reference_id)
        if food is None:
            continue
        conversion = convert_to_grams(
            ingredient.amount * scale_factor, ingredient.unit, food
        )
        lines.append(
            _ConvertedLine(name=ingredient.name, food=food, conversion=conversion)
        )
    return lines


def _sum_nutrient(
    nutrient_name: str, lines: list[_ConvertedLine]
) -> tuple[float, bool]:
    """Sum per-100g nutrient values weighted by each ingredient's grams."""
    total = 0.0
    exact = True
    for line in lines:
        entry = line.food.nutrient(nutrient_name)
        if entry is None:
            continue
        total += (line.conversion.value / 100) * entry.amount
        exact = exact and line.conversion.exact
    return total, exact


def _to_total(nutrient: TrackedNutrient, lines: list[_ConvertedLine]) -> NutrientTotal:
    amount, exact = _sum_nutrient(nutrient.name, lines)
    return NutrientTotal(
        name=nutrient.name,
        label=nutrient.label,
        unit_name=nutrient.unit_name,
        amount=round(amount, 2),
        display=f"{amount:.2f}",
        exact=exact,
    )


def _index(food_records: Iterable[FoodRecord]) -> dict[int, FoodRecord]:
    """Key food records by FDC id, keeping the first record per id."""
    foods: dict[int, FoodRecord] = {}
    for record in food_records:
        foods.setdefault(record.fdc_id, record)
    return foods
