"""Tests for recipe nutrition facts."""

import asyncio

import httpx
import pytest

from recipe_nutrition.domain.errors import (
    InvalidScaleFactorError,
    NoNutritionDataError,
    RecipeNotFoundError,
)
from recipe_nutrition.domain.recipes import Ingredient
from recipe_nutrition.domain.view_modes import Converting, Scaling
from tests.conftest import CHICKEN_FDC_ID, OWNER_ID, RICE_FDC_ID


def _create(container, *ingredients: Ingredient) -> int:
    return container.recipe_service.create_recipe(OWNER_ID, list(ingredients)).id


def test_facts_for_recipe(container) -> None:
    recipe_id = _create(
        container,
        Ingredient("Chicken", 200, "g", CHICKEN_FDC_ID),
        Ingredient("Rice", 1, "cup", RICE_FDC_ID),
        Ingredient("Salt", 1, "pinch", None),
    )

    facts = asyncio.run(container.facts_service.facts_for_recipe(recipe_id, 2))

    totals = {total.name: total.display for total in facts.totals}
    assert totals["Protein"] == "90.00"
    assert totals["Energy"] == "1000.00"
    assert facts.unlinked_ingredients == ["Salt"]
    assert facts.approximate_ingredients == []


def test_facts_require_linked_ingredients(container, fdc_client) -> None:
    recipe_id = _create(container, Ingredient("Salt", 1, "tsp", None))

    with pytest.raises(NoNutritionDataError):
        asyncio.run(container.facts_service.facts_for_recipe(recipe_id))
    assert fdc_client.batch_calls == []


@pytest.mark.parametrize("scale", [0, -2, 0.01])
def test_facts_reject_small_scale_factor(container, scale: float) -> None:
    recipe_id = _create(container, Ingredient("Chicken", 1, "g", CHICKEN_FDC_ID))

    with pytest.raises(InvalidScaleFactorError):
        asyncio.run(container.facts_service.facts_for_recipe(recipe_id, scale))


def test_facts_for_unknown_recipe(container) -> None:
    with pytest.raises(RecipeNotFoundError):
        asyncio.run(container.facts_service.facts_for_recipe(99))


def test_fetch_failure_propagates(container, fdc_client) -> None:
    recipe_id = _create(container, Ingredient("Chicken", 1, "g", CHICKEN_FDC_ID))
    fdc_client.fail_with = httpx.ConnectError("down")

    with pytest.raises(httpx.ConnectError):
        asyncio.run(container.facts_service.facts_for_recipe(recipe_id))


def test_render_fetches_foods_only_when_converting(container, fdc_client) -> None:
    recipe_id = _create(container, Ingredient("Rice", 2, "cup", RICE_FDC_ID))

    scaled = asyncio.run(container.facts_service.render(recipe_id, Scaling(2)))
    assert scaled[0].amount == "4.00"
    assert fdc_client.batch_calls == []

    converted = asyncio.run(container.facts_service.render(recipe_id, Converting()))
    assert converted[0].amount == "400.00"
    assert converted[0].exact is True
    assert fdc_client.batch_calls == [[RICE_FDC_ID]]
