"""Recipe lifecycle services."""

import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from recipe_nutrition.domain.errors import (
    RecipeNotFoundError,
    RecipeNotOwnedError,
    RecipeValidationError,
)
from recipe_nutrition.domain.recipes import Ingredient, Recipe


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def create_recipe(self, owner_id: UUID, ingredients: list[Ingredient]) -> Recipe:
        """Insert a recipe and return it."""

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by id."""

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe by id, if present."""

    def replace_ingredients(
        self, recipe_id: int, owner_id: UUID, ingredients: list[Ingredient]
    ) -> Recipe | None:
        """Replace the ingredient list of an owned recipe; None when no row matched."""

    def delete_recipe(self, recipe_id: int, owner_id: UUID) -> bool:
        """Delete an owned recipe and report whether a row was removed."""


@dataclass
class RecipeService:
    """Application service for recipe CRUD."""

    repository: RecipeRepository

    def create_recipe(self, owner_id: UUID, ingredients: list[Ingredient]) -> Recipe:
        """Validate and persist a new recipe."""
        if not ingredients:
            raise RecipeValidationError("A recipe needs at least one ingredient.")
        cleaned = []
        for ingredient in ingredients:
            name = ingredient.name.strip()
            unit = ingredient.unit.strip()
            if not name or not unit:
                raise RecipeValidationError(
                    "Please fill out all ingredient fields correctly."
                )
            _validate_amount(ingredient.amount)
            cleaned.append(
                Ingredient(
                    name=name,
                    amount=float(ingredient.amount),
                    unit=unit,
                    food_reference_id=ingredient.food_reference_id,
                )
            )
        return self.repository.create_recipe(owner_id, cleaned)

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe ordered by id."""
        return self.repository.list_recipes()

    def get_recipe(self, recipe_id: int) -> Recipe:
        """Return a recipe or raise when it does not exist."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return recipe

    def update_quantities(
        self,
        recipe_id: int,
        owner_id: UUID,
        amounts: list[float],
        units: list[str],
    ) -> Recipe:
        """Replace every amount and unit of a recipe.

        Ingredient names and food references stay as created; the new lists
        must line up one-to-one with the existing ingredients.
        """
        recipe = self.get_recipe(recipe_id)
        if recipe.owner_id != owner_id:
            raise RecipeNotOwnedError(recipe_id)
        count = len(recipe.ingredients)
        if len(amounts) != count or len(units) != count:
            raise RecipeValidationError(
                f"Expected {count} amounts and units, "
                f"got {len(amounts)} and {len(units)}."
            )
        for amount in amounts:
            _validate_amount(amount)
        if any(not unit.strip() for unit in units):
            raise RecipeValidationError("Units must not be empty.")

        updated = [
            ingredient.with_quantity(float(amount), unit.strip())
            for ingredient, amount, unit in zip(
                recipe.ingredients, amounts, units, strict=True
            )
        ]
        saved = self.repository.replace_ingredients(recipe_id, owner_id, updated)
        if saved is None:
            raise RecipeNotOwnedError(recipe_id)
        return saved

    def delete_recipe(self, recipe_id: int, owner_id: UUID) -> None:
        """Delete a recipe owned by the user."""
        if not self.repository.delete_recipe(recipe_id, owner_id):
            raise RecipeNotFoundError(recipe_id)


def _validate_amount(amount: float) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int | float):
        raise RecipeValidationError("Amounts must be numbers.")
    if not math.isfinite(amount) or amount < 0:
        raise RecipeValidationError("Amounts must be non-negative numbers.")
