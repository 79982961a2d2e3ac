"""Supabase implementation for recipe persistence."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from recipe_nutrition.domain.recipes import Ingredient, Recipe
from recipe_nutrition.services.recipes import RecipeRepository

_TABLE = "recipes"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for recipes."""

    client: Client

    def create_recipe(self, owner_id: UUID, ingredients: list[Ingredient]) -> Recipe:
        """Insert a recipe and return it."""
        response = (
            self.client.table(_TABLE)
            .insert(
                {
                    "user": str(owner_id),
                    "ingredients": [_dump_ingredient(item) for item in ingredients],
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create recipe")
        return _parse_recipe(response.data[0])

    def list_recipes(self) -> list[Recipe]:
        """Return all recipes ordered by id."""
        response = self.client.table(_TABLE).select("*").order("id").execute()
        return [_parse_recipe(row) for row in response.data or []]

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def replace_ingredients(
        self, recipe_id: int, owner_id: UUID, ingredients: list[Ingredient]
    ) -> Recipe | None:
        """Replace the full ingredient list of an owned recipe."""
        response = (
            self.client.table(_TABLE)
            .update({"ingredients": [_dump_ingredient(item) for item in ingredients]})
            .eq("id", recipe_id)
            .eq("user", str(owner_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_recipe(response.data[0])

    def delete_recipe(self, recipe_id: int, owner_id: UUID) -> bool:
        """Delete an owned recipe."""
        response = (
            self.client.table(_TABLE)
            .delete()
            .eq("id", recipe_id)
            .eq("user", str(owner_id))
            .execute()
        )
        return bool(response.data)


def _dump_ingredient(ingredient: Ingredient) -> dict[str, object]:
    return {
        "name": ingredient.name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
        "fdc_id": ingredient.food_reference_id,
    }


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return Recipe(
        id=int(row["id"]),
        owner_id=UUID(str(row["user"])),
        ingredients=tuple(_parse_ingredients(row)),
        created_at=created_at,
    )


def _parse_ingredients(row: dict[str, object]) -> list[Ingredient]:
    """Read ingredient objects, or the older parallel-array columns."""
    raw = row.get("ingredients") or []
    if all(isinstance(item, dict) for item in raw):
        return [
            Ingredient(
                name=str(item.get("name", "")),
                amount=float(item.get("amount", 0.0)),
                unit=str(item.get("unit", "")),
                food_reference_id=_optional_int(item.get("fdc_id")),
            )
            for item in raw
        ]

    names = list(raw)
    amounts = list(row.get("amounts") or [])
    units = list(row.get("units") or [])
    fdc_ids = list(row.get("fdcIds") or [None] * len(names))
    if not len(names) == len(amounts) == len(units) == len(fdc_ids):
        raise ValueError(f"Recipe {row.get('id')} has misaligned ingredient columns")
    return [
        Ingredient(
            name=str(name),
            amount=float(amount),
            unit=str(unit),
            food_reference_id=_optional_int(fdc_id),
        )
        for name, amount, unit, fdc_id in zip(
            names, amounts, units, fdc_ids, strict=True
        )
    ]


def _optional_int(value: object) -> int | None:
    if value is None or value == "":
        return None
    return int(value)
