"""Mutually exclusive display modes for a recipe."""

import math
from dataclasses import dataclass, replace

from recipe_nutrition.domain.recipes import Recipe

MIN_SCALE_FACTOR = 0.1


@dataclass(frozen=True)
class Viewing:
    """Plain read-only display."""


@dataclass(frozen=True)
class Editing:
    """Draft amounts and units being edited."""

    amounts: tuple[float, ...]
    units: tuple[str, ...]


@dataclass(frozen=True)
class Scaling:
    """Amounts displayed multiplied by a scale factor."""

    scale_factor: float = 1.0


@dataclass(frozen=True)
class Converting:
    """Amounts displayed as gram equivalents."""


RecipeMode = Viewing | Editing | Scaling | Converting


def start_editing(recipe: Recipe) -> Editing:
    """Create an edit draft from the stored recipe."""
    return Editing(
        amounts=tuple(ingredient.amount for ingredient in recipe.ingredients),
        units=tuple(ingredient.unit for ingredient in recipe.ingredients),
    )


def toggle_editing(mode: RecipeMode, recipe: Recipe) -> RecipeMode:
    """Enter edit mode with a fresh draft, or cancel it."""
    if isinstance(mode, Editing):
        return Viewing()
    return start_editing(recipe)


def toggle_scaling(mode: RecipeMode) -> RecipeMode:
    """Enter scaling at 1x, or reset back to viewing."""
    if isinstance(mode, Scaling):
        return Viewing()
    return Scaling()


def toggle_converting(mode: RecipeMode) -> RecipeMode:
    """Enter gram conversion display, or leave it."""
    if isinstance(mode, Converting):
        return Viewing()
    return Converting()


def parse_scale_factor(raw: str | float) -> float | None:
    """Parse a scale factor, returning None when it is unusable."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value) or value < MIN_SCALE_FACTOR:
        return None
    return value


def set_scale_factor(mode: RecipeMode, raw: str | float) -> RecipeMode:
    """Update the scale factor; invalid input keeps the current value."""
    if not isinstance(mode, Scaling):
        return mode
    value = parse_scale_factor(raw)
    if value is None:
        return mode
    return replace(mode, scale_factor=value)


def scale_factor_of(mode: RecipeMode) -> float:
    """Return the active scale factor for a mode."""
    if isinstance(mode, Scaling):
        return mode.scale_factor
    return 1.0


def edit_amount(mode: RecipeMode, index: int, raw: str | float) -> RecipeMode:
    """Replace one draft amount; non-numeric input is ignored."""
    if not isinstance(mode, Editing):
        return mode
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return mode
    if not math.isfinite(value):
        return mode
    amounts = list(mode.amounts)
    amounts[index] = value
    return replace(mode, amounts=tuple(amounts))


def edit_unit(mode: RecipeMode, index: int, value: str) -> RecipeMode:
    """Replace one draft unit."""
    if not isinstance(mode, Editing):
        return mode
    units = list(mode.units)
    units[index] = value
    return replace(mode, units=tuple(units))


def mode_from_name(name: str, scale_factor: float = 1.0) -> RecipeMode:
    """Build a read-only mode from its query-string name."""
    normalized = name.strip().lower()
    if normalized == "scaling":
        factor = parse_scale_factor(scale_factor)
        if factor is None:
            raise ValueError(
                f"Scale factor must be at least {MIN_SCALE_FACTOR}, "
                f"got {scale_factor}."
            )
        return Scaling(scale_factor=factor)
    if normalized == "converting":
        return Converting()
    if normalized == "viewing":
        return Viewing()
    raise ValueError(f"Unknown display mode: {name}")
