"""Conversion of recipe quantities to grams."""

import logging

from recipe_nutrition.domain.nutrition import FoodRecord, GramConversion, PortionEntry

MASS_UNITS: dict[str, float] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
    "oz": 28.35,
    "ounce": 28.35,
    "ounces": 28.35,
    "lb": 453.592,
    "lbs": 453.592,
    "pound": 453.592,
    "pounds": 453.592,
}

_logger = logging.getLogger(__name__)


def normalize_unit(unit: str) -> str:
    """Return the unit trimmed and lowercased."""
    return unit.strip().lower()


def convert_to_grams(
    amount: float, unit: str, food: FoodRecord | None = None
) -> GramConversion:
    """Convert an amount in a recipe unit to grams.

    Mass units use fixed ratios. Other units are resolved against the food's
    portion weights: a portion whose description contains the unit wins,
    otherwise the first weighted portion is used as an approximation. With no
    portion data the amount is assumed to already be in grams.
    """
    normalized = normalize_unit(unit)
    factor = MASS_UNITS.get(normalized)
    if factor is not None:
        return GramConversion(value=amount * factor, exact=True, method="mass")

    portions = food.portions if food is not None else ()
    matched = _match_portion(portions, normalized)
    if matched is not None:
        return GramConversion(
            value=amount * matched.gram_weight, exact=True, method="portion"
        )

    first = _first_weighted_portion(portions)
    if first is not None:
        _logger.warning(
            "No portion matches unit %r for fdc_id=%s; using %r",
            normalized,
            food.fdc_id if food else None,
            first.description,
        )
        return GramConversion(
            value=amount * first.gram_weight, exact=False, method="first_portion"
        )

    _logger.warning(
        "No conversion data for unit %r (fdc_id=%s); assuming grams",
        normalized,
        food.fdc_id if food else None,
    )
    return GramConversion(value=amount, exact=False, method="assumed_grams")


def _match_portion(
    portions: tuple[PortionEntry, ...], unit: str
) -> PortionEntry | None:
    """Find the first weighted portion whose description contains the unit."""
    if not unit:
        return None
    for portion in portions:
        if portion.gram_weight is None:
            continue
        if unit in portion.description.lower():
            return portion
    return None


def _first_weighted_portion(
    portions: tuple[PortionEntry, ...],
) -> PortionEntry | None:
    for portion in portions:
        if portion.gram_weight is not None:
            return portion
    return None
