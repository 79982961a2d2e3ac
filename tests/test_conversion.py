"""Tests for unit conversion to grams."""

import logging

import pytest

from recipe_nutrition.app_logging import LOGGER_NAME
from recipe_nutrition.services.conversion import convert_to_grams
from tests.conftest import make_food


def test_mass_units_use_fixed_ratios() -> None:
    assert convert_to_grams(5, "kg", None).value == 5000
    assert convert_to_grams(2, "lb", None).value == pytest.approx(907.184)
    assert convert_to_grams(3, "oz", None).value == pytest.approx(85.05)
    assert convert_to_grams(250, "g", None).value == 250


def test_mass_unit_is_normalized_and_aliased() -> None:
    result = convert_to_grams(1, "  Pounds ", None)

    assert result.value == pytest.approx(453.592)
    assert result.exact is True
    assert result.method == "mass"


def test_mass_unit_ignores_portions() -> None:
    food = make_food(portions=[("1 g serving", 50)])

    result = convert_to_grams(2, "g", food)

    assert result.value == 2
    assert result.method == "mass"


def test_matching_portion_is_used() -> None:
    food = make_food(portions=[("1 tbsp", 15), ("1 cup", 240)])

    result = convert_to_grams(1, "cup", food)

    assert result.value == 240
    assert result.exact is True
    assert result.method == "portion"


def test_portion_match_is_case_insensitive_substring() -> None:
    food = make_food(portions=[("1 Cup, chopped", 160)])

    assert convert_to_grams(0.5, "CUP", food).value == 80


def test_unmatched_unit_falls_back_to_first_portion() -> None:
    food = make_food(portions=[("1 slice", 30), ("1 cup", 240)])

    result = convert_to_grams(1, "unknown", food)

    assert result.value == 30
    assert result.exact is False
    assert result.method == "first_portion"


def test_portion_without_weight_is_skipped() -> None:
    food = make_food(portions=[("1 cup", None), ("1 cup, packed", 220)])

    result = convert_to_grams(1, "cup", food)

    assert result.value == 220
    assert result.method == "portion"


def test_no_conversion_data_passes_amount_through() -> None:
    result = convert_to_grams(3, "xyz", None)

    assert result.value == 3
    assert result.exact is False
    assert result.method == "assumed_grams"


def test_food_without_portions_passes_amount_through() -> None:
    food = make_food(portions=[])

    assert convert_to_grams(7, "pinch", food).value == 7


def test_portions_without_any_weight_pass_amount_through() -> None:
    food = make_food(portions=[("1 cup", None)])

    result = convert_to_grams(2, "slice", food)

    assert result.value == 2
    assert result.method == "assumed_grams"


@pytest.fixture
def conversion_warnings(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> pytest.LogCaptureFixture:
    monkeypatch.setattr(logging.getLogger(LOGGER_NAME), "propagate", True)
    caplog.set_level(logging.WARNING, logger="recipe_nutrition.services.conversion")
    return caplog


def _warnings(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [
        record
        for record in caplog.records
        if record.name == "recipe_nutrition.services.conversion"
        and record.levelno == logging.WARNING
    ]


def test_fallback_conversions_log_warnings(conversion_warnings) -> None:
    food = make_food(portions=[("1 slice", 30)])

    convert_to_grams(1, "zz", food)
    assert len(_warnings(conversion_warnings)) == 1
    assert "1 slice" in _warnings(conversion_warnings)[0].getMessage()

    conversion_warnings.clear()
    convert_to_grams(3, "xyz", None)
    assert len(_warnings(conversion_warnings)) == 1
    assert "assuming grams" in _warnings(conversion_warnings)[0].getMessage()


def test_exact_conversions_do_not_warn(conversion_warnings) -> None:
    food = make_food(portions=[("1 cup", 240)])

    convert_to_grams(2, "kg", None)
    convert_to_grams(1, "cup", food)

    assert _warnings(conversion_warnings) == []
