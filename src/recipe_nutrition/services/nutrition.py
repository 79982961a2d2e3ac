"""Nutrition service integrating USDA FDC."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from recipe_nutrition.adapters.fdc_client import FdcClient
from recipe_nutrition.domain.nutrition import (
    FoodRecord,
    FoodSummary,
    NutrientEntry,
    PortionEntry,
)
from recipe_nutrition.services.cache import Cache

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class NutritionService:
    """Service for nutrition lookups with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 25) -> list[FoodSummary]:
        """Search FDC foods with caching."""
        cache_key = f"fdc:search:{query.strip().lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [parse_food_summary(food) for food in payload.get("foods", [])]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info("Nutrition search FDC: query=%s results=%s", query, len(foods))
        return foods

    async def get_food(self, fdc_id: int) -> FoodRecord:
        """Retrieve a food record with nutrients and portions from FDC."""
        cached = self.cache.get(_food_cache_key(fdc_id))
        if isinstance(cached, FoodRecord):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        record = parse_food_record(payload)
        self.cache.set(_food_cache_key(fdc_id), record, self.food_ttl_seconds)
        return record

    async def get_foods(self, fdc_ids: list[int | None]) -> list[FoodRecord]:
        """Retrieve food records for a batch of ids.

        Null and duplicate ids are dropped. Ids FDC cannot resolve are omitted
        from the result instead of failing the batch; transport failures
        propagate to the caller.
        """
        wanted = _unique_ids(fdc_ids)
        records: dict[int, FoodRecord] = {}
        missing: list[int] = []
        for fdc_id in wanted:
            cached = self.cache.get(_food_cache_key(fdc_id))
            if isinstance(cached, FoodRecord):
                records[fdc_id] = cached
            else:
                missing.append(fdc_id)

        if missing:
            payloads = await self._call_with_retry(
                lambda: self.fdc_client.get_foods(missing),
                action=f"get_foods:{len(missing)}",
            )
            for payload in payloads:
                try:
                    record = parse_food_record(payload)
                except (KeyError, TypeError, ValueError):
                    _logger.warning("Skipping malformed FDC food payload")
                    continue
                records[record.fdc_id] = record
                self.cache.set(
                    _food_cache_key(record.fdc_id), record, self.food_ttl_seconds
                )
            unresolved = [fdc_id for fdc_id in missing if fdc_id not in records]
            if unresolved:
                _logger.warning("FDC returned no data for fdc_ids=%s", unresolved)

        return [records[fdc_id] for fdc_id in wanted if fdc_id in records]

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[object]]", *, action: str
    ) -> object:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                _logger.warning(
                    "Nutrition %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    status_code,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def parse_food_summary(food: dict[str, object]) -> FoodSummary:
    """Parse an FDC search hit."""
    return FoodSummary(
        fdc_id=int(food["fdcId"]),
        description=str(food.get("description", "")),
        brand_owner=food.get("brandOwner"),
        brand_name=food.get("brandName"),
        data_type=food.get("dataType"),
    )


def parse_food_record(payload: dict[str, object]) -> FoodRecord:
    """Parse an FDC food details payload into a food record."""
    portions = _parse_portions(payload.get("foodPortions") or [])
    if not portions:
        serving = _serving_portion(payload)
        if serving is not None:
            portions = [serving]
    return FoodRecord(
        fdc_id=int(payload["fdcId"]),
        description=str(payload.get("description", "")),
        nutrients=tuple(_parse_nutrients(payload.get("foodNutrients") or [])),
        portions=tuple(portions),
    )


def _parse_nutrients(food_nutrients: list[dict[str, object]]) -> list[NutrientEntry]:
    """Parse nutrients from both the full and abridged FDC formats."""
    entries: list[NutrientEntry] = []
    for nutrient in food_nutrients:
        info = nutrient.get("nutrient") or {}
        name = info.get("name") or nutrient.get("name") or nutrient.get("nutrientName")
        amount = nutrient.get("amount", nutrient.get("value"))
        unit_name = info.get("unitName") or nutrient.get("unitName")
        if not name or amount is None:
            continue
        # Energy is reported in both kcal and kJ; only kcal is tracked.
        if isinstance(unit_name, str) and unit_name.lower() == "kj":
            continue
        entries.append(
            NutrientEntry(name=str(name), amount=float(amount), unit_name=unit_name)
        )
    return entries


def _parse_portions(food_portions: list[dict[str, object]]) -> list[PortionEntry]:
    portions: list[PortionEntry] = []
    for portion in food_portions:
        gram_weight = portion.get("gramWeight")
        portions.append(
            PortionEntry(
                description=_portion_description(portion),
                gram_weight=float(gram_weight) if gram_weight is not None else None,
            )
        )
    return portions


def _portion_description(portion: dict[str, object]) -> str:
    """Describe a portion; SR Legacy foods leave portionDescription empty."""
    description = portion.get("portionDescription")
    if description and description != "Quantity not specified":
        return str(description)
    measure_unit = portion.get("measureUnit") or {}
    unit_name = measure_unit.get("name")
    parts = [
        str(part)
        for part in (
            portion.get("amount"),
            unit_name if unit_name != "undetermined" else None,
            portion.get("modifier"),
        )
        if part not in (None, "")
    ]
    return " ".join(parts)


def _serving_portion(payload: dict[str, object]) -> PortionEntry | None:
    """Use a branded food's gram serving size as its only portion."""
    serving_size = payload.get("servingSize")
    serving_unit = str(payload.get("servingSizeUnit") or "").lower()
    if serving_size is None or serving_unit not in {"g", "grm"}:
        return None
    household = payload.get("householdServingFullText") or "1 serving"
    return PortionEntry(description=str(household), gram_weight=float(serving_size))


def _unique_ids(fdc_ids: list[int | None]) -> list[int]:
    unique: list[int] = []
    for fdc_id in fdc_ids:
        if fdc_id is None or fdc_id in unique:
            continue
        unique.append(fdc_id)
    return unique


def _food_cache_key(fdc_id: int) -> str:
    return f"fdc:food:{fdc_id}"


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
