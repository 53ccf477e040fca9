from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from mealorder.application.use_cases.resolve_dishes import ResolveDishes
from mealorder.domain.menu.entities import DishDefinition, Period
from mealorder.domain.order.entities import AggregatedDish, ParsedOrder
from mealorder.domain.order.errors import OrderError, OrderErrorKind
from mealorder.infrastructure.catalog.in_memory import build_default_catalog


class RecordingCatalog:
    def __init__(self) -> None:
        self._catalog = build_default_catalog()
        self.calls: list[tuple[int, str]] = []

    def lookup(self, dish_id: int, period: str) -> DishDefinition | None:
        self.calls.append((dish_id, period))
        return self._catalog.lookup(dish_id, period)

    def dishes_for(self, period: str) -> tuple[DishDefinition, ...]:
        return self._catalog.dishes_for(period)


def _resolve(period: Period, *dish_ids: int) -> list[AggregatedDish] | OrderError:
    return ResolveDishes(catalog=build_default_catalog()).execute(
        ParsedOrder(period=period, dish_ids=dish_ids)
    )


def test_empty_order_resolves_to_empty_list() -> None:
    assert _resolve(Period.EVENING) == []


def test_dishes_keep_first_occurrence_order() -> None:
    result = _resolve(Period.EVENING, 4, 1, 3)

    assert result == [
        AggregatedDish(name="cake", category="dessert"),
        AggregatedDish(name="steak", category="entrée"),
        AggregatedDish(name="wine", category="drink"),
    ]


def test_repeated_multiple_allowed_dish_is_counted() -> None:
    result = _resolve(Period.MORNING, 3, 1, 3, 3)

    assert result == [
        AggregatedDish(name="coffee", category="drink", count=3),
        AggregatedDish(name="eggs", category="entrée", count=1),
    ]


def test_repeated_single_serving_dish_is_rejected() -> None:
    result = _resolve(Period.EVENING, 1, 2, 1)

    assert isinstance(result, OrderError)
    assert result.kind is OrderErrorKind.MULTIPLICITY_VIOLATION
    assert result.message == "Multiple steak(s) not allowed."


def test_unknown_dish_for_period_is_rejected() -> None:
    result = _resolve(Period.MORNING, 1, 4)

    assert isinstance(result, OrderError)
    assert result.kind is OrderErrorKind.INVALID_DISH
    assert result.message == "Invalid dish type for this period."


def test_first_error_stops_resolution() -> None:
    catalog = RecordingCatalog()

    result = ResolveDishes(catalog=catalog).execute(
        ParsedOrder(period=Period.MORNING, dish_ids=(1, 9, 1, 2))
    )

    assert isinstance(result, OrderError)
    assert result.kind is OrderErrorKind.INVALID_DISH
    assert catalog.calls == [(1, "morning"), (9, "morning")]


def test_invalid_dish_reported_before_later_multiplicity_violation() -> None:
    result = _resolve(Period.EVENING, 5, 1, 1)

    assert isinstance(result, OrderError)
    assert result.kind is OrderErrorKind.INVALID_DISH


def test_multiplicity_violation_reported_before_later_invalid_dish() -> None:
    result = _resolve(Period.EVENING, 1, 1, 5)

    assert isinstance(result, OrderError)
    assert result.kind is OrderErrorKind.MULTIPLICITY_VIOLATION
