from __future__ import annotations

import itertools
import logging
import sys
from pathlib import Path

import pytest
from prometheus_client import REGISTRY

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from mealorder.application.use_cases.take_order import (
    ERROR_PREFIX,
    TakeOrder,
    build_take_order,
    is_error_result,
)
from mealorder.domain.menu.entities import Period
from mealorder.domain.order.entities import ParsedOrder
from mealorder.infrastructure.catalog.in_memory import build_default_catalog


@pytest.fixture
def take_order() -> TakeOrder:
    return build_take_order(build_default_catalog())


def _sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.mark.parametrize(
    ("raw_text", "expected"),
    [
        ("morning,1,2,3", "eggs,toast,coffee"),
        ("evening,1,2,3,4", "steak,potato,wine,cake"),
        ("morning,3,3,3", "coffee(x3)"),
        ("evening,2,2", "potato(x2)"),
        ("evening,4,2,1,2", "steak,potato(x2),cake"),
        ("Evening, 3, 1", "steak,wine"),
    ],
)
def test_successful_orders(take_order: TakeOrder, raw_text: str, expected: str) -> None:
    assert take_order.execute(raw_text) == expected


@pytest.mark.parametrize(
    ("raw_text", "expected"),
    [
        ("", "error: Invalid order format. Must include period and at least one dish."),
        ("morning", "error: Invalid order format. Must include period and at least one dish."),
        ("1,2,3", "error: Invalid period. Must be 'morning' or 'evening'."),
        ("morning,a", "error: Dishes must be integers."),
        ("morning,4", "error: Invalid dish type for this period."),
        ("evening,0", "error: Invalid dish type for this period."),
        ("evening,1,1", "error: Multiple steak(s) not allowed."),
        ("morning,1,2,2", "error: Multiple toast(s) not allowed."),
        ("evening,3,3", "error: Multiple wine(s) not allowed."),
        ("morning,2147483648", "error: Dishes must be integers."),
        ("morning," + "1" * 5000, "error: Dishes must be integers."),
    ],
)
def test_rejected_orders(take_order: TakeOrder, raw_text: str, expected: str) -> None:
    result = take_order.execute(raw_text)

    assert result == expected
    assert is_error_result(result)


def test_category_order_overrides_input_order(take_order: TakeOrder) -> None:
    for dish_ids in itertools.permutations(["1", "2", "3"]):
        assert take_order.execute(",".join(["morning", *dish_ids])) == "eggs,toast,coffee"


def test_whitespace_is_tolerated(take_order: TakeOrder) -> None:
    assert take_order.execute("  morning  ,  1  ,  2 ,  3 ") == take_order.execute(
        "morning,1,2,3"
    )


def test_repeated_calls_give_identical_output(take_order: TakeOrder) -> None:
    for raw_text in ("evening,2,2,1", "evening,1,1", "morning,3,1,3"):
        assert take_order.execute(raw_text) == take_order.execute(raw_text)


def test_empty_parsed_order_yields_empty_string(take_order: TakeOrder) -> None:
    for period in Period:
        assert take_order.fulfil(ParsedOrder(period=period, dish_ids=())) == ""


def test_error_prefix_detection() -> None:
    assert ERROR_PREFIX == "error: "
    assert not is_error_result("eggs,toast")
    assert not is_error_result("")


def test_outcomes_are_counted(take_order: TakeOrder) -> None:
    accepted_before = _sample("mealorder_orders_total", outcome="accepted")
    rejected_before = _sample("mealorder_orders_total", outcome="rejected")
    multiplicity_before = _sample("mealorder_order_errors_total", kind="MULTIPLICITY_VIOLATION")
    coffee_before = _sample("mealorder_dishes_served_total", period="morning", dish="coffee")

    take_order.execute("morning,3,3")
    take_order.execute("evening,1,1")

    assert _sample("mealorder_orders_total", outcome="accepted") == accepted_before + 1
    assert _sample("mealorder_orders_total", outcome="rejected") == rejected_before + 1
    assert (
        _sample("mealorder_order_errors_total", kind="MULTIPLICITY_VIOLATION")
        == multiplicity_before + 1
    )
    assert (
        _sample("mealorder_dishes_served_total", period="morning", dish="coffee")
        == coffee_before + 2
    )


def test_rejection_is_logged_with_error_kind(
    take_order: TakeOrder,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.INFO, logger="mealorder.application.use_cases.take_order"):
        take_order.execute("evening,9")

    records = [record for record in caplog.records if record.getMessage() == "order_rejected"]
    assert len(records) == 1
    assert records[0].error_kind == "INVALID_DISH"
    assert records[0].period == "evening"
