from __future__ import annotations

from collections.abc import Sequence

from prometheus_client import Counter

from mealorder.domain.menu.entities import Period
from mealorder.domain.order.entities import AggregatedDish
from mealorder.domain.order.errors import OrderError

ORDERS_TOTAL = Counter(
    "mealorder_orders_total",
    "Total number of orders processed by outcome.",
    ["outcome"],
)

ORDER_ERRORS_TOTAL = Counter(
    "mealorder_order_errors_total",
    "Total number of rejected orders by error kind.",
    ["kind"],
)

DISHES_SERVED_TOTAL = Counter(
    "mealorder_dishes_served_total",
    "Total number of dish servings in accepted orders.",
    ["period", "dish"],
)


def record_order_accepted(period: Period, dishes: Sequence[AggregatedDish]) -> None:
    ORDERS_TOTAL.labels(outcome="accepted").inc()
    for dish in dishes:
        DISHES_SERVED_TOTAL.labels(period=period.value, dish=dish.name).inc(dish.count)


def record_order_rejected(error: OrderError) -> None:
    ORDERS_TOTAL.labels(outcome="rejected").inc()
    ORDER_ERRORS_TOTAL.labels(kind=error.kind.value).inc()
