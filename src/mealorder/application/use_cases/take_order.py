from __future__ import annotations

import logging
import re

from mealorder.application.mappers.summary_mapper import format_summary
from mealorder.application.metrics.order_outcomes import (
    record_order_accepted,
    record_order_rejected,
)
from mealorder.application.ports.catalog import DishCatalog
from mealorder.application.use_cases.resolve_dishes import ResolveDishes
from mealorder.domain.menu.entities import Period
from mealorder.domain.order.entities import ParsedOrder
from mealorder.domain.order.errors import (
    OrderError,
    invalid_dish_id,
    invalid_period,
    malformed_order,
)

logger = logging.getLogger(__name__)

ERROR_PREFIX = "error: "

# Sign and significant digits; an int32 has at most ten.
_DISH_ID_PATTERN = re.compile(r"([+-]?)0*([0-9]{1,10})")
_DISH_ID_MIN = -(2**31)
_DISH_ID_MAX = 2**31 - 1


def is_error_result(result: str) -> bool:
    return result.startswith(ERROR_PREFIX)


def parse_order(raw_text: str) -> ParsedOrder | OrderError:
    """Parse ``"<period>, <id>, <id>, ..."`` into a :class:`ParsedOrder`.

    Whitespace around every segment is ignored and the period is matched
    case-insensitively. Dish ids must fit a signed 32-bit integer and keep
    their input order, duplicates included.
    """
    segments = raw_text.split(",")
    if len(segments) < 2:
        return malformed_order()

    period = Period.parse(segments[0])
    if period is None:
        return invalid_period()

    dish_ids: list[int] = []
    for segment in segments[1:]:
        token = segment.strip()
        match = _DISH_ID_PATTERN.fullmatch(token)
        if match is None:
            return invalid_dish_id()
        dish_id = int(match.group(1) + match.group(2))
        if not _DISH_ID_MIN <= dish_id <= _DISH_ID_MAX:
            return invalid_dish_id()
        dish_ids.append(dish_id)

    return ParsedOrder(period=period, dish_ids=tuple(dish_ids))


class TakeOrder:
    def __init__(self, resolver: ResolveDishes) -> None:
        self._resolver = resolver

    def execute(self, raw_text: str) -> str:
        parsed = parse_order(raw_text)
        if isinstance(parsed, OrderError):
            return self._rejected(parsed, period=None)
        return self.fulfil(parsed)

    def fulfil(self, order: ParsedOrder) -> str:
        dishes = self._resolver.execute(order)
        if isinstance(dishes, OrderError):
            return self._rejected(dishes, period=order.period)

        record_order_accepted(order.period, dishes)
        logger.info(
            "order_processed",
            extra={
                "period": order.period.value,
                "outcome": "accepted",
                "dish_count": sum(dish.count for dish in dishes),
            },
        )
        return format_summary(dishes)

    def _rejected(self, error: OrderError, period: Period | None) -> str:
        record_order_rejected(error)
        logger.info(
            "order_rejected",
            extra={
                "period": period.value if period is not None else None,
                "outcome": "rejected",
                "error_kind": error.kind.value,
            },
        )
        return f"{ERROR_PREFIX}{error.message}"


def build_take_order(catalog: DishCatalog) -> TakeOrder:
    return TakeOrder(resolver=ResolveDishes(catalog=catalog))
