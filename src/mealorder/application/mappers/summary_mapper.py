from __future__ import annotations

from collections.abc import Sequence

from mealorder.domain.menu.entities import CATEGORY_PRECEDENCE
from mealorder.domain.order.entities import AggregatedDish

_CATEGORY_RANK = {category.value: rank for rank, category in enumerate(CATEGORY_PRECEDENCE)}


def _category_rank(dish: AggregatedDish) -> int:
    # Unknown categories go after every known one.
    return _CATEGORY_RANK.get(dish.category, len(_CATEGORY_RANK))


def format_dish(dish: AggregatedDish) -> str:
    if dish.count > 1:
        return f"{dish.name}(x{dish.count})"
    return dish.name


def format_summary(dishes: Sequence[AggregatedDish]) -> str:
    return ",".join(format_dish(dish) for dish in sorted(dishes, key=_category_rank))
