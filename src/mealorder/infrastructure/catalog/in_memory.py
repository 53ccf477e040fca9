from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from types import MappingProxyType

from mealorder.domain.common.ids import DishId
from mealorder.domain.menu.entities import Category, DishDefinition, Period

SEED_DISHES: tuple[DishDefinition, ...] = (
    DishDefinition(DishId(1), "eggs", Category.ENTREE, Period.MORNING, allow_multiple=False),
    DishDefinition(DishId(2), "toast", Category.SIDE, Period.MORNING, allow_multiple=False),
    DishDefinition(DishId(3), "coffee", Category.DRINK, Period.MORNING, allow_multiple=True),
    DishDefinition(DishId(1), "steak", Category.ENTREE, Period.EVENING, allow_multiple=False),
    DishDefinition(DishId(2), "potato", Category.SIDE, Period.EVENING, allow_multiple=True),
    DishDefinition(DishId(3), "wine", Category.DRINK, Period.EVENING, allow_multiple=False),
    DishDefinition(DishId(4), "cake", Category.DESSERT, Period.EVENING, allow_multiple=False),
)


class InMemoryDishCatalog:
    """Read-only dish catalog keyed by (period, dish id).

    Periods are matched case-insensitively. A period with no entries at all
    yields no definition for any id.
    """

    def __init__(self, definitions: Iterable[DishDefinition]) -> None:
        by_period: dict[str, dict[int, DishDefinition]] = {}
        for definition in definitions:
            period_dishes = by_period.setdefault(definition.period.value, {})
            if definition.dish_id in period_dishes:
                raise ValueError(
                    f"duplicate dish id={definition.dish_id} for period={definition.period.value}"
                )
            period_dishes[definition.dish_id] = definition

        self._by_period = MappingProxyType(
            {period: MappingProxyType(dishes) for period, dishes in by_period.items()}
        )

    def lookup(self, dish_id: int, period: str) -> DishDefinition | None:
        period_dishes = self._by_period.get(period.lower())
        if not period_dishes:
            return None
        return period_dishes.get(dish_id)

    def dishes_for(self, period: str) -> tuple[DishDefinition, ...]:
        period_dishes = self._by_period.get(period.lower(), {})
        return tuple(period_dishes[dish_id] for dish_id in sorted(period_dishes))


@lru_cache(maxsize=1)
def build_default_catalog() -> InMemoryDishCatalog:
    return InMemoryDishCatalog(SEED_DISHES)
