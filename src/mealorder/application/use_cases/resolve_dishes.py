from __future__ import annotations

import logging

from mealorder.application.ports.catalog import DishCatalog
from mealorder.domain.order.entities import AggregatedDish, ParsedOrder, aggregate_from
from mealorder.domain.order.errors import OrderError, invalid_dish, multiplicity_violation

logger = logging.getLogger(__name__)


class ResolveDishes:
    def __init__(self, catalog: DishCatalog) -> None:
        self._catalog = catalog

    def execute(self, order: ParsedOrder) -> list[AggregatedDish] | OrderError:
        """Resolve dish ids against the catalog and merge repeats into counts.

        Ids are processed in input order and the first failure is returned
        without a partial result. An order with no dish ids resolves to an
        empty list.
        """
        dishes: list[AggregatedDish] = []
        positions: dict[str, int] = {}

        for dish_id in order.dish_ids:
            definition = self._catalog.lookup(dish_id, order.period.value)
            if definition is None:
                logger.debug(
                    "dish_not_on_menu",
                    extra={"period": order.period.value, "dish_id": dish_id},
                )
                return invalid_dish()

            position = positions.get(definition.name)
            if position is None:
                positions[definition.name] = len(dishes)
                dishes.append(aggregate_from(definition))
                continue

            if not definition.allow_multiple:
                return multiplicity_violation(definition.name)
            dishes[position] = dishes[position].incremented()

        return dishes
