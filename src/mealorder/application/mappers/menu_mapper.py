from __future__ import annotations

from collections.abc import Sequence

from mealorder.application.dto.responses import MenuDishResponse, MenuResponse
from mealorder.domain.menu.entities import DishDefinition, Period


def to_menu_response(period: Period, dishes: Sequence[DishDefinition]) -> MenuResponse:
    return MenuResponse(
        period=period.value,
        dishes=[
            MenuDishResponse(
                dishId=int(dish.dish_id),
                name=dish.name,
                category=dish.category.value,
                allowMultiple=dish.allow_multiple,
            )
            for dish in dishes
        ],
    )
