from __future__ import annotations

from mealorder.application.dto.responses import MenuResponse
from mealorder.application.mappers.menu_mapper import to_menu_response
from mealorder.application.ports.catalog import DishCatalog
from mealorder.domain.menu.entities import Period


class MenuNotFoundError(Exception):
    pass


class GetMenu:
    def __init__(self, catalog: DishCatalog) -> None:
        self._catalog = catalog

    def execute(self, period: str) -> MenuResponse:
        parsed_period = Period.parse(period)
        if parsed_period is None:
            raise MenuNotFoundError(f"menu not found for period={period}")
        return to_menu_response(parsed_period, self._catalog.dishes_for(parsed_period.value))
