from __future__ import annotations

from typing import Protocol

from mealorder.domain.menu.entities import DishDefinition


class DishCatalog(Protocol):
    def lookup(self, dish_id: int, period: str) -> DishDefinition | None: ...

    def dishes_for(self, period: str) -> tuple[DishDefinition, ...]: ...
