from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mealorder.domain.common.ids import DishId


class Period(str, Enum):
    MORNING = "morning"
    EVENING = "evening"

    @classmethod
    def parse(cls, token: str) -> Period | None:
        normalized = token.strip().lower()
        for period in cls:
            if period.value == normalized:
                return period
        return None


class Category(str, Enum):
    ENTREE = "entrée"
    SIDE = "side"
    DRINK = "drink"
    DESSERT = "dessert"


CATEGORY_PRECEDENCE: tuple[Category, ...] = (
    Category.ENTREE,
    Category.SIDE,
    Category.DRINK,
    Category.DESSERT,
)


@dataclass(frozen=True)
class DishDefinition:
    dish_id: DishId
    name: str
    category: Category
    period: Period
    allow_multiple: bool = False

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")
