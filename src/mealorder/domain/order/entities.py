from __future__ import annotations

from dataclasses import dataclass, field, replace

from mealorder.domain.menu.entities import DishDefinition, Period


@dataclass(frozen=True)
class ParsedOrder:
    period: Period
    dish_ids: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AggregatedDish:
    name: str
    category: str
    count: int = 1

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError("count must be >= 1")

    def incremented(self) -> AggregatedDish:
        return replace(self, count=self.count + 1)


def aggregate_from(definition: DishDefinition) -> AggregatedDish:
    return AggregatedDish(name=definition.name, category=definition.category.value)
