from __future__ import annotations

from pydantic import BaseModel, Field


class OrderSummaryResponse(BaseModel):
    data: str


class MenuDishResponse(BaseModel):
    dishId: int
    name: str
    category: str
    allowMultiple: bool


class MenuResponse(BaseModel):
    period: str
    dishes: list[MenuDishResponse] = Field(default_factory=list)
