from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from mealorder.application.dto.responses import MenuResponse
from mealorder.application.use_cases.get_menu import GetMenu

router = APIRouter()


def _get_menu_use_case(request: Request) -> GetMenu:
    return GetMenu(catalog=request.app.state.catalog)


@router.get("/v1/menus/{period}", response_model=MenuResponse)
def get_menu(period: str, use_case: GetMenu = Depends(_get_menu_use_case)) -> MenuResponse:
    return use_case.execute(period)
