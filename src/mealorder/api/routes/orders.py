from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from opentelemetry import trace

from mealorder.application.dto.responses import OrderSummaryResponse
from mealorder.application.use_cases.take_order import TakeOrder, is_error_result

router = APIRouter()


def _take_order_use_case(request: Request) -> TakeOrder:
    return request.app.state.take_order


@router.get("/order", response_model=OrderSummaryResponse)
def take_order(
    unparsed_order: str = Query(alias="unparsedOrder"),
    use_case: TakeOrder = Depends(_take_order_use_case),
) -> OrderSummaryResponse:
    result = use_case.execute(unparsed_order)
    trace.get_current_span().set_attribute("mealorder.order.rejected", is_error_result(result))
    return OrderSummaryResponse(data=result)
