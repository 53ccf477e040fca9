from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderErrorKind(str, Enum):
    MALFORMED_ORDER = "MALFORMED_ORDER"
    INVALID_PERIOD = "INVALID_PERIOD"
    INVALID_DISH_ID = "INVALID_DISH_ID"
    INVALID_DISH = "INVALID_DISH"
    MULTIPLICITY_VIOLATION = "MULTIPLICITY_VIOLATION"


@dataclass(frozen=True)
class OrderError:
    """A rejected order, returned (not raised) by the parser and the resolver."""

    kind: OrderErrorKind
    message: str


def malformed_order() -> OrderError:
    return OrderError(
        kind=OrderErrorKind.MALFORMED_ORDER,
        message="Invalid order format. Must include period and at least one dish.",
    )


def invalid_period() -> OrderError:
    return OrderError(
        kind=OrderErrorKind.INVALID_PERIOD,
        message="Invalid period. Must be 'morning' or 'evening'.",
    )


def invalid_dish_id() -> OrderError:
    return OrderError(kind=OrderErrorKind.INVALID_DISH_ID, message="Dishes must be integers.")


def invalid_dish() -> OrderError:
    return OrderError(
        kind=OrderErrorKind.INVALID_DISH,
        message="Invalid dish type for this period.",
    )


def multiplicity_violation(dish_name: str) -> OrderError:
    return OrderError(
        kind=OrderErrorKind.MULTIPLICITY_VIOLATION,
        message=f"Multiple {dish_name}(s) not allowed.",
    )
