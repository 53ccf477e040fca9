from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from mealorder.application.ports.catalog import DishCatalog
from mealorder.application.use_cases.get_menu import GetMenu
from mealorder.application.use_cases.take_order import TakeOrder, build_take_order, is_error_result
from mealorder.domain.menu.entities import Period
from mealorder.infrastructure.catalog.in_memory import build_default_catalog
from mealorder.infrastructure.observability.logging_config import configure_logging

EXIT_COMMAND = "exit"
SEPARATOR = "------------"


def banner_lines(catalog: DishCatalog) -> list[str]:
    lines = ["Welcome to the meal ordering system!", "Examples of valid input:", SEPARATOR]
    get_menu = GetMenu(catalog=catalog)
    for period in Period:
        menu = get_menu.execute(period.value)
        lines.append(period.value.capitalize())
        lines.extend(f"{dish.dishId} - {dish.name.capitalize()}" for dish in menu.dishes)
        lines.append(SEPARATOR)
    lines.append("To make an order, follow the instructions below:")
    lines.append("M[m]orning, 1,2,3 [enter] or E[e]vening, 1,2,3,4 [enter]")
    lines.append("Enter your order:")
    return lines


def run(take_order: TakeOrder, stdin: TextIO, stdout: TextIO) -> None:
    for line in stdin:
        unparsed_order = line.rstrip("\r\n")
        if unparsed_order.strip().lower() == EXIT_COMMAND:
            print("Exiting the meal ordering system. Goodbye!", file=stdout)
            return

        output = take_order.execute(unparsed_order)
        print(output, file=stdout)
        if is_error_result(output):
            print("Please correct your input and try again.", file=stdout)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive meal ordering console.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for the JSON log stream (default: WARNING).",
    )
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    catalog = build_default_catalog()
    for line in banner_lines(catalog):
        print(line, file=stdout)
    run(build_take_order(catalog), stdin=stdin, stdout=stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
