"""Small command-line demo for the tariff catalog.

The script showcases the public surface end to end:

  1) Populates a TariffManager with one tariff of each kind and prints it.
  2) Prints the total number of clients.
  3) Sorts the catalog by monthly fee and prints it again.
  4) Prints the tariffs whose monthly fee falls in a price range.

With ``--list-demo`` it also walks through the TariffLinkedList
constructors and basic operations.

Invalid input (e.g. an inverted price range) is reported on stderr and
the script exits with status 1.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from loguru import logger

from catalog_logging import configure_logger
from tariff_linked_list import TariffLinkedList
from tariff_manager import TariffManager
from tariff_model import BasicTariff, FamilyTariff, MobileTariff, PremiumTariff, format_amount

# ---------------------------------------------------------------------------
# Sample catalog
# ---------------------------------------------------------------------------

DEFAULT_MIN_COST: float = 200.0
DEFAULT_MAX_COST: float = 400.0

NOT_FOUND_MESSAGE = "Тарифiв у заданому дiапазонi не знайдено"


def build_sample_tariffs() -> List[MobileTariff[str]]:
    """One tariff of each kind, in the order they are added to the demo catalog."""
    return [
        BasicTariff("B1", "Базовий", 100.0, 1000, 100, 5000, 0.5),
        PremiumTariff("P1", "Премiум", 500.0, 200, True, 1),
        FamilyTariff("F1", "Сiмейний", 300.0, 150, 4, 50.0),
    ]


def run_manager_demo(
    min_cost: float = DEFAULT_MIN_COST,
    max_cost: float = DEFAULT_MAX_COST,
    stream: Optional[TextIO] = None,
) -> None:
    """Run the catalog walkthrough and print it to ``stream`` (stdout by default)."""
    if stream is None:
        stream = sys.stdout

    manager = TariffManager()
    for tariff in build_sample_tariffs():
        manager.add_tariff(tariff)

    print("Список тарифiв:", file=stream)
    manager.print_tariffs(stream)

    print(f"\nЗагальна кiлькiсть клiєнтiв: {manager.get_total_clients()}", file=stream)

    manager.sort_by_monthly_fee()
    print("\nВiдсортованi тарифи за абонплатою:", file=stream)
    manager.print_tariffs(stream)

    print(
        f"\nТарифи з абонплатою у дiапазонi {format_amount(min_cost)} - {format_amount(max_cost)} грн:",
        file=stream,
    )
    found = manager.find_tariffs_by_price_range(min_cost, max_cost)
    if not found:
        print(NOT_FOUND_MESSAGE, file=stream)
    else:
        for tariff in found:
            print(tariff, file=stream)


def run_linked_list_demo(stream: Optional[TextIO] = None) -> None:
    """Show the TariffLinkedList constructors and a few basic operations."""
    if stream is None:
        stream = sys.stdout

    empty_list: TariffLinkedList[MobileTariff[str]] = TariffLinkedList()
    print(f"Пустий список створено. Розмiр: {empty_list.size()}", file=stream)

    basic_tariff = BasicTariff("B1", "Базовий", 100.0, 1000, 100, 5000, 0.5)
    single_list = TariffLinkedList(basic_tariff)
    print(f"Список з одного тарифу створено. Розмiр: {single_list.size()}", file=stream)

    collection = [
        BasicTariff("B2", "Економ", 75.0, 500, 50, 2000, 0.7),
        PremiumTariff("P1", "Премiум", 500.0, 200, True, 1),
    ]
    list_from_collection = TariffLinkedList(collection)
    print(f"Список з колекцiї створено. Розмiр: {list_from_collection.size()}", file=stream)

    print("\nДемонстрацiя методiв:", file=stream)
    list_from_collection.add(FamilyTariff("F1", "Сiмейний", 300.0, 150, 4, 50.0))
    print(f"Пiсля додавання нового тарифу. Розмiр: {list_from_collection.size()}", file=stream)

    print("\nВсi тарифи у списку:", file=stream)
    for tariff in list_from_collection:
        print(tariff, file=stream)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tariff catalog demo")
    parser.add_argument("--min", dest="min_cost", type=float, default=DEFAULT_MIN_COST,
                        help="Lower bound of the monthly-fee range (inclusive)")
    parser.add_argument("--max", dest="max_cost", type=float, default=DEFAULT_MAX_COST,
                        help="Upper bound of the monthly-fee range (inclusive)")
    parser.add_argument("--list-demo", action="store_true",
                        help="Also run the TariffLinkedList walkthrough")
    parser.add_argument("--log-level", default=None,
                        help="loguru level for stderr diagnostics (default: WARNING)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry-point when running this module as a script."""
    args = parse_args(argv)
    configure_logger(args.log_level)

    try:
        run_manager_demo(args.min_cost, args.max_cost)
        if args.list_demo:
            print()
            run_linked_list_demo()
    except ValueError as exc:
        logger.debug("Demo aborted: {}", exc)
        print(f"Помилка введення даних: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
