"""
Catalog-level operations over a set of mobile tariffs.

TariffManager owns a TariffLinkedList of string-identified tariffs and
answers the questions the business asks about the catalog:

    * how many clients are served in total,
    * which tariffs fall inside a monthly-fee range,
    * what the catalog looks like ordered by monthly fee.

Identifiers are not checked for uniqueness; that is the caller's concern.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from loguru import logger

from tariff_linked_list import TariffLinkedList
from tariff_model import MobileTariff, monthly_fee_key


class TariffManager:
    """In-memory tariff catalog."""

    def __init__(self, tariffs: Optional[Iterable[MobileTariff[str]]] = None) -> None:
        self._tariffs: TariffLinkedList[MobileTariff[str]] = TariffLinkedList()
        if tariffs is not None:
            for tariff in tariffs:
                self.add_tariff(tariff)

    def add_tariff(self, tariff: MobileTariff[str]) -> None:
        """
        Append a tariff to the catalog.

        Raises:
            ValueError: if tariff is None.
            TypeError: if tariff is not a MobileTariff.
        """
        self._tariffs.add(tariff)
        logger.debug("Added tariff {} ({}), catalog size {}", tariff.tariff_id, tariff.kind.value, len(self._tariffs))

    def get_total_clients(self) -> int:
        """Sum of ``number_of_clients`` over the whole catalog."""
        return sum(tariff.number_of_clients for tariff in self._tariffs)

    def sort_by_monthly_fee(self) -> None:
        """
        Order the catalog by ascending monthly fee, in place.

        The sort is stable: tariffs with the same fee keep their
        current relative order.
        """
        self._tariffs.sort(key=monthly_fee_key)
        logger.debug("Sorted {} tariffs by monthly fee", len(self._tariffs))

    def find_tariffs_by_price_range(self, min_cost: float, max_cost: float) -> List[MobileTariff[str]]:
        """
        Return the tariffs whose monthly fee lies in ``[min_cost, max_cost]``.

        Both bounds are inclusive. The result keeps the current catalog
        order. The range is validated before the catalog is scanned.

        Raises:
            ValueError: if a bound is negative, or min_cost > max_cost.
        """
        if min_cost < 0 or max_cost < 0:
            raise ValueError("Цiновий дiапазон не може бути вiд'ємним")
        if min_cost > max_cost:
            raise ValueError("Мiнiмальна цiна не може бути бiльшою за максимальну")

        found = [tariff for tariff in self._tariffs if min_cost <= tariff.monthly_fee <= max_cost]
        logger.debug("Found {} tariffs with monthly fee in [{}, {}]", len(found), min_cost, max_cost)
        return found

    def print_tariffs(self, stream: Optional[TextIO] = None) -> None:
        """Write every tariff on its own line, in catalog order (stdout by default)."""
        if stream is None:
            stream = sys.stdout
        for tariff in self._tariffs:
            print(tariff, file=stream)

    @property
    def tariffs(self) -> List[MobileTariff[str]]:
        """Snapshot of the catalog in its current order."""
        return self._tariffs.to_array()

    def __len__(self) -> int:
        return len(self._tariffs)

    def __iter__(self) -> Iterator[MobileTariff[str]]:
        return iter(self._tariffs)
