"""
Core tariff domain model.

This module defines the closed family of mobile-telephony tariff records
that the rest of the catalog stores, sorts and renders.

It defines:
- TariffKind: the tag of each tariff variant (basic / premium / family).
- MobileTariff: the abstract, generic base record (identifier, name, monthly fee, client count).
- BasicTariff, PremiumTariff, FamilyTariff: the concrete variants and their total-cost rules.
- format_amount / monthly_fee_key / compare_by_monthly_fee: small helpers shared by the manager and the demo.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Type, TypeVar, Union


IdT = TypeVar("IdT")

# Flat surcharge added to a premium tariff when roaming is included.
ROAMING_SURCHARGE: float = 100.0

# Fees are always rendered with two decimals, rounded half-up.
PRICE_DECIMALS: int = 2
_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMALS)


class TariffKind(str, Enum):
    """Tag of the closed tariff variant family."""

    BASIC = "basic"
    PREMIUM = "premium"
    FAMILY = "family"


def format_amount(value: float) -> str:
    """
    Format a money amount with PRICE_DECIMALS digits, rounding half-up.

    The value goes through its shortest decimal representation first, so
    2.675 renders as "2.68" (not "2.67" as binary rounding would give),
    and the result never depends on the process locale.

    Example:
        100 -> "100.00"
        0.125 -> "0.13"
    """
    if not math.isfinite(value):
        return f"{value:.{PRICE_DECIMALS}f}"
    rounded = Decimal(str(value)).quantize(_PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


@dataclass(frozen=True)
class MobileTariff(ABC, Generic[IdT]):
    """
    Abstract tariff record shared by all variants.

    The identifier type is a parameter of the record only: the catalog
    compares identifiers for equality but never interprets them, and
    does not enforce their uniqueness.

    Natural ordering (<, <=, >, >=) looks at ``monthly_fee`` only, so
    records of different variants can be sorted together. Equality is
    the dataclass one: same concrete variant and identical fields.

    Raises:
        ValueError: if monthly_fee or number_of_clients is negative.
    """

    kind: ClassVar[TariffKind]

    tariff_id: IdT
    name: str
    monthly_fee: float
    number_of_clients: int

    def __post_init__(self) -> None:
        if self.monthly_fee < 0:
            raise ValueError("Щомiсячна плата не може бути вiд'ємною")
        if self.number_of_clients < 0:
            raise ValueError("Кiлькiсть клiєнтiв не може бути вiд'ємною")

    @abstractmethod
    def total_cost(self) -> float:
        """Effective monthly charge of the tariff, never below the monthly fee."""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MobileTariff):
            return NotImplemented
        return self.monthly_fee < other.monthly_fee

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MobileTariff):
            return NotImplemented
        return self.monthly_fee <= other.monthly_fee

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MobileTariff):
            return NotImplemented
        return self.monthly_fee > other.monthly_fee

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MobileTariff):
            return NotImplemented
        return self.monthly_fee >= other.monthly_fee

    def __str__(self) -> str:
        return (
            f"Тариф '{self.name}' (ID: {self.tariff_id}): "
            f"{format_amount(self.monthly_fee)} грн/мiс, "
            f"{self.number_of_clients} клiєнтiв"
        )


@dataclass(frozen=True)
class BasicTariff(MobileTariff[IdT]):
    """
    Tariff with a limited bundle of minutes and megabytes.

    The bundle attributes are recorded for display and comparison only;
    usage-based billing is not modelled, so the total cost is just the
    monthly fee.
    """

    kind: ClassVar[TariffKind] = TariffKind.BASIC

    included_minutes: int
    included_megabytes: int
    extra_minutes_cost: float

    def total_cost(self) -> float:
        return self.monthly_fee


@dataclass(frozen=True)
class PremiumTariff(MobileTariff[IdT]):
    """Unlimited tariff, optionally with roaming (adds ROAMING_SURCHARGE)."""

    kind: ClassVar[TariffKind] = TariffKind.PREMIUM

    includes_roaming: bool
    priority_support: int

    def total_cost(self) -> float:
        return self.monthly_fee + (ROAMING_SURCHARGE if self.includes_roaming else 0)


@dataclass(frozen=True)
class FamilyTariff(MobileTariff[IdT]):
    """
    Shared tariff for several lines.

    The monthly fee covers the first line; every additional line costs
    ``per_line_cost``.
    """

    kind: ClassVar[TariffKind] = TariffKind.FAMILY

    number_of_lines: int
    per_line_cost: float

    def total_cost(self) -> float:
        return self.monthly_fee + (self.number_of_lines - 1) * self.per_line_cost


Tariff = Union[BasicTariff, PremiumTariff, FamilyTariff]

# The variant family is closed: a new kind of tariff needs an entry here.
TARIFF_CLASSES: Dict[TariffKind, Type[MobileTariff[Any]]] = {
    TariffKind.BASIC: BasicTariff,
    TariffKind.PREMIUM: PremiumTariff,
    TariffKind.FAMILY: FamilyTariff,
}


def create_tariff(kind: Union[TariffKind, str], *args: Any, **kwargs: Any) -> MobileTariff[Any]:
    """
    Build a tariff record from its variant tag.

    Positional and keyword arguments are forwarded to the variant's
    constructor, e.g.:

        create_tariff("family", "F1", "Сiмейний", 300.0, 150, 4, 50.0)

    Raises:
        ValueError: if the tag is unknown, or the record fails validation.
    """
    try:
        tariff_kind = TariffKind(kind)
    except ValueError:
        raise ValueError(f"Невiдомий тип тарифу: {kind!r}")

    return TARIFF_CLASSES[tariff_kind](*args, **kwargs)


def monthly_fee_key(tariff: MobileTariff[Any]) -> float:
    """Sort key implementing the natural ordering of tariffs."""
    return tariff.monthly_fee


def compare_by_monthly_fee(left: MobileTariff[Any], right: MobileTariff[Any]) -> int:
    """Three-way comparison by monthly fee: -1, 0 or 1."""
    if left.monthly_fee < right.monthly_fee:
        return -1
    if left.monthly_fee > right.monthly_fee:
        return 1
    return 0
