"""Futures (category F).

Contracts listed on an exchange or regulated market which obligate the buyer
to receive and the seller to deliver the specified assets in the future at an
agreed price. Includes forwards on regulated markets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import NotApplicable, Standardized


class FinancialUnderlying(Attribute):
    BASKET = "B"
    STOCK = "S"
    DEBT = "D"
    CURRENCY = "C"
    INDEX = "I"
    OPTION = "O"
    FUTURE = "F"
    SWAP = "W"
    INTEREST_RATE = "N"
    STOCK_DIVIDEND = "V"
    OTHER = "M"
    UNDEFINED = "X"


class CommodityUnderlying(Attribute):
    EXTRACTION = "E"  # metals, precious metals, coal, oil, gas
    AGRICULTURE = "A"
    INDUSTRIAL = "I"
    SERVICES = "S"
    ENVIRONMENTAL = "N"
    POLYPROPYLENE = "P"
    GENERATED = "H"  # electricity, renewable energy
    OTHER = "M"
    UNDEFINED = "X"


class Delivery(Attribute):
    PHYSICAL = "P"
    CASH = "C"
    NON_DELIVERABLE = "N"
    UNDEFINED = "X"


@final
@dataclass(frozen=True, slots=True)
class Financial(AttributeGroup):
    """Futures on underlying assets other than commodities."""

    tag: ClassVar[str] = "F"

    underlying: FinancialUnderlying
    delivery: Delivery
    standardized: Standardized
    attr4: NotApplicable


@final
@dataclass(frozen=True, slots=True)
class Commodity(AttributeGroup):
    """Futures on bulk goods."""

    tag: ClassVar[str] = "C"

    underlying: CommodityUnderlying
    delivery: Delivery
    standardized: Standardized
    attr4: NotApplicable


type FutureGroup = Financial | Commodity


@final
@dataclass(frozen=True, slots=True)
class Future(Category):
    """Category F."""

    tag: ClassVar[str] = "F"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (Financial, Commodity)

    group: FutureGroup
