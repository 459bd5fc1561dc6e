"""Swaps (category S).

Agreements where two counterparties exchange periodic streams of cash flows.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import NotApplicable

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class RateUnderlying(Attribute):
    BASIS = "A"  # floating/floating
    FIXED_FLOATING = "C"
    FIXED_FIXED = "D"
    INFLATION = "G"
    OVERNIGHT_INDEX = "H"
    ZERO_COUPON = "Z"
    OTHER = "M"
    UNDEFINED = "X"


class Notional(Attribute):
    """Face amount upon which the payment streams are based."""

    CONSTANT = "C"
    ACCRETING = "I"
    AMORTIZING = "D"
    CUSTOM = "Y"
    UNDEFINED = "X"


class RateCurrency(Attribute):
    SINGLE = "S"
    CROSS = "C"
    UNDEFINED = "X"


class RateDelivery(Attribute):
    """Whether each leg pays in the currency of its notional."""

    DELIVERABLE = "D"
    NON_DELIVERABLE = "N"
    UNDEFINED = "X"


class CommodityUnderlying(Attribute):
    ENERGY = "J"
    METALS = "K"
    AGRICULTURE = "A"
    ENVIRONMENTAL = "N"
    FREIGHT = "G"
    POLYPROPYLENE = "P"
    FERTILIZER = "S"
    PAPER = "T"
    SINGLE_INDEX = "I"
    MULTI_INDEX = "H"
    SINGLE_BASKET = "B"
    MULTI_BASKET = "C"
    MULTI_COMMODITY = "Q"
    OTHER = "M"
    UNDEFINED = "X"


class CommodityPayout(Attribute):
    CONTRACT_FOR_DIFFERENCE = "C"
    TOTAL_RETURN = "T"
    UNDEFINED = "X"


class Settlement(Attribute):
    CASH = "C"
    PHYSICAL = "P"
    ELECT_AT_SETTLEMENT = "E"
    UNDEFINED = "X"


class EquityUnderlying(Attribute):
    SINGLE_STOCK = "S"
    INDEX = "I"
    BASKET = "B"
    OTHER = "M"
    UNDEFINED = "X"


class EquityPayout(Attribute):
    PRICE = "P"
    DIVIDEND = "D"
    VARIANCE = "V"
    VOLATILITY = "L"
    TOTAL_RETURN = "T"
    CONTRACT_FOR_DIFFERENCE = "C"
    OTHER = "M"
    UNDEFINED = "X"


class CreditUnderlying(Attribute):
    SINGLE_NAME = "U"
    INDEX_TRANCHE = "V"
    INDEX = "I"
    BASKET = "B"
    OTHER = "M"
    UNDEFINED = "X"


class CreditPayout(Attribute):
    CREDIT_DEFAULT = "C"
    TOTAL_RETURN = "T"
    OTHER = "M"
    UNDEFINED = "X"


class CreditIssuer(Attribute):
    CORPORATE = "C"
    SOVEREIGN = "S"
    LOCAL = "L"
    UNDEFINED = "X"


class CreditDelivery(Attribute):
    CASH = "C"
    PHYSICAL = "P"
    AUCTION = "A"
    UNDEFINED = "X"


class ForexUnderlying(Attribute):
    SPOT_FORWARD = "A"
    FORWARD_FORWARD = "C"
    OTHER = "M"
    UNDEFINED = "X"


class ForexDelivery(Attribute):
    PHYSICAL = "P"
    CASH = "C"
    UNDEFINED = "X"


class OtherUnderlying(Attribute):
    COMMERCIAL_PROPERTY = "P"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Rate(AttributeGroup):
    tag: ClassVar[str] = "R"

    underlying: RateUnderlying
    notional: Notional
    currency: RateCurrency
    delivery: RateDelivery


@final
@dataclass(frozen=True, slots=True)
class Commodity(AttributeGroup):
    tag: ClassVar[str] = "T"

    underlying: CommodityUnderlying
    payout: CommodityPayout
    attr3: NotApplicable
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Equity(AttributeGroup):
    tag: ClassVar[str] = "E"

    underlying: EquityUnderlying
    payout: EquityPayout
    attr3: NotApplicable
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Credit(AttributeGroup):
    tag: ClassVar[str] = "C"

    underlying: CreditUnderlying
    payout: CreditPayout
    issuer: CreditIssuer
    delivery: CreditDelivery


@final
@dataclass(frozen=True, slots=True)
class Forex(AttributeGroup):
    tag: ClassVar[str] = "F"

    underlying: ForexUnderlying
    attr2: NotApplicable
    attr3: NotApplicable
    delivery: ForexDelivery


@final
@dataclass(frozen=True, slots=True)
class Other(AttributeGroup):
    tag: ClassVar[str] = "M"

    underlying: OtherUnderlying
    attr2: NotApplicable
    attr3: NotApplicable
    delivery: Settlement


type SwapGroup = Rate | Commodity | Equity | Credit | Forex | Other


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Swap(Category):
    """Category S."""

    tag: ClassVar[str] = "S"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Rate, Commodity, Equity, Credit, Forex, Other,
    )

    group: SwapGroup
