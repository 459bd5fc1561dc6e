"""Options: listed (category O) and non-listed/complex listed (category H).

Listed options grant the holder the privilege to buy or sell the specified
assets at a predetermined price at or within a future time, and trade on an
exchange with standardized terms. Category H covers OTC options and any
listed option that category O cannot capture. parse() carries H codes verbatim
unless DecoderConfig(decode_unlisted_options=True) selects the Unlisted schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import NotApplicable, Standardized

# ---------------------------------------------------------------------------
# Listed option attributes
# ---------------------------------------------------------------------------


class ExerciseStyle(Attribute):
    EUROPEAN = "E"
    AMERICAN = "A"
    BERMUDAN = "B"
    UNDEFINED = "X"


class Underlying(Attribute):
    """Assets the option holder is entitled to acquire."""

    BASKET = "B"
    STOCK = "S"
    DEBT = "D"
    COMMODITY = "T"
    CURRENCY = "C"
    INDEX = "I"
    OPTION = "O"
    FUTURE = "F"
    SWAP = "W"
    INTEREST_RATE = "N"
    OTHER = "M"
    UNDEFINED = "X"


class Delivery(Attribute):
    """Settlement on exercise: cash, or delivery of the underlying."""

    PHYSICAL = "P"
    CASH = "C"
    NON_DELIVERABLE = "N"
    ELECT_AT_EXERCISE = "E"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Unlisted option attributes
# ---------------------------------------------------------------------------


class OptionStyle(Attribute):
    """Option style and type."""

    EUROPEAN_CALL = "A"
    AMERICAN_CALL = "B"
    BERMUDAN_CALL = "C"
    EUROPEAN_PUT = "D"
    AMERICAN_PUT = "E"
    BERMUDAN_PUT = "F"
    EUROPEAN_CHOOSER = "G"
    AMERICAN_CHOOSER = "H"
    BERMUDAN_CHOOSER = "I"
    UNDEFINED = "X"


class ForexStyle(Attribute):
    EUROPEAN = "J"
    AMERICAN = "K"
    BERMUDAN = "L"
    UNDEFINED = "X"


class Valuation(Attribute):
    """Valuation method or trigger."""

    VANILLA = "V"
    ASIAN = "A"
    DIGITAL = "D"  # binary
    BARRIER = "B"
    DIGITAL_BARRIER = "G"
    LOOKBACK = "L"
    OTHER_PATH_DEPENDENT = "P"
    OTHER = "M"
    UNDEFINED = "X"


class RateValuation(Attribute):
    """Valuation method or trigger for rate options; adds caps and floors."""

    VANILLA = "V"
    ASIAN = "A"
    DIGITAL = "D"
    BARRIER = "B"
    DIGITAL_BARRIER = "G"
    LOOKBACK = "L"
    OTHER_PATH_DEPENDENT = "P"
    CAP = "C"
    FLOOR = "F"
    OTHER = "M"
    UNDEFINED = "X"


class Settlement(Attribute):
    CASH = "C"
    PHYSICAL = "P"
    ELECT_AT_SETTLEMENT = "E"
    UNDEFINED = "X"


class OtherSettlement(Attribute):
    CASH = "C"
    PHYSICAL = "P"
    ELECT_AT_EXERCISE = "E"
    NON_DELIVERABLE = "N"
    AUCTION = "A"
    UNDEFINED = "X"


class RateUnderlying(Attribute):
    BASIS_SWAP = "A"
    FIXED_FLOATING_SWAP = "C"
    FIXED_FIXED_SWAP = "D"
    INTEREST_RATE_INDEX = "E"
    INFLATION_SWAP = "I"
    OVERNIGHT_INDEX_SWAP = "H"
    OPTIONS = "O"
    FORWARDS = "R"
    FUTURES = "F"
    OTHER = "M"
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
    OPTIONS = "O"
    FORWARDS = "R"
    SWAPS = "W"
    OTHER = "M"
    UNDEFINED = "X"


class EquityUnderlying(Attribute):
    SINGLE_STOCK = "S"
    INDEX = "I"
    BASKET = "B"
    OPTIONS = "O"
    FORWARDS = "R"
    FUTURES = "F"
    OTHER = "M"
    UNDEFINED = "X"


class CreditUnderlying(Attribute):
    SINGLE_NAME = "U"
    INDEX_TRANCHE = "V"
    INDEX = "I"
    SWAPS = "W"
    OTHER = "M"
    UNDEFINED = "X"


class ForexUnderlying(Attribute):
    PAIR_FORWARD = "R"
    PAIR_FUTURE = "F"
    PAIR_SPOT = "T"
    PAIR_VOLATILITY = "V"
    INDEX_FORWARD = "B"
    INDEX_FUTURE = "C"
    INDEX_SPOT = "D"
    INDEX_VOLATILITY = "E"
    BASKET_FORWARD = "Q"
    BASKET_FUTURE = "U"
    BASKET_SPOT = "W"
    BASKET_VOLATILITY = "Y"
    OTHER = "M"
    UNDEFINED = "X"


class OtherUnderlying(Attribute):
    COMMERCIAL_PROPERTY = "P"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Listed option groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Call(AttributeGroup):
    tag: ClassVar[str] = "C"

    exercise_style: ExerciseStyle
    underlying: Underlying
    delivery: Delivery
    standardized: Standardized


@final
@dataclass(frozen=True, slots=True)
class Put(AttributeGroup):
    tag: ClassVar[str] = "P"

    exercise_style: ExerciseStyle
    underlying: Underlying
    delivery: Delivery
    standardized: Standardized


@final
@dataclass(frozen=True, slots=True)
class OtherListed(AttributeGroup):
    tag: ClassVar[str] = "M"
    name: ClassVar[str] = "other"

    attr1: NotApplicable
    attr2: NotApplicable
    attr3: NotApplicable
    attr4: NotApplicable


# ---------------------------------------------------------------------------
# Unlisted option groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Rate(AttributeGroup):
    tag: ClassVar[str] = "R"

    underlying: RateUnderlying
    style: OptionStyle
    valuation: RateValuation
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Commodity(AttributeGroup):
    tag: ClassVar[str] = "T"

    underlying: CommodityUnderlying
    style: OptionStyle
    valuation: Valuation
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Equity(AttributeGroup):
    tag: ClassVar[str] = "E"

    underlying: EquityUnderlying
    style: OptionStyle
    valuation: Valuation
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Credit(AttributeGroup):
    tag: ClassVar[str] = "C"

    underlying: CreditUnderlying
    style: OptionStyle
    valuation: Valuation
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class Forex(AttributeGroup):
    tag: ClassVar[str] = "F"

    underlying: ForexUnderlying
    style: ForexStyle
    valuation: Valuation
    delivery: Settlement


@final
@dataclass(frozen=True, slots=True)
class OtherUnlisted(AttributeGroup):
    tag: ClassVar[str] = "M"
    name: ClassVar[str] = "other"

    underlying: OtherUnderlying
    style: OptionStyle
    valuation: Valuation
    delivery: OtherSettlement


type ListedGroup = Call | Put | OtherListed
type UnlistedGroup = Rate | Commodity | Equity | Credit | Forex | OtherUnlisted


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Listed(Category):
    """Category O."""

    tag: ClassVar[str] = "O"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (Call, Put, OtherListed)

    group: ListedGroup


@final
@dataclass(frozen=True, slots=True)
class Unlisted(Category):
    """Category H, decoded through its groups only on request."""

    tag: ClassVar[str] = "H"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Rate, Commodity, Equity, Credit, Forex, OtherUnlisted,
    )

    group: UnlistedGroup
