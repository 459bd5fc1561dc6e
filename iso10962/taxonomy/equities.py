"""Equities (category E).

Financial instruments representing an ownership interest in an entity or
pool of assets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import Form, NotApplicable

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class VotingRight(Attribute):
    """Kind of voting power conferred to the shareholder."""

    VOTING = "V"  # one vote per share
    NON_VOTING = "N"
    RESTRICTED = "R"  # less than one vote per share
    ENHANCED = "E"  # more than one vote per share
    UNDEFINED = "X"


class Ownership(Attribute):
    """Ownership/transfer/sales restrictions."""

    RESTRICTED = "T"
    FREE = "U"
    UNDEFINED = "X"


class PaymentStatus(Attribute):
    FULLY = "F"
    NIL = "O"
    PARTIAL = "P"
    UNDEFINED = "X"


class Redemption(Attribute):
    """Retirement provisions made for the shares."""

    REDEEMABLE = "R"
    EXTENDIBLE = "E"
    REDEEMABLE_EXTENDIBLE = "T"
    EXCHANGEABLE = "G"
    REDEEMABLE_EXCHANGEABLE_EXTENDIBLE = "A"
    REDEEMABLE_EXCHANGEABLE = "C"
    PERPETUAL = "N"
    UNDEFINED = "X"


class Income(Attribute):
    """Kind of dividend income the shareholders are entitled to."""

    FIXED_RATE = "F"
    CUMULATIVE_FIXED_RATE = "C"
    PARTICIPATING = "P"
    CUMULATIVE_PARTICIPATING = "Q"
    ADJUSTABLE_RATE = "A"
    NORMAL_RATE = "N"  # same dividends as common/ordinary shareholders
    AUCTION_RATE = "U"
    UNDEFINED = "X"


class Dependency(Attribute):
    """Instrument a depository receipt represents ownership of."""

    COMMON = "S"
    PREFERRED = "P"
    COMMON_CONVERTIBLE = "C"
    PREFERRED_CONVERTIBLE = "F"
    LLP_UNIT = "L"
    OTHER = "M"
    UNDEFINED = "X"


class RedemptionConversion(Attribute):
    """Redemption/conversion of the underlying assets.

    Guideline: for common/ordinary shares and limited partnership units only
    PERPETUAL or UNDEFINED apply. See iso10962.guidelines.
    """

    REDEEMABLE = "R"
    PERPETUAL = "N"
    CONVERTIBLE = "B"
    CONVERTIBLE_REDEEMABLE = "D"
    UNDEFINED = "X"


class StructuredKind(Attribute):
    """Type of participation certificate."""

    TRACKER = "A"
    OUTPERFORMANCE = "B"
    BONUS = "C"
    OUTPERFORMANCE_BONUS = "D"
    TWIN_WIN = "E"
    OTHER = "M"
    UNDEFINED = "X"


class Distribution(Attribute):
    """Cash distribution provided by the structured instrument."""

    DIVIDEND = "D"
    NO_PAYMENTS = "Y"
    OTHER = "M"
    UNDEFINED = "X"


class Repayment(Attribute):
    CASH = "F"
    PHYSICAL = "V"
    ELECT_AT_SETTLEMENT = "E"
    OTHER = "M"
    UNDEFINED = "X"


class Underlying(Attribute):
    """Assets in which the structured instrument participates."""

    BASKETS = "B"
    EQUITIES = "S"
    DEBT = "D"
    DERIVATIVES = "G"
    COMMODITIES = "T"
    CURRENCIES = "C"
    INDICES = "I"
    INTEREST_RATES = "N"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Common(AttributeGroup):
    """Common/ordinary shares."""

    tag: ClassVar[str] = "S"

    voting_right: VotingRight
    ownership: Ownership
    payment_status: PaymentStatus
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Preferred(AttributeGroup):
    """Preferred/preference shares."""

    tag: ClassVar[str] = "P"

    voting_right: VotingRight
    redemption: Redemption
    income: Income
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Convertible(AttributeGroup):
    """Common/ordinary shares convertible at the holder's discretion."""

    tag: ClassVar[str] = "C"

    voting_right: VotingRight
    ownership: Ownership
    payment_status: PaymentStatus
    form: Form


@final
@dataclass(frozen=True, slots=True)
class PreferredConvertible(AttributeGroup):
    """Preferred/preference shares convertible at the holder's discretion."""

    tag: ClassVar[str] = "F"

    voting_right: VotingRight
    redemption: Redemption
    income: Income
    form: Form


@final
@dataclass(frozen=True, slots=True)
class LlpUnit(AttributeGroup):
    """Limited partnership units."""

    tag: ClassVar[str] = "L"

    voting_right: VotingRight
    ownership: Ownership
    payment_status: PaymentStatus
    form: Form


@final
@dataclass(frozen=True, slots=True)
class DepositoryReceipt(AttributeGroup):
    """Depository receipts on equities."""

    tag: ClassVar[str] = "D"

    dependency: Dependency
    redemption: RedemptionConversion
    income: Income
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Structured(AttributeGroup):
    """Structured instruments (participation)."""

    tag: ClassVar[str] = "Y"

    kind: StructuredKind
    distribution: Distribution
    repayment: Repayment
    underlying: Underlying


@final
@dataclass(frozen=True, slots=True)
class Other(AttributeGroup):
    """Equities that fit no other group."""

    tag: ClassVar[str] = "M"

    attr1: NotApplicable
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


type EquityGroup = (
    Common | Preferred | Convertible | PreferredConvertible
    | LlpUnit | DepositoryReceipt | Structured | Other
)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Equity(Category):
    """Category E."""

    tag: ClassVar[str] = "E"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Common, Preferred, Convertible, PreferredConvertible,
        LlpUnit, DepositoryReceipt, Structured, Other,
    )

    group: EquityGroup
