"""Debt instruments (category D).

Financial instruments evidencing monies owed by the issuer to the holder on
terms as specified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import Form, NotApplicable

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class InterestOrPaymentKind(Attribute):
    """Type of interest or cash payment (bonds)."""

    FIXED_RATE = "F"
    ZERO_RATE = "Z"
    VARIABLE = "V"
    CASH_PAYMENT = "C"
    PAYMENT_IN_KIND = "K"
    UNDEFINED = "X"


class InterestKind(Attribute):
    FIXED = "F"
    ZERO = "Z"
    VARIABLE = "V"
    IN_KIND = "K"
    UNDEFINED = "X"


class Interest(Attribute):
    FIXED = "F"
    ZERO = "Z"
    VARIABLE = "V"
    UNDEFINED = "X"


class InterestOrCash(Attribute):
    FIXED = "F"
    ZERO = "Z"
    VARIABLE = "V"
    CASH = "C"
    UNDEFINED = "X"


class Guarantee(Attribute):
    """Guarantee or ranking in case of the issuer's inability to settle.

    Guideline: the ranking values (SENIOR, SENIOR_SUBORDINATED, JUNIOR,
    JUNIOR_SUBORDINATED) are for unsecured securities only; NEGATIVE_PLEDGE
    for unsecured securities that are neither senior nor junior; UNSECURED
    only when none of those apply. The code carries a single guarantee
    value, so this is documentation, not a decoding rule.
    """

    GOVERNMENT = "T"
    JOINT = "G"
    SECURED = "S"
    UNSECURED = "U"
    NEGATIVE_PLEDGE = "P"
    SENIOR = "N"
    SENIOR_SUBORDINATED = "O"
    JUNIOR = "Q"
    JUNIOR_SUBORDINATED = "J"
    SUPRANATIONAL = "C"
    UNDEFINED = "X"


class Redemption(Attribute):
    """Retirement provisions made for the debt issue."""

    FIXED_MATURITY = "F"
    FIXED_WITH_CALL = "G"
    FIXED_WITH_PUT = "C"
    FIXED_WITH_PUT_AND_CALL = "D"
    AMORTIZATION = "A"
    AMORTIZATION_WITH_CALL = "B"
    AMORTIZATION_WITH_PUT = "T"
    AMORTIZATION_WITH_PUT_AND_CALL = "L"
    PERPETUAL = "P"
    PERPETUAL_WITH_CALL = "Q"
    PERPETUAL_WITH_PUT = "R"
    EXTENDIBLE = "E"
    UNDEFINED = "X"


class ProtectedKind(Attribute):
    """Type of structured instrument with capital protection."""

    PARTICIPATION = "A"
    CONVERTIBLE = "B"
    BARRIER = "C"
    COUPONS = "D"
    OTHER = "M"
    UNDEFINED = "X"


class UnprotectedKind(Attribute):
    """Type of structured instrument without capital protection."""

    DISCOUNT = "A"
    BARRIER_DISCOUNT = "B"
    REVERSE_CONVERTIBLE = "C"
    BARRIER_REVERSE_CONVERTIBLE = "D"
    EXPRESS = "E"
    OTHER = "M"
    UNDEFINED = "X"


class Distribution(Attribute):
    """Cash distribution provided by the structured instrument."""

    FIXED_INTEREST = "F"
    DIVIDEND = "D"
    VARIABLE_INTEREST = "V"
    NO_PAYMENTS = "Y"
    OTHER = "M"
    UNDEFINED = "X"


class ProtectedRepayment(Attribute):
    FIXED_CASH = "F"
    VARIABLE_CASH = "V"
    OTHER = "M"
    UNDEFINED = "X"


class UnprotectedRepayment(Attribute):
    CASH = "R"
    ASSETS = "S"
    ASSETS_AND_CASH = "C"
    ASSETS_OR_CASH = "T"
    OTHER = "M"
    UNDEFINED = "X"


class Underlying(Attribute):
    """Assets in which the structured instrument participates."""

    BASKET = "B"
    EQUITY = "S"
    DEBT = "D"
    COMMODITY = "T"
    CURRENCY = "C"
    INDEX = "I"
    INTEREST_RATE = "N"
    OTHER = "M"
    UNDEFINED = "X"


class Dependency(Attribute):
    """Debt instrument a depository receipt represents ownership of."""

    BONDS = "B"
    CONVERTIBLE = "C"
    WARRANT_ATTACHED = "W"
    MEDIUM_TERM = "T"
    MONEY_MARKET = "Y"
    MORTGAGE_BACKED = "G"
    ASSET_BACKED = "A"
    MUNICIPAL = "N"
    OTHER = "M"
    UNDEFINED = "X"


class OtherKind(Attribute):
    BANK_LOAN = "B"
    PROMISSORY_NOTE = "P"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Bond(AttributeGroup):
    tag: ClassVar[str] = "B"

    interest: InterestOrPaymentKind
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Convertible(AttributeGroup):
    """Bonds convertible into other securities."""

    tag: ClassVar[str] = "C"

    interest: InterestKind
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class WarrantAttached(AttributeGroup):
    """Bonds issued together with one or more warrants."""

    tag: ClassVar[str] = "W"

    interest: InterestKind
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class MediumTerm(AttributeGroup):
    """Medium-term notes."""

    tag: ClassVar[str] = "T"

    interest: InterestKind
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class MoneyMarket(AttributeGroup):
    """Money market instruments."""

    tag: ClassVar[str] = "Y"

    interest: InterestKind
    guarantee: Guarantee
    attr3: NotApplicable
    form: Form


@final
@dataclass(frozen=True, slots=True)
class ProtectedStructured(AttributeGroup):
    """Structured instruments with capital protection."""

    tag: ClassVar[str] = "S"

    kind: ProtectedKind
    distribution: Distribution
    repayment: ProtectedRepayment
    underlying: Underlying


@final
@dataclass(frozen=True, slots=True)
class UnprotectedStructured(AttributeGroup):
    """Structured instruments without capital protection."""

    tag: ClassVar[str] = "E"

    kind: UnprotectedKind
    distribution: Distribution
    repayment: UnprotectedRepayment
    underlying: Underlying


@final
@dataclass(frozen=True, slots=True)
class MortgageBacked(AttributeGroup):
    tag: ClassVar[str] = "G"

    interest: Interest
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class AssetBacked(AttributeGroup):
    tag: ClassVar[str] = "A"

    interest: Interest
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Municipal(AttributeGroup):
    tag: ClassVar[str] = "N"

    interest: Interest
    guarantee: Guarantee
    redemption: Redemption
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Depository(AttributeGroup):
    """Depository receipts on debt instruments. No form attribute."""

    tag: ClassVar[str] = "D"

    dependency: Dependency
    interest: InterestOrCash
    guarantee: Guarantee
    redemption: Redemption


@final
@dataclass(frozen=True, slots=True)
class Other(AttributeGroup):
    tag: ClassVar[str] = "M"

    kind: OtherKind
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


type DebtGroup = (
    Bond | Convertible | WarrantAttached | MediumTerm | MoneyMarket
    | ProtectedStructured | UnprotectedStructured | MortgageBacked
    | AssetBacked | Municipal | Depository | Other
)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Debt(Category):
    """Category D."""

    tag: ClassVar[str] = "D"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Bond, Convertible, WarrantAttached, MediumTerm, MoneyMarket,
        ProtectedStructured, UnprotectedStructured, MortgageBacked,
        AssetBacked, Municipal, Depository, Other,
    )

    group: DebtGroup
