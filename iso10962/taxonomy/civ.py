"""Collective investment vehicles (category C).

Securities representing a portion of assets pooled by investors and run by a
management company whose share capital remains separate from those assets:
unit trusts, mutual funds, OICVM, OPCVM, SICAV, SICAF.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import NotApplicable

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class ClosedOrOpen(Attribute):
    """Whether units are traded or the fund continually sells/redeems them."""

    CLOSED = "C"
    OPEN = "O"
    OTHER = "M"
    UNDEFINED = "X"


class Distribution(Attribute):
    """The fund's normal distribution policy."""

    INCOME = "I"
    ACCUMULATION = "G"
    MIXED = "J"
    UNDEFINED = "X"


class Assets(Attribute):
    """Underlying assets in which the fund invests."""

    REAL_ESTATE = "R"
    DEBT = "B"
    EQUITIES = "E"
    CONVERTIBLES = "V"
    MIXED = "L"
    COMMODITIES = "C"
    DERIVATIVES = "D"
    REFERENTIAL = "F"
    CREDITS = "K"
    OTHER = "M"
    UNDEFINED = "X"


class SecurityRestriction(Attribute):
    """Security type and investor restrictions."""

    SHARES = "S"
    SHARES_FOR_QUALIFIED = "Q"
    UNITS = "U"
    UNITS_FOR_QUALIFIED = "Y"
    UNDEFINED = "X"


class SecurityKind(Attribute):
    SHARES = "S"
    UNITS = "U"
    UNDEFINED = "X"


class Strategy(Attribute):
    """Core hedge fund strategy."""

    DIRECTIONAL = "D"
    RELATIVE_VALUE = "R"
    SECURITY_SELECTION = "S"
    EVENT_DRIVEN = "E"
    ARBITRAGE = "A"
    MULTI_STRATEGY = "N"
    LENDING = "L"
    OTHER = "M"
    UNDEFINED = "X"


class Style(Attribute):
    """Pension fund strategy/style."""

    BALANCED = "B"
    GROWTH = "G"
    LIFESTYLE = "L"
    OTHER = "M"
    UNDEFINED = "X"


class PensionKind(Attribute):
    DEFINED_BENEFIT = "R"
    DEFINED_CONTRIBUTION = "B"
    OTHER = "M"
    UNDEFINED = "X"


class FundsKind(Attribute):
    """Type of funds a fund of funds invests in."""

    STANDARD = "I"
    HEDGE = "H"
    REIT = "B"
    ETF = "E"
    PRIVATE_EQUITY = "P"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Standard(AttributeGroup):
    """Standard (vanilla) investment funds/mutual funds."""

    tag: ClassVar[str] = "I"

    closed_or_open: ClosedOrOpen
    distribution: Distribution
    assets: Assets
    security_kind: SecurityRestriction


@final
@dataclass(frozen=True, slots=True)
class Hedge(AttributeGroup):
    tag: ClassVar[str] = "H"

    strategy: Strategy
    attr2: NotApplicable
    attr3: NotApplicable
    attr4: NotApplicable


@final
@dataclass(frozen=True, slots=True)
class Reit(AttributeGroup):
    """Real estate investment trusts."""

    tag: ClassVar[str] = "B"

    closed_or_open: ClosedOrOpen
    distribution: Distribution
    attr3: NotApplicable
    security_kind: SecurityRestriction


@final
@dataclass(frozen=True, slots=True)
class Etf(AttributeGroup):
    """Exchange traded funds."""

    tag: ClassVar[str] = "E"

    closed_or_open: ClosedOrOpen
    distribution: Distribution
    assets: Assets
    security_kind: SecurityKind


@final
@dataclass(frozen=True, slots=True)
class Pension(AttributeGroup):
    tag: ClassVar[str] = "S"

    closed_or_open: ClosedOrOpen
    style: Style
    kind: PensionKind
    security_kind: SecurityKind


@final
@dataclass(frozen=True, slots=True)
class FundOfFunds(AttributeGroup):
    tag: ClassVar[str] = "F"

    closed_or_open: ClosedOrOpen
    distribution: Distribution
    funds_kind: FundsKind
    security_kind: SecurityRestriction


@final
@dataclass(frozen=True, slots=True)
class PrivateEquity(AttributeGroup):
    tag: ClassVar[str] = "P"

    closed_or_open: ClosedOrOpen
    distribution: Distribution
    assets: Assets
    security_kind: SecurityRestriction


@final
@dataclass(frozen=True, slots=True)
class Other(AttributeGroup):
    tag: ClassVar[str] = "M"

    attr1: NotApplicable
    attr2: NotApplicable
    attr3: NotApplicable
    security_kind: SecurityRestriction


type CivGroup = (
    Standard | Hedge | Reit | Etf | Pension | FundOfFunds | PrivateEquity | Other
)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Civ(Category):
    """Category C."""

    tag: ClassVar[str] = "C"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Standard, Hedge, Reit, Etf, Pension, FundOfFunds, PrivateEquity, Other,
    )

    group: CivGroup
