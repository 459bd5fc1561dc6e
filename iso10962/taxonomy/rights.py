"""Entitlements/rights (category R).

Financial instruments providing the holder with the privilege to subscribe to
or receive specific assets on terms specified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, final

from iso10962.taxonomy.base import Attribute, AttributeGroup, Category
from iso10962.taxonomy.common import Form, NotApplicable

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class Assets(Attribute):
    """Assets the rights holder is entitled to acquire."""

    COMMON = "S"
    PREFERRED = "P"
    COMMON_CONVERTIBLE = "C"
    PREFERRED_CONVERTIBLE = "F"
    BONDS = "B"
    COMBINED = "I"
    OTHER = "M"
    UNDEFINED = "X"


class WarrantKind(Attribute):
    """Whether the warrant is issued by the issuer of the underlying."""

    TRADITIONAL = "T"  # issued by the issuer of the underlying
    NAKED = "N"  # third party, not backed by the underlying
    COVERED = "C"  # third party, backed by the underlying
    UNDEFINED = "X"


class CallPut(Attribute):
    CALL = "C"
    PUT = "P"
    CALL_AND_PUT = "B"
    UNDEFINED = "X"


class ExerciseStyle(Attribute):
    EUROPEAN = "E"
    AMERICAN = "A"
    BERMUDAN = "B"
    OTHER = "M"
    UNDEFINED = "X"


class MiniFutureAsset(Attribute):
    """Underlying assets of a mini-future certificate."""

    BASKET = "B"
    EQUITY = "S"
    DEBT = "D"
    COMMODITY = "T"
    CURRENCY = "C"
    INDEX = "I"
    OTHER = "M"
    UNDEFINED = "X"


class Barrier(Attribute):
    """Whether the barrier depends on the underlying or on the instrument level."""

    UNDERLYING = "T"
    INSTRUMENT = "N"
    OTHER = "M"
    UNDEFINED = "X"


class LongShort(Attribute):
    LONG = "C"
    SHORT = "P"
    OTHER = "M"
    UNDEFINED = "X"


class Dependency(Attribute):
    """Entitlement a depository receipt represents ownership of."""

    ALLOTMENT = "A"
    SUBSCRIPTION = "S"
    PURCHASE = "P"
    WARRANT = "W"
    OTHER = "M"
    UNDEFINED = "X"


# ---------------------------------------------------------------------------
# Groups
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Allotment(AttributeGroup):
    """Allotment (bonus) rights."""

    tag: ClassVar[str] = "A"

    attr1: NotApplicable
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Subscription(AttributeGroup):
    tag: ClassVar[str] = "S"

    assets: Assets
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Purchase(AttributeGroup):
    tag: ClassVar[str] = "P"

    assets: Assets
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Warrant(AttributeGroup):
    tag: ClassVar[str] = "W"

    assets: Assets
    kind: WarrantKind
    call_put: CallPut
    exercise_style: ExerciseStyle


@final
@dataclass(frozen=True, slots=True)
class MiniFuture(AttributeGroup):
    """Mini-future certificates, constant leverage certificates."""

    tag: ClassVar[str] = "F"

    assets: MiniFutureAsset
    barrier: Barrier
    long_short: LongShort
    exercise_style: ExerciseStyle


@final
@dataclass(frozen=True, slots=True)
class DepositoryReceipt(AttributeGroup):
    tag: ClassVar[str] = "D"

    dependency: Dependency
    attr2: NotApplicable
    attr3: NotApplicable
    form: Form


@final
@dataclass(frozen=True, slots=True)
class Other(AttributeGroup):
    tag: ClassVar[str] = "M"

    attr1: NotApplicable
    attr2: NotApplicable
    attr3: NotApplicable
    attr4: NotApplicable


type RightGroup = (
    Allotment | Subscription | Purchase | Warrant | MiniFuture | DepositoryReceipt | Other
)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class Right(Category):
    """Category R."""

    tag: ClassVar[str] = "R"
    groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
        Allotment, Subscription, Purchase, Warrant, MiniFuture, DepositoryReceipt, Other,
    )

    group: RightGroup
