"""Root CFI code: dispatch on the category character.

parse() is the single ingestion point and serialize() the single production
point. Decoding checks, in order: length, category tag (position 0), group
tag (position 1), attributes (positions 2..5). The first failure is returned
as Err; no partial Code is ever built. Category H is carried verbatim unless
the config asks for its group schema.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import final

from iso10962.core.config import CATEGORY_INDEX, CFI_LENGTH, DEFAULT_CONFIG, DecoderConfig
from iso10962.core.errors import CfiError, InvalidCategory, InvalidLength
from iso10962.core.result import Err, Ok
from iso10962.taxonomy.base import AttributeGroup, Category
from iso10962.taxonomy.civ import Civ
from iso10962.taxonomy.debt import Debt
from iso10962.taxonomy.equities import Equity
from iso10962.taxonomy.futures import Future
from iso10962.taxonomy.options import Listed, Unlisted
from iso10962.taxonomy.rights import Right
from iso10962.taxonomy.swaps import Swap
from iso10962.taxonomy.unstructured import (
    Financing,
    Forward,
    Misc,
    Referential,
    Spot,
    Strategy,
    UnlistedOption,
    UnstructuredCategory,
)

type StructuredCategory = Equity | Debt | Civ | Right | Listed | Unlisted | Future | Swap
type AnyCategory = (
    StructuredCategory | UnlistedOption | Spot | Forward | Strategy | Financing
    | Referential | Misc
)

STRUCTURED_CATEGORIES: Mapping[str, type[Category]] = MappingProxyType({
    cls.tag: cls for cls in (Equity, Debt, Civ, Right, Listed, Future, Swap)
})
UNSTRUCTURED_CATEGORIES: Mapping[str, type[UnstructuredCategory]] = MappingProxyType({
    cls.tag: cls
    for cls in (UnlistedOption, Spot, Forward, Strategy, Financing, Referential, Misc)
})
CATEGORY_TAGS: frozenset[str] = frozenset(STRUCTURED_CATEGORIES) | frozenset(
    UNSTRUCTURED_CATEGORIES
)


def _as_text(raw: str | bytes | bytearray) -> str:
    # One character per byte, so every byte string maps back to itself.
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw).decode("latin-1")
    return raw


@final
@dataclass(frozen=True, slots=True)
class Code:
    """A decoded CFI code. Exactly one category variant is active."""

    category: AnyCategory

    @staticmethod
    def parse(
        raw: str | bytes | bytearray, config: DecoderConfig = DEFAULT_CONFIG,
    ) -> Ok[Code] | Err[CfiError]:
        source = "iso10962.code.Code.parse"
        text = _as_text(raw)
        if len(text) != CFI_LENGTH:
            return Err(InvalidLength.create(len(text), source=source))
        tag = text[CATEGORY_INDEX]
        if tag == Unlisted.tag and config.decode_unlisted_options:
            return Unlisted.decode(text).map(Code)  # type: ignore[arg-type]
        structured = STRUCTURED_CATEGORIES.get(tag)
        if structured is not None:
            return structured.decode(text).map(Code)  # type: ignore[arg-type]
        unstructured = UNSTRUCTURED_CATEGORIES.get(tag)
        if unstructured is not None:
            return unstructured.decode(
                text, validate=config.validate_unstructured,
            ).map(Code)  # type: ignore[arg-type]
        return Err(InvalidCategory.create(tag, source=source))

    @property
    def tag(self) -> str:
        """The category character."""
        return self.category.tag

    @property
    def group(self) -> AttributeGroup | None:
        """The decoded group, or None for categories without a group schema."""
        if isinstance(self.category, Category):
            return self.category.group
        return None

    def to_bytes(self) -> bytes:
        return str(self).encode("latin-1")

    def __str__(self) -> str:
        return self.category.encode()

    # --- Category predicates ---

    @property
    def is_equity(self) -> bool:
        return isinstance(self.category, Equity)

    @property
    def is_debt(self) -> bool:
        return isinstance(self.category, Debt)

    @property
    def is_civ(self) -> bool:
        """Collective investment vehicle."""
        return isinstance(self.category, Civ)

    @property
    def is_entitlement(self) -> bool:
        return isinstance(self.category, Right)

    @property
    def is_listed_option(self) -> bool:
        return isinstance(self.category, Listed)

    @property
    def is_unlisted_option(self) -> bool:
        """Non-listed or complex listed option, carried verbatim or decoded."""
        return isinstance(self.category, (UnlistedOption, Unlisted))

    @property
    def is_future(self) -> bool:
        return isinstance(self.category, Future)

    @property
    def is_swap(self) -> bool:
        return isinstance(self.category, Swap)

    @property
    def is_spot(self) -> bool:
        return isinstance(self.category, Spot)

    @property
    def is_forward(self) -> bool:
        return isinstance(self.category, Forward)

    @property
    def is_strategy(self) -> bool:
        return isinstance(self.category, Strategy)

    @property
    def is_financing(self) -> bool:
        return isinstance(self.category, Financing)

    @property
    def is_referential(self) -> bool:
        return isinstance(self.category, Referential)

    @property
    def is_misc(self) -> bool:
        return isinstance(self.category, Misc)


def parse(
    raw: str | bytes | bytearray, config: DecoderConfig = DEFAULT_CONFIG,
) -> Ok[Code] | Err[CfiError]:
    """Decode a 6-character CFI code."""
    return Code.parse(raw, config)


def serialize(code: Code) -> bytes:
    """Encode a Code back to its 6 bytes."""
    return code.to_bytes()
