"""Categories decoded by tag only: H, I, J, K, L, T, M.

Bytes 1..5 are carried verbatim so the code re-encodes exactly. By default
only length and category tag are checked; with validate=True each carried
character must also be an uppercase ASCII letter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self, final

from iso10962.core.config import (
    ATTRIBUTE_POSITIONS,
    CATEGORY_INDEX,
    CFI_LENGTH,
    GROUP_INDEX,
)
from iso10962.core.errors import (
    CfiError,
    InvalidAttribute,
    InvalidCategory,
    InvalidGroup,
    InvalidLength,
)
from iso10962.core.result import Err, Ok


def _is_code_letter(char: str) -> bool:
    return "A" <= char <= "Z"


class UnstructuredCategory:
    """Base for categories decoded by tag only.

    Subclasses are frozen slotted dataclasses with a ``tag`` class variable
    and a single ``tail`` field (the five characters after the tag).
    """

    __slots__ = ()

    tag: ClassVar[str]
    tail: str

    def __post_init__(self) -> None:
        if len(self.tail) != CFI_LENGTH - 1:
            raise ValueError(
                f"{type(self).__name__} tail must be {CFI_LENGTH - 1} characters, "
                f"got {len(self.tail)}"
            )

    @classmethod
    def decode(cls, raw: str, *, validate: bool = False) -> Ok[Self] | Err[CfiError]:
        source = "iso10962.taxonomy.unstructured.UnstructuredCategory.decode"
        if len(raw) != CFI_LENGTH:
            return Err(InvalidLength.create(len(raw), source=source))
        if raw[CATEGORY_INDEX] != cls.tag:
            return Err(InvalidCategory.create(raw[CATEGORY_INDEX], source=source))
        if validate:
            if not _is_code_letter(raw[GROUP_INDEX]):
                return Err(InvalidGroup.create(cls.tag, raw[GROUP_INDEX], source=source))
            for position in ATTRIBUTE_POSITIONS:
                if not _is_code_letter(raw[position]):
                    return Err(InvalidAttribute.create(
                        position=position,
                        char=raw[position],
                        attribute=cls.__name__,
                        source=source,
                    ))
        return Ok(cls(raw[GROUP_INDEX:]))  # type: ignore[call-arg]

    def encode(self) -> str:
        return f"{self.tag}{self.tail}"

    def __str__(self) -> str:
        return self.encode()


@final
@dataclass(frozen=True, slots=True)
class Spot(UnstructuredCategory):
    """Spot market contracts with immediate delivery."""

    tag: ClassVar[str] = "I"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class Forward(UnstructuredCategory):
    """Non-exchange-traded forwards."""

    tag: ClassVar[str] = "J"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class Strategy(UnstructuredCategory):
    """Simultaneous trading of two or more derivative instruments."""

    tag: ClassVar[str] = "K"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class Financing(UnstructuredCategory):
    """Collateralized loan agreements (repos, securities lending)."""

    tag: ClassVar[str] = "L"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class Referential(UnstructuredCategory):
    """Indicators used as a reference for other instruments."""

    tag: ClassVar[str] = "T"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class Misc(UnstructuredCategory):
    tag: ClassVar[str] = "M"
    tail: str


@final
@dataclass(frozen=True, slots=True)
class UnlistedOption(UnstructuredCategory):
    """Non-listed and complex listed options.

    Carried verbatim by default; DecoderConfig(decode_unlisted_options=True)
    decodes the group schema of iso10962.taxonomy.options.Unlisted instead.
    """

    tag: ClassVar[str] = "H"
    tail: str
