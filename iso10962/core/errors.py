"""Error value hierarchy — no decoding function raises on bad input.

Every error is a frozen dataclass value that can be pattern-matched,
compared, and serialized. Base class CfiError, @final subclasses, one per
failure kind. The offending character and its position are always
recoverable from the error.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final


@dataclass(frozen=True, slots=True)
class CfiError:
    """Base error value. Subclassed per failure kind, so not @final."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> CfiError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidLength(CfiError):
    """Input is not exactly CFI_LENGTH characters."""

    length: int

    @staticmethod
    def create(length: int, source: str) -> InvalidLength:
        return InvalidLength(
            message=f"CFI code must be 6 characters, got {length}",
            code="INVALID_LENGTH",
            source=source,
            length=length,
        )

    def to_dict(self) -> dict[str, object]:
        return {**CfiError.to_dict(self), "length": self.length}


@final
@dataclass(frozen=True, slots=True)
class InvalidCategory(CfiError):
    """First character is not one of the category tags."""

    char: str

    @staticmethod
    def create(char: str, source: str) -> InvalidCategory:
        return InvalidCategory(
            message=f"Invalid CFI category '{char}'",
            code="INVALID_CATEGORY",
            source=source,
            char=char,
        )

    @property
    def position(self) -> int:
        return 0

    def to_dict(self) -> dict[str, object]:
        return {**CfiError.to_dict(self), "position": self.position, "char": self.char}


@final
@dataclass(frozen=True, slots=True)
class InvalidGroup(CfiError):
    """Second character is not a group tag of the already-decoded category."""

    category: str  # category tag, e.g. "E"
    char: str

    @staticmethod
    def create(category: str, char: str, source: str) -> InvalidGroup:
        return InvalidGroup(
            message=f"Invalid group '{char}' for CFI category '{category}'",
            code="INVALID_GROUP",
            source=source,
            category=category,
            char=char,
        )

    @property
    def position(self) -> int:
        return 1

    def to_dict(self) -> dict[str, object]:
        return {
            **CfiError.to_dict(self),
            "position": self.position,
            "category": self.category,
            "char": self.char,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidAttribute(CfiError):
    """An attribute character is outside the enumeration bound to its position."""

    position: int | None  # None when decoded outside a 6-character code
    char: str
    attribute: str  # attribute enumeration name, e.g. "VotingRight"

    @staticmethod
    def create(
        position: int | None, char: str, attribute: str, source: str,
    ) -> InvalidAttribute:
        where = f" at position {position}" if position is not None else ""
        return InvalidAttribute(
            message=f"Invalid {attribute} '{char}'{where}",
            code="INVALID_ATTRIBUTE",
            source=source,
            position=position,
            char=char,
            attribute=attribute,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **CfiError.to_dict(self),
            "position": self.position,
            "char": self.char,
            "attribute": self.attribute,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single advisory guideline failure."""

    path: str  # e.g. "equity.depository_receipt.redemption"
    constraint: str  # e.g. "must be N or X"
    actual_value: str  # e.g. "R"


@final
@dataclass(frozen=True, slots=True)
class ValidationError(CfiError):
    """One or more attributes break an advisory guideline of the standard."""

    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **CfiError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }
