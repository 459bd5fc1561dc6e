"""Generic CFI decoding engine: attribute, group and category layers.

The domain modules only declare data: Attribute enums (one character per
member), AttributeGroup dataclasses (four Attribute fields, bound to
positions 2..5 in declaration order) and Category dataclasses (a group tag
table). The classes here interpret that data; no domain module contains
decoding logic of its own.

Decoding is top-down and fail-fast: length, then the category tag, then the
group tag, then positions 2, 3, 4, 5 in order. The first failure is returned
as an Err and nothing after it is inspected.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import fields
from enum import Enum, EnumType
from functools import cache
from types import MappingProxyType
from typing import Any, ClassVar, Self, get_type_hints

from iso10962.core.config import (
    ATTRIBUTE_POSITIONS,
    CATEGORY_INDEX,
    CFI_LENGTH,
    GROUP_INDEX,
    UNDEFINED_CHAR,
)
from iso10962.core.errors import (
    CfiError,
    InvalidAttribute,
    InvalidCategory,
    InvalidGroup,
    InvalidLength,
)
from iso10962.core.result import Err, Ok, sequence

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(name: str) -> str:
    """CamelCase class name to the snake_case used by is_<name> predicates."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def _is_instance_property(cls: type) -> property:
    return property(lambda self: isinstance(self.group, cls))


def _is_member_property(member: Attribute) -> property:
    return property(lambda self: self is member)


# ---------------------------------------------------------------------------
# Attribute (leaf)
# ---------------------------------------------------------------------------


class _AttributeType(EnumType):
    """Adds one is_<member> property per member once the members exist."""

    def __new__(
        metacls, cls: str, bases: tuple[type, ...], classdict: Any, **kwds: Any,
    ) -> _AttributeType:
        enum_class = super().__new__(metacls, cls, bases, classdict, **kwds)
        for name, member in enum_class.__members__.items():
            predicate = f"is_{name.lower()}"
            if predicate in classdict:
                raise TypeError(f"{cls}.{predicate} clashes with a generated predicate")
            if name != "UNDEFINED":
                setattr(enum_class, predicate, _is_member_property(member))
        return enum_class


class Attribute(Enum, metaclass=_AttributeType):
    """Base for single-character attribute enumerations.

    Subclasses declare members as NAME = "<char>" and always include
    UNDEFINED = "X". Each member gets an is_<name> property when the class
    is created, e.g. ``VotingRight.VOTING.is_voting``.
    """

    @property
    def char(self) -> str:
        """The character this member encodes to."""
        return str(self.value)

    @property
    def is_undefined(self) -> bool:
        return self.value == UNDEFINED_CHAR

    @classmethod
    def from_char(
        cls, char: str, position: int | None = None,
    ) -> Ok[Self] | Err[InvalidAttribute]:
        """Decode one character. 'X' always decodes to UNDEFINED.

        position is the 0-based offset within the code, recorded on the error.
        """
        try:
            return Ok(cls(char))
        except ValueError:
            return Err(InvalidAttribute.create(
                position=position,
                char=char,
                attribute=cls.__name__,
                source="iso10962.taxonomy.base.Attribute.from_char",
            ))

    @classmethod
    def chars(cls) -> frozenset[str]:
        """Every character this enumeration accepts, 'X' included."""
        return frozenset(str(m.value) for m in cls)


# ---------------------------------------------------------------------------
# AttributeGroup
# ---------------------------------------------------------------------------


class AttributeGroup:
    """Four attributes bound to positions 2..5, in field declaration order.

    Subclasses are frozen slotted dataclasses with a ``tag`` class variable
    (the group character) and exactly four Attribute-typed fields. ``name``
    is the suffix of the category's is_<name> predicate; it defaults to the
    snake_case class name.
    """

    __slots__ = ()

    tag: ClassVar[str]
    name: ClassVar[str]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = snake_case(cls.__name__)

    @classmethod
    def schema(cls) -> tuple[tuple[str, type[Attribute]], ...]:
        """(field name, attribute type) pairs in position order."""
        return _group_schema(cls)

    @classmethod
    def decode(cls, raw: str) -> Ok[Self] | Err[CfiError]:
        """Decode positions 2..5 of a 6-character code."""
        if len(raw) != CFI_LENGTH:
            return Err(InvalidLength.create(
                len(raw), source="iso10962.taxonomy.base.AttributeGroup.decode",
            ))
        decoded = sequence(
            attr.from_char(raw[position], position)
            for position, (_, attr) in zip(ATTRIBUTE_POSITIONS, cls.schema(), strict=True)
        )
        match decoded:
            case Err() as e:
                return e
            case Ok(values):
                return Ok(cls(*values))  # type: ignore[call-arg]

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return tuple(getattr(self, name) for name, _ in self.schema())

    def encode(self) -> str:
        """The four attribute characters."""
        return "".join(a.char for a in self.attributes)


@cache
def _group_schema(cls: type[AttributeGroup]) -> tuple[tuple[str, type[Attribute]], ...]:
    hints = get_type_hints(cls)
    schema = tuple((f.name, hints[f.name]) for f in fields(cls))  # type: ignore[arg-type]
    if len(schema) != len(ATTRIBUTE_POSITIONS):
        raise TypeError(
            f"{cls.__name__} must declare {len(ATTRIBUTE_POSITIONS)} attributes, "
            f"got {len(schema)}"
        )
    for name, attr in schema:
        if not (isinstance(attr, type) and issubclass(attr, Attribute)):
            raise TypeError(f"{cls.__name__}.{name} is not an Attribute enumeration")
    return schema


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


class Category:
    """A structured category: one group, selected by the second character.

    Subclasses are frozen slotted dataclasses with a single ``group`` field,
    a ``tag`` class variable (the category character) and a ``groups``
    class variable listing every legal AttributeGroup class. Each group adds
    an is_<group.name> property at class creation, e.g.
    ``equity.is_preferred_convertible``; two groups may not share a name.
    """

    __slots__ = ()

    tag: ClassVar[str]
    groups: ClassVar[tuple[type[AttributeGroup], ...]]
    group: AttributeGroup

    @classmethod
    def group_table(cls) -> Mapping[str, type[AttributeGroup]]:
        """Group tag -> group class."""
        return _group_table(cls)

    @classmethod
    def decode(cls, raw: str) -> Ok[Self] | Err[CfiError]:
        """Decode a full 6-character code whose first character is this category."""
        source = "iso10962.taxonomy.base.Category.decode"
        if len(raw) != CFI_LENGTH:
            return Err(InvalidLength.create(len(raw), source=source))
        if raw[CATEGORY_INDEX] != cls.tag:
            return Err(InvalidCategory.create(raw[CATEGORY_INDEX], source=source))
        group_cls = cls.group_table().get(raw[GROUP_INDEX])
        if group_cls is None:
            return Err(InvalidGroup.create(cls.tag, raw[GROUP_INDEX], source=source))
        match group_cls.decode(raw):
            case Err() as e:
                return e
            case Ok(group):
                return Ok(cls(group))  # type: ignore[call-arg]

    def encode(self) -> str:
        return f"{self.tag}{self.group.tag}{self.group.encode()}"

    def __str__(self) -> str:
        return self.encode()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        names = [g.name for g in cls.groups]
        if len(set(names)) != len(names):
            raise TypeError(f"{cls.__name__} declares duplicate group names: {names}")
        for group_cls in cls.groups:
            setattr(cls, f"is_{group_cls.name}", _is_instance_property(group_cls))


@cache
def _group_table(cls: type[Category]) -> Mapping[str, type[AttributeGroup]]:
    table = {g.tag: g for g in cls.groups}
    if len(table) != len(cls.groups):
        raise TypeError(f"{cls.__name__} declares duplicate group tags")
    return MappingProxyType(table)
