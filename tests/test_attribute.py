"""Tests for iso10962.taxonomy.base.Attribute — single-character enumerations."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from conftest import ALL_GROUPS, UNLISTED_GROUPS
from iso10962.core.errors import InvalidAttribute
from iso10962.core.result import Err, Ok, unwrap
from iso10962.taxonomy.base import Attribute, snake_case
from iso10962.taxonomy.common import Form, NotApplicable, Standardized
from iso10962.taxonomy.equities import Ownership, VotingRight

ALL_ATTRIBUTES: tuple[type[Attribute], ...] = tuple(sorted(
    {attr for _, group_cls in ALL_GROUPS + UNLISTED_GROUPS for _, attr in group_cls.schema()},
    key=lambda a: f"{a.__module__}.{a.__qualname__}",
))


class TestFromChar:
    def test_known_char(self) -> None:
        assert Form.from_char("B") == Ok(Form.BEARER)

    def test_undefined(self) -> None:
        assert unwrap(VotingRight.from_char("X")) is VotingRight.UNDEFINED

    def test_unknown_char(self) -> None:
        result = Form.from_char("9", position=5)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidAttribute)
        assert result.error.position == 5
        assert result.error.char == "9"
        assert result.error.attribute == "Form"

    def test_unknown_char_without_position(self) -> None:
        result = Ownership.from_char("Q")
        assert isinstance(result, Err)
        assert result.error.position is None

    def test_lowercase_rejected(self) -> None:
        assert isinstance(Form.from_char("b"), Err)
        assert isinstance(Form.from_char("x"), Err)

    def test_multi_char_rejected(self) -> None:
        assert isinstance(Form.from_char("BR"), Err)

    def test_not_applicable_only_x(self) -> None:
        assert NotApplicable.chars() == frozenset("X")
        assert isinstance(NotApplicable.from_char("B"), Err)


class TestMemberApi:
    def test_char(self) -> None:
        assert Form.REGISTERED.char == "R"

    def test_is_undefined(self) -> None:
        assert Form.UNDEFINED.is_undefined
        assert not Form.BEARER.is_undefined

    def test_member_predicates(self) -> None:
        assert VotingRight.VOTING.is_voting
        assert not VotingRight.VOTING.is_non_voting
        assert VotingRight.NON_VOTING.is_non_voting
        assert Standardized.NON_STANDARDIZED.is_non_standardized

    def test_unknown_predicate_raises(self) -> None:
        with pytest.raises(AttributeError):
            _ = Form.BEARER.is_voting

    def test_unknown_attribute_raises(self) -> None:
        with pytest.raises(AttributeError):
            _ = Form.BEARER.colour

    def test_predicates_are_class_properties(self) -> None:
        assert isinstance(VotingRight.__dict__["is_voting"], property)

    def test_declared_predicate_clash_rejected(self) -> None:
        with pytest.raises(TypeError, match="clashes with a generated predicate"):

            class Clashing(Attribute):
                VOTING = "V"
                UNDEFINED = "X"

                @property
                def is_voting(self) -> bool:
                    return False

    def test_chars(self) -> None:
        assert Form.chars() == frozenset("BRNMX")


class TestEveryAttribute:
    @pytest.mark.parametrize("attr", ALL_ATTRIBUTES, ids=lambda a: a.__qualname__)
    def test_contains_undefined(self, attr: type[Attribute]) -> None:
        assert attr("X").name == "UNDEFINED"

    @pytest.mark.parametrize("attr", ALL_ATTRIBUTES, ids=lambda a: a.__qualname__)
    def test_values_are_single_uppercase_letters(self, attr: type[Attribute]) -> None:
        for member in attr:
            assert len(member.char) == 1
            assert "A" <= member.char <= "Z"

    @pytest.mark.parametrize("attr", ALL_ATTRIBUTES, ids=lambda a: a.__qualname__)
    def test_from_char_inverts_char(self, attr: type[Attribute]) -> None:
        for member in attr:
            assert unwrap(attr.from_char(member.char)) is member

    @given(st.sampled_from(ALL_ATTRIBUTES), st.characters(codec="ascii"))
    def test_from_char_accepts_exactly_chars(
        self, attr: type[Attribute], char: str,
    ) -> None:
        result = attr.from_char(char)
        assert isinstance(result, Ok) == (char in attr.chars())


class TestSnakeCase:
    def test_single_word(self) -> None:
        assert snake_case("Common") == "common"

    def test_camel(self) -> None:
        assert snake_case("PreferredConvertible") == "preferred_convertible"
        assert snake_case("LlpUnit") == "llp_unit"
