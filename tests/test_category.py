"""Tests for iso10962.taxonomy — category group tables and Category decoding."""

from __future__ import annotations

from typing import ClassVar

import pytest

from iso10962 import parse
from iso10962.core.errors import InvalidCategory, InvalidGroup, InvalidLength
from iso10962.core.result import Err, Ok, unwrap
from iso10962.taxonomy.base import AttributeGroup, Category
from iso10962.taxonomy.civ import Civ
from iso10962.taxonomy.debt import Debt
from iso10962.taxonomy.equities import (
    Equity,
    PreferredConvertible,
)
from iso10962.taxonomy.futures import Future
from iso10962.taxonomy.options import Listed, OtherListed, OtherUnlisted, Unlisted
from iso10962.taxonomy.rights import Right
from iso10962.taxonomy.swaps import Swap

GROUP_TAGS: dict[type[Category], str] = {
    Equity: "SPCFLDYM",
    Debt: "BCWTYSEGANDM",
    Civ: "IHBEPSFM",
    Right: "ASPWFDM",
    Listed: "CPM",
    Unlisted: "RTECFM",
    Future: "FC",
    Swap: "RTECFM",
}


# ---------------------------------------------------------------------------
# Group tables
# ---------------------------------------------------------------------------


class TestGroupTables:
    @pytest.mark.parametrize("category", list(GROUP_TAGS), ids=lambda c: c.__name__)
    def test_group_tags(self, category: type[Category]) -> None:
        assert set(category.group_table()) == set(GROUP_TAGS[category])

    @pytest.mark.parametrize("category", list(GROUP_TAGS), ids=lambda c: c.__name__)
    def test_x_is_never_a_group(self, category: type[Category]) -> None:
        assert "X" not in category.group_table()

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            Equity.group_table()["Z"] = PreferredConvertible  # type: ignore[index]

    def test_category_tags(self) -> None:
        assert [c.tag for c in GROUP_TAGS] == ["E", "D", "C", "R", "O", "H", "F", "S"]


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestCategoryDecode:
    def test_equity(self) -> None:
        equity = unwrap(Equity.decode("EFVRCB"))
        assert isinstance(equity.group, PreferredConvertible)
        assert equity.encode() == "EFVRCB"

    def test_unknown_group(self) -> None:
        result = Equity.decode("EZVUFB")
        assert result == Err(InvalidGroup.create(
            "E", "Z", source="iso10962.taxonomy.base.Category.decode",
        ))

    def test_group_of_another_category(self) -> None:
        # W is a debt group, not an equity one
        result = Equity.decode("EWXXXX")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidGroup)

    def test_tag_mismatch(self) -> None:
        result = Equity.decode("DBFTFB")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidCategory)
        assert result.error.char == "D"

    def test_wrong_length(self) -> None:
        result = Debt.decode("DBFTF")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidLength)

    def test_same_group_tag_different_schema(self) -> None:
        # C is Convertible in debt but Credit in swaps
        assert isinstance(Debt.decode("DCFTFB"), Ok)
        assert isinstance(Swap.decode("SCUCCC"), Ok)

    def test_str(self) -> None:
        assert str(unwrap(Future.decode("FFICNX"))) == "FFICNX"


# ---------------------------------------------------------------------------
# Group predicates
# ---------------------------------------------------------------------------


class TestGroupPredicates:
    def test_equity_groups(self) -> None:
        equity = unwrap(Equity.decode("EFVRCB"))
        assert equity.is_preferred_convertible
        assert not equity.is_preferred
        assert not equity.is_common

    def test_multi_word_names(self) -> None:
        assert unwrap(Debt.decode("DWFTFB")).is_warrant_attached
        assert unwrap(Equity.decode("ELVUFB")).is_llp_unit
        assert unwrap(Civ.decode("CFOIEU")).is_fund_of_funds

    def test_other_groups_share_one_predicate(self) -> None:
        assert unwrap(parse("OMXXXX")).category.is_other
        assert unwrap(Unlisted.decode("HMPAVN")).is_other
        assert unwrap(Equity.decode("EMXXXB")).is_other
        assert not unwrap(Listed.decode("OCESPS")).is_other

    def test_options_do_not_expose_class_suffixes(self) -> None:
        listed = unwrap(Listed.decode("OMXXXX"))
        assert not hasattr(listed, "is_other_listed")

    def test_predicates_are_class_properties(self) -> None:
        assert isinstance(Equity.__dict__["is_preferred_convertible"], property)
        assert isinstance(Listed.__dict__["is_other"], property)

    def test_duplicate_group_names_rejected(self) -> None:
        with pytest.raises(TypeError, match="duplicate group names"):

            class Doubled(Category):
                tag: ClassVar[str] = "Q"
                groups: ClassVar[tuple[type[AttributeGroup], ...]] = (
                    OtherListed, OtherUnlisted,
                )

    def test_unknown_predicate_raises(self) -> None:
        equity = unwrap(Equity.decode("ESVUFB"))
        with pytest.raises(AttributeError):
            _ = equity.is_bond

    def test_unknown_attribute_raises(self) -> None:
        with pytest.raises(AttributeError):
            _ = unwrap(Equity.decode("ESVUFB")).voting_right
