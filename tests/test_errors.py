"""Tests for iso10962.core.errors — Error value hierarchy."""

from __future__ import annotations

import dataclasses
import json

import pytest

from iso10962.core.errors import (
    CfiError,
    FieldViolation,
    InvalidAttribute,
    InvalidCategory,
    InvalidGroup,
    InvalidLength,
    ValidationError,
)


def _base() -> CfiError:
    return CfiError(message="base error", code="E001", source="test.fn")


# ---------------------------------------------------------------------------
# CfiError base
# ---------------------------------------------------------------------------


class TestCfiError:
    def test_is_frozen(self) -> None:
        err = _base()
        with pytest.raises(dataclasses.FrozenInstanceError):
            err.message = "changed"  # type: ignore[misc]

    def test_to_dict_keys(self) -> None:
        assert set(_base().to_dict()) == {"message", "code", "source"}

    def test_to_dict_json_serializable(self) -> None:
        json.dumps(_base().to_dict())

    def test_equality_is_structural(self) -> None:
        assert InvalidLength.create(2, "a") == InvalidLength.create(2, "a")
        assert InvalidLength.create(2, "a") != InvalidLength.create(3, "a")


class TestWithContext:
    def test_prepends_context(self) -> None:
        assert _base().with_context("line 4").message == "line 4: base error"

    def test_preserves_subclass_fields(self) -> None:
        err = InvalidGroup.create("E", "Z", source="x")
        ctx = err.with_context("row 12")
        assert isinstance(ctx, InvalidGroup)
        assert ctx.char == "Z"
        assert ctx.category == "E"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestInvalidLength:
    def test_create(self) -> None:
        err = InvalidLength.create(2, source="t")
        assert err.length == 2
        assert err.code == "INVALID_LENGTH"
        assert "got 2" in err.message

    def test_to_dict(self) -> None:
        assert InvalidLength.create(7, source="t").to_dict()["length"] == 7


class TestInvalidCategory:
    def test_create(self) -> None:
        err = InvalidCategory.create("Q", source="t")
        assert err.char == "Q"
        assert err.position == 0
        assert err.code == "INVALID_CATEGORY"
        assert "'Q'" in err.message

    def test_to_dict(self) -> None:
        d = InvalidCategory.create("Q", source="t").to_dict()
        assert d["char"] == "Q"
        assert d["position"] == 0


class TestInvalidGroup:
    def test_create(self) -> None:
        err = InvalidGroup.create("E", "Z", source="t")
        assert (err.category, err.char, err.position) == ("E", "Z", 1)
        assert err.code == "INVALID_GROUP"

    def test_to_dict_json_serializable(self) -> None:
        json.dumps(InvalidGroup.create("E", "Z", source="t").to_dict())


class TestInvalidAttribute:
    def test_create_with_position(self) -> None:
        err = InvalidAttribute.create(position=5, char="9", attribute="Form", source="t")
        assert err.position == 5
        assert err.char == "9"
        assert err.attribute == "Form"
        assert err.message == "Invalid Form '9' at position 5"

    def test_create_without_position(self) -> None:
        err = InvalidAttribute.create(position=None, char="9", attribute="Form", source="t")
        assert err.position is None
        assert err.message == "Invalid Form '9'"

    def test_to_dict(self) -> None:
        err = InvalidAttribute.create(position=3, char="Q", attribute="Ownership", source="t")
        assert err.to_dict()["attribute"] == "Ownership"


# ---------------------------------------------------------------------------
# ValidationError
# ---------------------------------------------------------------------------


class TestValidationError:
    def test_fields_serialized(self) -> None:
        ve = ValidationError(
            message="bad", code="GUIDELINE_VIOLATION", source="t",
            fields=(FieldViolation("a.b", "must be N or X", "R"),),
        )
        d = ve.to_dict()
        assert d["fields"] == [
            {"path": "a.b", "constraint": "must be N or X", "actual_value": "R"},
        ]
        json.dumps(d)

    def test_field_violation_is_frozen(self) -> None:
        fv = FieldViolation(path="p", constraint="c", actual_value="v")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fv.path = "changed"  # type: ignore[misc]

    def test_all_errors_are_cfi_errors(self) -> None:
        for err in (
            InvalidLength.create(0, "t"),
            InvalidCategory.create("Q", "t"),
            InvalidGroup.create("E", "Z", "t"),
            InvalidAttribute.create(2, "Q", "VotingRight", "t"),
        ):
            assert isinstance(err, CfiError)
