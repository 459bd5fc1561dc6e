"""Hypothesis strategies and pytest fixtures for iso10962.

Structured strategies are derived from the group schemas themselves, so
every category, group and attribute enumeration is covered without a
hand-maintained list of codes.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from iso10962.code import STRUCTURED_CATEGORIES, UNSTRUCTURED_CATEGORIES, Code
from iso10962.taxonomy.base import AttributeGroup, Category
from iso10962.taxonomy.options import Unlisted
from iso10962.taxonomy.unstructured import UnstructuredCategory

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# TABLES
# ===================================================================

ALL_GROUPS: tuple[tuple[type[Category], type[AttributeGroup]], ...] = tuple(
    (category_cls, group_cls)
    for category_cls in STRUCTURED_CATEGORIES.values()
    for group_cls in category_cls.groups
)

# Category H groups, decoded only with DecoderConfig(decode_unlisted_options=True)
UNLISTED_GROUPS: tuple[tuple[type[Category], type[AttributeGroup]], ...] = tuple(
    (Unlisted, group_cls) for group_cls in Unlisted.groups
)

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# ===================================================================
# PRIMITIVE STRATEGIES
# ===================================================================


def code_chars() -> SearchStrategy[str]:
    """Characters a CFI code may plausibly contain, plus near misses."""
    return st.sampled_from(UPPERCASE + "abcxyz0123456789 -")


def raw_codes(min_size: int = 0, max_size: int = 10) -> SearchStrategy[str]:
    """Arbitrary strings over code_chars(), any length in range."""
    return st.text(alphabet=code_chars(), min_size=min_size, max_size=max_size)


# ===================================================================
# DOMAIN STRATEGIES
# ===================================================================


@st.composite
def groups(draw: st.DrawFn, group_cls: type[AttributeGroup]) -> AttributeGroup:
    """A group instance with every attribute drawn from its enumeration."""
    values = [draw(st.sampled_from(list(attr))) for _, attr in group_cls.schema()]
    return group_cls(*values)  # type: ignore[call-arg]


@st.composite
def structured_codes(draw: st.DrawFn) -> Code:
    """A Code in one of the categories with a group schema."""
    category_cls, group_cls = draw(st.sampled_from(ALL_GROUPS))
    return Code(category_cls(draw(groups(group_cls))))  # type: ignore[call-arg, arg-type]


@st.composite
def unlisted_option_codes(draw: st.DrawFn) -> Code:
    """A category H Code decoded through its group schema."""
    _, group_cls = draw(st.sampled_from(UNLISTED_GROUPS))
    return Code(Unlisted(draw(groups(group_cls))))  # type: ignore[arg-type]


@st.composite
def unstructured_codes(draw: st.DrawFn, alphabet: str = UPPERCASE) -> Code:
    """A Code in one of the tag-only categories (H I J K L T M)."""
    category_cls: type[UnstructuredCategory] = draw(
        st.sampled_from(list(UNSTRUCTURED_CATEGORIES.values()))
    )
    tail = draw(st.text(alphabet=alphabet, min_size=5, max_size=5))
    return Code(category_cls(tail))  # type: ignore[call-arg, arg-type]


def latin1_tails() -> SearchStrategy[str]:
    """Any five characters a byte string can decode to."""
    return st.text(alphabet=st.characters(max_codepoint=255), min_size=5, max_size=5)


def codes() -> SearchStrategy[Code]:
    """Exactly one category variant, structured or not."""
    return st.one_of(structured_codes(), unstructured_codes())
