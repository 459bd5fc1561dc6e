"""Attributes shared by several categories."""

from __future__ import annotations

from iso10962.taxonomy.base import Attribute


class Form(Attribute):
    """Form (negotiability, transmission)."""

    BEARER = "B"  # owner not registered in the books of the issuer or registrar
    REGISTERED = "R"
    BEARER_REGISTERED = "N"  # issued in both forms under the same identification number
    OTHER = "M"
    UNDEFINED = "X"


class NotApplicable(Attribute):
    """Position with no meaning for the group; only 'X' is legal."""

    UNDEFINED = "X"


class Standardized(Attribute):
    """Whether the contract terms are standardized."""

    STANDARDIZED = "S"
    NON_STANDARDIZED = "N"
    UNDEFINED = "X"
