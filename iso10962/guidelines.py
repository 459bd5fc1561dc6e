"""Advisory ISO 10962 guidelines that parse() does not enforce.

parse() accepts every code whose characters are individually legal for their
positions. A few attribute descriptions in the standard add conventions
between positions; the ones that can be evaluated from the code alone are
checked here, on request only.
"""

from __future__ import annotations

from collections.abc import Callable

from iso10962.code import Code
from iso10962.core.errors import FieldViolation, ValidationError
from iso10962.core.result import Err, Ok
from iso10962.taxonomy.equities import (
    DepositoryReceipt,
    Dependency,
    Equity,
    RedemptionConversion,
)


def _equity_receipt_redemption(code: Code) -> FieldViolation | None:
    """Receipts on common shares or LP units: redemption must be N or X."""
    match code.category:
        case Equity(group=DepositoryReceipt() as receipt):
            if receipt.dependency not in (Dependency.COMMON, Dependency.LLP_UNIT):
                return None
            if receipt.redemption in (
                RedemptionConversion.PERPETUAL, RedemptionConversion.UNDEFINED,
            ):
                return None
            return FieldViolation(
                path="equity.depository_receipt.redemption",
                constraint=(
                    f"must be N or X when dependency is {receipt.dependency.char}"
                ),
                actual_value=receipt.redemption.char,
            )
        case _:
            return None


_RULES: tuple[Callable[[Code], FieldViolation | None], ...] = (
    _equity_receipt_redemption,
)


def guideline_violations(code: Code) -> tuple[FieldViolation, ...]:
    """Every advisory guideline the code breaks, in rule order."""
    return tuple(v for rule in _RULES if (v := rule(code)) is not None)


def check_guidelines(code: Code) -> Ok[Code] | Err[ValidationError]:
    violations = guideline_violations(code)
    if violations:
        return Err(ValidationError(
            message=f"CFI code '{code}' breaks {len(violations)} guideline(s)",
            code="GUIDELINE_VIOLATION",
            source="iso10962.guidelines.check_guidelines",
            fields=violations,
        ))
    return Ok(code)
