"""Core pairing result validation rules."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .types import InvalidReason, Rules, ValidationResult


def validate_result(record: Mapping[str, Any], rules: Rules | None = None) -> ValidationResult:
    """Validate a pairing record according to all rules.

    Pure function with no I/O dependencies.

    Args:
        record: Mapping with the pairing fields:
            - target: int
            - a, b: int
            - product, difference, score: int
        rules: Rules configuration object (defaults to ``Rules()``)

    Returns:
        ValidationResult with validation status and detailed diagnostics
    """
    rules = rules or Rules()
    reasons: list[InvalidReason] = []

    target = int(record["target"])
    a = int(record["a"])
    b = int(record["b"])

    if a < 0 or b < 0:
        reasons.append(InvalidReason.NEGATIVE_MEMBER)

    if a + b != target:
        reasons.append(InvalidReason.SUM_MISMATCH)

    # Derived metrics must agree with the pair itself
    if int(record["product"]) != a * b:
        reasons.append(InvalidReason.PRODUCT_MISMATCH)
    if int(record["difference"]) != abs(a - b):
        reasons.append(InvalidReason.DIFFERENCE_MISMATCH)
    if int(record["score"]) != int(record["product"]) * int(record["difference"]):
        reasons.append(InvalidReason.SCORE_MISMATCH)

    if rules.require_canonical_order and a > b:
        reasons.append(InvalidReason.NON_CANONICAL_ORDER)

    return ValidationResult(valid=len(reasons) == 0, reasons=reasons)


def validate_result_simple(record: Mapping[str, Any]) -> bool:
    """Simple boolean validation."""
    return validate_result(record).valid
