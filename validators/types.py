"""Types and models for pairing result validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidReason(Enum):
    """Enumerated error codes for pairing result validation failures."""

    NEGATIVE_MEMBER = "negative_member"
    SUM_MISMATCH = "sum_mismatch"
    PRODUCT_MISMATCH = "product_mismatch"
    DIFFERENCE_MISMATCH = "difference_mismatch"
    SCORE_MISMATCH = "score_mismatch"
    NON_CANONICAL_ORDER = "non_canonical_order"


@dataclass
class Rules:
    """Configuration for pairing validation rules."""

    # Search results are reported with a <= b
    require_canonical_order: bool = True


@dataclass
class ValidationResult:
    """Result of pairing validation with detailed diagnostics."""

    valid: bool
    reasons: list[InvalidReason] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.reasons is None:
            self.reasons = []
