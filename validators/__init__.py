"""Pairing result validation module."""

from .pair_rules import validate_result, validate_result_simple
from .types import InvalidReason, Rules, ValidationResult

__all__ = [
    "validate_result",
    "validate_result_simple",
    "Rules",
    "ValidationResult",
    "InvalidReason",
]
