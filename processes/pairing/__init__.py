"""Number pairing process package.

Finds the split ``a + b = N`` of a non-negative integer target that maximizes
``a * b * |a - b|``. The optimizer is pure and importable on its own; the
adapter adds config loading, validation and rendering for the CLI.
"""
from .optimizer import DEFAULT_TARGET, optimize, scan_table, score, solve
from .types import ErrorCodes, InvalidInputError, PairingError, PairingResult

__all__ = [
    "DEFAULT_TARGET",
    "ErrorCodes",
    "InvalidInputError",
    "PairingError",
    "PairingResult",
    "optimize",
    "scan_table",
    "score",
    "solve",
]
