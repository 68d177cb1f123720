"""Search for the split of a target that maximizes ``a * b * |a - b|``.

The reference behaviour is an ascending scan over ``a = 0 .. N // 2``. Pairs
are symmetric (``score(a) == score(N - a)``), so the lower half covers every
distinct pair and the smallest maximizing ``a`` always lives there. A strict
``>`` comparison during the scan keeps the first maximum found, which is the
smallest ``a`` on ties.

A closed form is available as well: writing ``t = N - 2a`` the objective is
``t * (N**2 - t**2) / 4``, concave for ``t >= 0`` with its real maximum at
``t = N / sqrt(3)``. The integer optimum is therefore one of the two integers
around ``a* = (N - N / sqrt(3)) / 2``.
"""
from __future__ import annotations

import math
from typing import Any

import pandas as pd

from .types import (
    ErrorCodes,
    PairingError,
    PairingResult,
    StrategyType,
    check_target,
)

DEFAULT_TARGET = 8
DEFAULT_MAX_SCAN = 1_000_000

SCAN_COLUMNS = ["a", "b", "product", "difference", "score"]


def score(a: int, target: int) -> int:
    b = target - a
    return a * b * abs(a - b)


def _best_of(candidates: list[int], target: int) -> int:
    # candidates must be ascending; strict ">" keeps the smallest a on ties
    best_a = candidates[0]
    best_score = score(best_a, target)
    for a in candidates[1:]:
        s = score(a, target)
        if s > best_score:
            best_a, best_score = a, s
    return best_a


def _scan(target: int) -> tuple[int, int]:
    """Return ``(best_a, evaluations)`` from the ascending half-range scan."""
    best_a = 0
    best_score = score(0, target)
    evaluations = 1
    for a in range(1, target // 2 + 1):
        s = score(a, target)
        evaluations += 1
        if s > best_score:
            best_a, best_score = a, s
    return best_a, evaluations


def _closed_form(target: int) -> tuple[int, int]:
    """Return ``(best_a, evaluations)`` using the analytic optimum.

    ``t_lo = isqrt(N**2 // 3)`` satisfies ``t_lo <= N / sqrt(3) < t_lo + 1``,
    which pins ``a*`` inside ``((N - t_lo - 1) / 2, (N - t_lo) / 2]``. A window
    one wider on each side holds both ``floor(a*)`` and ``ceil(a*)``.
    """
    half = target // 2
    t_lo = math.isqrt(target * target // 3)
    lo = max(0, (target - t_lo - 1) // 2 - 1)
    hi = min(half, (target - t_lo) // 2 + 2)
    candidates = list(range(lo, hi + 1))
    return _best_of(candidates, target), len(candidates)


def _resolve_strategy(strategy: str, target: int, max_scan: int) -> str:
    if strategy not in ("scan", "closed_form", "auto"):
        raise PairingError(
            ErrorCodes.CONFIG_ERROR,
            f"Unknown search strategy '{strategy}'",
            details={"strategy": strategy},
        )
    scan_size = target // 2 + 1
    if strategy == "auto":
        return "scan" if scan_size <= max_scan else "closed_form"
    if strategy == "scan" and scan_size > max_scan:
        raise PairingError(
            ErrorCodes.SEARCH_LIMIT,
            f"Scan over {scan_size} splits exceeds max_scan={max_scan}",
            user_message=(
                f"target {target} is too large to scan (limit {max_scan}); "
                "use strategy 'closed_form' or 'auto'"
            ),
            details={"target": target, "scan_size": scan_size, "max_scan": max_scan},
        )
    return strategy


def solve(
    target: int,
    *,
    strategy: StrategyType = "scan",
    max_scan: int = DEFAULT_MAX_SCAN,
) -> tuple[PairingResult, dict[str, Any]]:
    """Solve for ``target`` and return the result with search telemetry."""
    check_target(target)
    used = _resolve_strategy(strategy, target, max_scan)
    if used == "scan":
        best_a, evaluations = _scan(target)
    else:
        best_a, evaluations = _closed_form(target)
    telemetry = {"strategy": used, "evaluations": evaluations}
    return PairingResult.from_split(target, best_a), telemetry


def optimize(
    target: int,
    *,
    strategy: StrategyType = "scan",
    max_scan: int = DEFAULT_MAX_SCAN,
) -> PairingResult:
    result, _ = solve(target, strategy=strategy, max_scan=max_scan)
    return result


def scan_table(target: int, *, max_scan: int = DEFAULT_MAX_SCAN) -> pd.DataFrame:
    """Every candidate split of the reference scan as a DataFrame."""
    check_target(target)
    _resolve_strategy("scan", target, max_scan)
    rows = []
    for a in range(target // 2 + 1):
        b = target - a
        rows.append((a, b, a * b, b - a, a * b * (b - a)))
    # object dtype keeps Python ints; scores pass int64 range near N ~ 4.6e6
    return pd.DataFrame(rows, columns=SCAN_COLUMNS, dtype=object)
