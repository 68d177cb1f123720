from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from .types import PairingResult

RULE_WIDTH = 48


def make_line(length: int) -> str:
    return "-" * length


def format_number(value: float, precision: int = 4) -> str:
    """Render whole values without a fraction, others trimmed to ``precision``."""
    if float(value).is_integer():
        return str(int(value))
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return text or "0"


def describe_pair(result: PairingResult) -> str:
    return (
        f"{format_number(result.a)} and {format_number(result.b)} -> {format_number(result.target)} "
        f"(difference: {format_number(result.difference)}, product: {format_number(result.product)} "
        f"-> result: {format_number(result.score)})"
    )


def render_text(result: PairingResult, telemetry: Mapping[str, Any] | None = None) -> str:
    evaluations = int((telemetry or {}).get("evaluations", 0))
    noun = "evaluation" if evaluations == 1 else "evaluations"
    lines = [
        f"Best Result: {format_number(result.score)} (Solved in {evaluations} {noun})",
        make_line(RULE_WIDTH),
        "Best Number Combination:",
        describe_pair(result),
        f"a={result.a}, b={result.b}, product={result.product}, "
        f"difference={result.difference}, score={result.score}",
    ]
    return "\n".join(lines)


def result_record(
    result: PairingResult, telemetry: Mapping[str, Any] | None = None
) -> dict[str, Any]:
    record = result.to_dict()
    telemetry = telemetry or {}
    if "strategy" in telemetry:
        record["strategy"] = str(telemetry["strategy"])
    if "evaluations" in telemetry:
        record["evaluations"] = int(telemetry["evaluations"])
    return record


def render_scan(df: pd.DataFrame) -> str:
    return df.to_string(index=False)
