from __future__ import annotations

import pytest

from processes.pairing import PairingResult, scan_table
from processes.pairing.render import (
    describe_pair,
    format_number,
    make_line,
    render_scan,
    render_text,
    result_record,
)


@pytest.mark.parametrize(
    "value,expected",
    [(48, "48"), (8.0, "8"), (0, "0"), (1.5, "1.5"), (1.23456, "1.2346"), (2.10, "2.1")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_make_line() -> None:
    assert make_line(3) == "---"
    assert make_line(0) == ""


def test_describe_pair() -> None:
    r = PairingResult.from_split(8, 2)
    assert describe_pair(r) == "2 and 6 -> 8 (difference: 4, product: 12 -> result: 48)"


def test_render_text() -> None:
    r = PairingResult.from_split(8, 2)
    text = render_text(r, {"strategy": "scan", "evaluations": 5})
    lines = text.splitlines()
    assert lines[0] == "Best Result: 48 (Solved in 5 evaluations)"
    assert set(lines[1]) == {"-"}
    assert lines[-1] == "a=2, b=6, product=12, difference=4, score=48"


def test_render_text_singular_evaluation() -> None:
    r = PairingResult.from_split(0, 0)
    assert "(Solved in 1 evaluation)" in render_text(r, {"evaluations": 1})


def test_result_record_adds_telemetry() -> None:
    r = PairingResult.from_split(8, 2)
    rec = result_record(r, {"strategy": "scan", "evaluations": 5, "ignored": 1})
    assert rec["strategy"] == "scan"
    assert rec["evaluations"] == 5
    assert "ignored" not in rec


def test_render_scan_has_header() -> None:
    out = render_scan(scan_table(4))
    header = out.splitlines()[0].split()
    assert header == ["a", "b", "product", "difference", "score"]
    assert len(out.splitlines()) == 4
