from __future__ import annotations

import pytest

from processes.pairing import InvalidInputError, PairingResult, optimize, score
from validators import validate_result

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, settings  # noqa: E402
from hypothesis import strategies as st  # noqa: E402


@settings(max_examples=200, deadline=None)
@given(st.integers(min_value=0, max_value=10_000))  # type: ignore[misc]
def test_property_pair_sums_to_target(target: int) -> None:
    result = optimize(target)
    assert result.a + result.b == target
    assert 0 <= result.a <= result.b


@settings(max_examples=100, deadline=None)
@given(st.integers(min_value=0, max_value=3_000), st.data())  # type: ignore[misc]
def test_property_no_split_beats_result(target: int, data: st.DataObject) -> None:
    result = optimize(target)
    other = data.draw(st.integers(min_value=0, max_value=target))
    assert result.score >= score(other, target)


@settings(max_examples=200, deadline=None)
@given(st.integers(min_value=0, max_value=10**12))  # type: ignore[misc]
def test_property_closed_form_is_valid_record(target: int) -> None:
    result = optimize(target, strategy="closed_form")
    assert validate_result(result.to_dict()).valid
    assert result == PairingResult.from_split(target, result.a)


@given(st.integers(max_value=-1))  # type: ignore[misc]
def test_property_negative_targets_rejected(target: int) -> None:
    with pytest.raises(InvalidInputError):
        optimize(target)
