from __future__ import annotations

import dataclasses

import pytest

from processes.pairing.types import (
    ErrorCodes,
    InvalidInputError,
    PairingError,
    PairingResult,
    check_target,
)


def test_from_split_computes_metrics() -> None:
    r = PairingResult.from_split(8, 2)
    assert (r.a, r.b, r.product, r.difference, r.score) == (2, 6, 12, 4, 48)


def test_from_split_keeps_orientation() -> None:
    r = PairingResult.from_split(8, 6)
    assert (r.a, r.b) == (6, 2)
    assert r.score == 48


@pytest.mark.parametrize("a", [-1, 9, 2.0])
def test_from_split_rejects_out_of_range(a: object) -> None:
    with pytest.raises(InvalidInputError):
        PairingResult.from_split(8, a)  # type: ignore[arg-type]


def test_same_pair_ignores_orientation() -> None:
    assert PairingResult.from_split(8, 2).same_pair(PairingResult.from_split(8, 6))
    assert not PairingResult.from_split(8, 2).same_pair(PairingResult.from_split(8, 3))
    assert not PairingResult.from_split(8, 2).same_pair(PairingResult.from_split(9, 2))


def test_result_is_frozen() -> None:
    r = PairingResult.from_split(8, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.a = 3  # type: ignore[misc]


def test_dict_round_trip_ignores_extra_keys() -> None:
    r = PairingResult.from_split(8, 2)
    d = r.to_dict()
    assert d == {"target": 8, "a": 2, "b": 6, "product": 12, "difference": 4, "score": 48}
    assert PairingResult.from_dict({**d, "strategy": "scan"}) == r


def test_error_defaults() -> None:
    e = PairingError(ErrorCodes.SEARCH_LIMIT, "too big")
    assert e.user_message == "too big"
    assert e.details == {}
    assert str(e) == "too big"


def test_check_target() -> None:
    assert check_target(0) == 0
    with pytest.raises(InvalidInputError) as exc:
        check_target(-3)
    assert isinstance(exc.value, PairingError)
    assert "negative" in exc.value.user_message
