from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Literal

StrategyType = Literal["scan", "closed_form", "auto"]


class ErrorCodes(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    CONFIG_ERROR = "CONFIG_ERROR"
    SEARCH_LIMIT = "SEARCH_LIMIT"
    INVALID_RESULT = "INVALID_RESULT"


class PairingError(Exception):
    def __init__(
        self,
        code: ErrorCodes,
        message: str,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


class InvalidInputError(PairingError):
    """A target (or split) that no pair of non-negative integers can satisfy."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(ErrorCodes.INVALID_INPUT, message, user_message, details)


def check_target(target: Any) -> int:
    # bool is an int subclass but never a meaningful target
    if isinstance(target, bool) or not isinstance(target, int):
        raise InvalidInputError(
            f"Target must be an integer, got {type(target).__name__}",
            user_message="target must be a non-negative integer",
            details={"target": repr(target)},
        )
    if target < 0:
        raise InvalidInputError(
            f"Target must be non-negative, got {target}",
            user_message=f"target {target} is negative; two non-negative integers cannot sum to it",
            details={"target": target},
        )
    return target


@dataclass(frozen=True)
class PairingResult:
    target: int
    a: int
    b: int
    product: int
    difference: int
    score: int

    @classmethod
    def from_split(cls, target: int, a: int) -> PairingResult:
        """Build the record for the split ``(a, target - a)``."""
        check_target(target)
        if isinstance(a, bool) or not isinstance(a, int) or not 0 <= a <= target:
            raise InvalidInputError(
                f"Split {a!r} is outside [0, {target}]",
                details={"target": target, "a": repr(a)},
            )
        b = target - a
        product = a * b
        difference = abs(a - b)
        return cls(
            target=target,
            a=a,
            b=b,
            product=product,
            difference=difference,
            score=product * difference,
        )

    def same_pair(self, other: PairingResult) -> bool:
        # (2, 6) and (6, 2) are the same pairing of 8
        if self.target != other.target:
            return False
        return {self.a, self.b} == {other.a, other.b}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> PairingResult:
        return cls(**{k: v for k, v in d.items() if k in cls.__annotations__})
