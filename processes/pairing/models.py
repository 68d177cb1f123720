from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .optimizer import DEFAULT_MAX_SCAN, DEFAULT_TARGET


class PairingConfig(BaseModel):
    # negative targets pass through so the optimizer reports INVALID_INPUT
    target: int = DEFAULT_TARGET
    strategy: Literal["scan", "closed_form", "auto"] = "scan"
    max_scan: int = Field(default=DEFAULT_MAX_SCAN, gt=0)
    output: Literal["text", "json"] = "text"
    show_scan: bool = False
